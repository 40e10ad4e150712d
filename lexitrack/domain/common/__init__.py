"""
Domain common module.

Shared building blocks for the domain layer:
- Entity and EntityId: identity-based objects and their typed ids
- ValueObject: immutable attribute-compared objects
- AggregateRoot and DomainEvent: consistency boundaries and their events
- Domain exceptions
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import (
    BusinessRuleViolationError,
    DomainError,
    InsufficientDataError,
    QuizSessionError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "BusinessRuleViolationError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "InsufficientDataError",
    "QuizSessionError",
    "ValidationError",
    "ValueObject",
]
