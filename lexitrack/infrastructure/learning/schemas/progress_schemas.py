"""Pydantic schemas for progress and dashboard API responses."""

from datetime import date

from pydantic import BaseModel, Field

from lexitrack.infrastructure.learning.schemas.module_schemas import Module
from lexitrack.infrastructure.learning.schemas.vocabulary_schemas import VocabularyItem


class UserProgress(BaseModel):
    """Schema for the learner's progress record."""

    id: int
    total_learned: int
    total_reviewed: int
    last_study_date: date | None
    total_study_time: int = Field(..., description="Accumulated study time in minutes")
    streak_days: int
    current_module_id: int | None


class StudySessionRequest(BaseModel):
    """Schema for recording a study session."""

    minutes: int = Field(0, ge=0, description="Minutes studied in this session")


class CurrentModuleRequest(BaseModel):
    """Schema for setting the current module."""

    module_id: int | None = Field(..., description="Module to work on; null clears it")


class UserProgressResponse(BaseModel):
    """Schema for progress mutation responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    progress: UserProgress


class ReviewQueueResponse(BaseModel):
    """Schema for the review queue."""

    items: list[VocabularyItem] = Field(..., description="Least recently reviewed first")
    total: int


class FlashcardDeckResponse(BaseModel):
    """Schema for a shuffled flashcard deck."""

    module_id: int | None
    cards: list[VocabularyItem]
    total: int


class DashboardResponse(BaseModel):
    """Schema for the learner overview."""

    progress: UserProgress
    overall_progress: int = Field(..., ge=0, le=100, description="Mean module progress")
    learning_goal_percentage: int = Field(..., ge=0, le=100)
    next_module: Module | None
    review_queue: list[VocabularyItem]
