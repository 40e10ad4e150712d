"""Mapper for Module ORM ↔ Domain conversion."""

from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.module import Module
from lexitrack.models import Module as ModuleORM


class ModuleMapper:
    """Mapper for Module ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ModuleORM) -> Module:
        """Convert ORM model to domain entity."""
        return Module.create_with_id(
            id=ModuleId(orm_model.id),
            title=orm_model.title,
            description=orm_model.description,
            level=orm_model.level,
            theme=orm_model.theme,
            order=orm_model.order,
            completed=orm_model.completed,
            progress=orm_model.progress,
            word_count=orm_model.word_count,
        )

    def to_orm(self, domain_entity: Module, orm_model: ModuleORM | None = None) -> ModuleORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.title = domain_entity.title
            orm_model.description = domain_entity.description
            orm_model.level = domain_entity.level
            orm_model.theme = domain_entity.theme
            orm_model.order = domain_entity.order
            orm_model.completed = domain_entity.completed
            orm_model.progress = domain_entity.progress
            orm_model.word_count = domain_entity.word_count
            return orm_model

        # Create new
        return ModuleORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            title=domain_entity.title,
            description=domain_entity.description,
            level=domain_entity.level,
            theme=domain_entity.theme,
            order=domain_entity.order,
            completed=domain_entity.completed,
            progress=domain_entity.progress,
            word_count=domain_entity.word_count,
        )
