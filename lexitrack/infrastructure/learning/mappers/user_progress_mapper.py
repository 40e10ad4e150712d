"""Mapper for UserProgress ORM ↔ Domain conversion."""

from lexitrack.domain.common.value_objects import ModuleId, UserProgressId
from lexitrack.domain.learning.entities.user_progress import UserProgress
from lexitrack.models import UserProgress as UserProgressORM


class UserProgressMapper:
    """Mapper for UserProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserProgressORM) -> UserProgress:
        """Convert ORM model to domain entity."""
        return UserProgress(
            id=UserProgressId(orm_model.id),
            total_learned=orm_model.total_learned,
            total_reviewed=orm_model.total_reviewed,
            last_study_date=orm_model.last_study_date,
            total_study_time=orm_model.total_study_time,
            streak_days=orm_model.streak_days,
            current_module_id=(
                ModuleId(orm_model.current_module_id) if orm_model.current_module_id else None
            ),
        )

    def to_orm(
        self, domain_entity: UserProgress, orm_model: UserProgressORM | None = None
    ) -> UserProgressORM:
        """Convert domain entity to ORM model."""
        orm_model = orm_model or UserProgressORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None
        )
        orm_model.total_learned = domain_entity.total_learned
        orm_model.total_reviewed = domain_entity.total_reviewed
        orm_model.last_study_date = domain_entity.last_study_date
        orm_model.total_study_time = domain_entity.total_study_time
        orm_model.streak_days = domain_entity.streak_days
        orm_model.current_module_id = (
            domain_entity.current_module_id.value if domain_entity.current_module_id else None
        )
        return orm_model
