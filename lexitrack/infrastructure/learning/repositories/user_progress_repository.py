"""Repository for the UserProgress record."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lexitrack.domain.learning.entities.user_progress import UserProgress
from lexitrack.exceptions import NotFoundError
from lexitrack.infrastructure.common.store_errors import store_operation
from lexitrack.infrastructure.learning.mappers.user_progress_mapper import UserProgressMapper
from lexitrack.models import UserProgress as UserProgressORM


class UserProgressRepository:
    """Repository for the single UserProgress record."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserProgressMapper()

    def find_current(self) -> UserProgress | None:
        """Get the record with the lowest ID, None if none was created yet."""
        stmt = select(UserProgressORM).order_by(UserProgressORM.id).limit(1)
        with store_operation(self.db, "load_progress"):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, progress: UserProgress) -> UserProgress:
        """
        Save the progress record (create or update).

        Args:
            progress: The progress entity to save

        Returns:
            Saved progress entity with database-generated values
        """
        with store_operation(self.db, "save_progress"):
            if progress.id.value == 0:
                orm_model = self.mapper.to_orm(progress)
                self.db.add(orm_model)
            else:
                existing = self.db.get(UserProgressORM, progress.id.value)
                if not existing:
                    raise NotFoundError(f"User progress with id {progress.id.value} not found")
                orm_model = self.mapper.to_orm(progress, existing)
            self.db.commit()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
