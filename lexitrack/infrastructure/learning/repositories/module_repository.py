"""Repository for Module domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.module import Module
from lexitrack.exceptions import StudyModuleNotFoundError
from lexitrack.infrastructure.common.store_errors import store_operation
from lexitrack.infrastructure.learning.mappers.module_mapper import ModuleMapper
from lexitrack.models import Module as ModuleORM


class ModuleRepository:
    """Repository for Module domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ModuleMapper()

    def find_by_id(self, module_id: ModuleId) -> Module | None:
        """
        Find a module by ID.

        Args:
            module_id: The module ID

        Returns:
            Module entity if found, None otherwise
        """
        with store_operation(self.db, "find_module"):
            orm_model = self.db.get(ModuleORM, module_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[Module]:
        """
        Get all modules.

        Returns:
            List of module entities ordered by study order, then ID
        """
        stmt = select(ModuleORM).order_by(ModuleORM.order, ModuleORM.id)
        with store_operation(self.db, "list_modules"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, module: Module) -> Module:
        """
        Save a module entity (create or update).

        Args:
            module: The module entity to save

        Returns:
            Saved module entity with database-generated values
        """
        with store_operation(self.db, "save_module"):
            if module.id.value == 0:
                # Create new
                orm_model = self.mapper.to_orm(module)
                self.db.add(orm_model)
            else:
                # Update existing
                existing = self.db.get(ModuleORM, module.id.value)
                if not existing:
                    raise StudyModuleNotFoundError(module.id.value)
                orm_model = self.mapper.to_orm(module, existing)
            self.db.commit()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
