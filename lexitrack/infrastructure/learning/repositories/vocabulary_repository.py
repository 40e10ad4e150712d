"""Repository for VocabularyItem domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lexitrack.domain.common.value_objects import ModuleId, VocabularyItemId
from lexitrack.domain.learning.entities.vocabulary_item import VocabularyItem
from lexitrack.exceptions import VocabularyItemNotFoundError
from lexitrack.infrastructure.common.store_errors import store_operation
from lexitrack.infrastructure.learning.mappers.vocabulary_item_mapper import VocabularyItemMapper
from lexitrack.models import VocabularyItem as VocabularyItemORM


class VocabularyRepository:
    """Repository for VocabularyItem domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = VocabularyItemMapper()

    def find_by_id(self, item_id: VocabularyItemId) -> VocabularyItem | None:
        """
        Find a vocabulary item by ID.

        Args:
            item_id: The vocabulary item ID

        Returns:
            VocabularyItem entity if found, None otherwise
        """
        with store_operation(self.db, "find_vocabulary_item"):
            orm_model = self.db.get(VocabularyItemORM, item_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[VocabularyItem]:
        """Get every vocabulary item in import order."""
        stmt = select(VocabularyItemORM).order_by(VocabularyItemORM.id)
        with store_operation(self.db, "list_vocabulary"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_module(self, module_id: ModuleId) -> list[VocabularyItem]:
        """
        Get all vocabulary items of a module.

        Args:
            module_id: The module ID

        Returns:
            List of vocabulary items in import order
        """
        stmt = (
            select(VocabularyItemORM)
            .where(VocabularyItemORM.module_id == module_id.value)
            .order_by(VocabularyItemORM.id)
        )
        with store_operation(self.db, "list_module_vocabulary"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_learned(self) -> list[VocabularyItem]:
        """Get every learned vocabulary item in import order."""
        stmt = (
            select(VocabularyItemORM)
            .where(VocabularyItemORM.learned.is_(True))
            .order_by(VocabularyItemORM.id)
        )
        with store_operation(self.db, "list_learned_vocabulary"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, item: VocabularyItem) -> VocabularyItem:
        """
        Save a vocabulary item (create or update).

        Args:
            item: The vocabulary item to save

        Returns:
            Saved vocabulary item with database-generated values
        """
        with store_operation(self.db, "save_vocabulary_item"):
            if item.id.value == 0:
                # Create new
                orm_model = self.mapper.to_orm(item)
                self.db.add(orm_model)
            else:
                # Update existing
                existing = self.db.get(VocabularyItemORM, item.id.value)
                if not existing:
                    raise VocabularyItemNotFoundError(item.id.value)
                orm_model = self.mapper.to_orm(item, existing)
            self.db.commit()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def save_all(self, items: list[VocabularyItem]) -> list[VocabularyItem]:
        """
        Insert several new vocabulary items in one transaction.

        Args:
            items: Unsaved vocabulary items

        Returns:
            Saved items in input order, with their generated IDs
        """
        orm_models = [self.mapper.to_orm(item) for item in items]
        with store_operation(self.db, "import_vocabulary"):
            self.db.add_all(orm_models)
            self.db.commit()
            for orm_model in orm_models:
                self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]
