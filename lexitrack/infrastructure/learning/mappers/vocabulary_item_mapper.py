"""Mapper for VocabularyItem ORM ↔ Domain conversion."""

from lexitrack.domain.common.value_objects import ModuleId, VocabularyItemId
from lexitrack.domain.learning.entities.vocabulary_item import VocabularyItem
from lexitrack.infrastructure.learning.mappers.timestamps import from_storage, to_storage
from lexitrack.models import VocabularyItem as VocabularyItemORM


class VocabularyItemMapper:
    """Mapper for VocabularyItem ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: VocabularyItemORM) -> VocabularyItem:
        """Convert ORM model to domain entity."""
        return VocabularyItem.create_with_id(
            id=VocabularyItemId(orm_model.id),
            module_id=ModuleId(orm_model.module_id),
            source_text=orm_model.source_text,
            target_text=orm_model.target_text,
            learned=orm_model.learned,
            review_count=orm_model.review_count,
            last_reviewed_at=from_storage(orm_model.last_reviewed_at),
            difficulty=orm_model.difficulty,
            examples=list(orm_model.examples or []),
            audio_url=orm_model.audio_url,
            next_review_at=from_storage(orm_model.next_review_at),
        )

    def to_orm(
        self, domain_entity: VocabularyItem, orm_model: VocabularyItemORM | None = None
    ) -> VocabularyItemORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.module_id = domain_entity.module_id.value
            orm_model.source_text = domain_entity.source_text
            orm_model.target_text = domain_entity.target_text
            orm_model.learned = domain_entity.learned
            orm_model.review_count = domain_entity.review_count
            orm_model.last_reviewed_at = to_storage(domain_entity.last_reviewed_at)
            orm_model.difficulty = domain_entity.difficulty
            orm_model.examples = list(domain_entity.examples)
            orm_model.audio_url = domain_entity.audio_url
            orm_model.next_review_at = to_storage(domain_entity.next_review_at)
            return orm_model

        # Create new
        return VocabularyItemORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            module_id=domain_entity.module_id.value,
            source_text=domain_entity.source_text,
            target_text=domain_entity.target_text,
            learned=domain_entity.learned,
            review_count=domain_entity.review_count,
            last_reviewed_at=to_storage(domain_entity.last_reviewed_at),
            difficulty=domain_entity.difficulty,
            examples=list(domain_entity.examples),
            audio_url=domain_entity.audio_url,
            next_review_at=to_storage(domain_entity.next_review_at),
        )
