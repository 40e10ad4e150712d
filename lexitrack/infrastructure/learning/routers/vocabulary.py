"""API routes for vocabulary items."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lexitrack.application.learning.use_cases.dtos import NewVocabularyItem
from lexitrack.application.learning.use_cases.vocabulary_use_case import VocabularyUseCase
from lexitrack.core import container
from lexitrack.domain.common.exceptions import DomainError
from lexitrack.exceptions import LexitrackError
from lexitrack.infrastructure.common.di import inject_use_case
from lexitrack.infrastructure.learning.schemas import (
    VocabularyBulkImportRequest,
    VocabularyBulkImportResponse,
    VocabularyItem,
    VocabularyItemCreateRequest,
    VocabularyItemResponse,
    VocabularyItemUpdateRequest,
    VocabularyListResponse,
    VocabularyReviewRequest,
)
from lexitrack.infrastructure.learning.schemas.builders import (
    build_vocabulary_item_schema,
    build_vocabulary_list,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vocabulary", tags=["vocabulary"])


def _to_new_item(request: VocabularyItemCreateRequest) -> NewVocabularyItem:
    return NewVocabularyItem(
        module_id=request.module_id,
        source_text=request.source_text,
        target_text=request.target_text,
        difficulty=request.difficulty,
        examples=list(request.examples),
        audio_url=request.audio_url,
    )


@router.get("", response_model=VocabularyListResponse, status_code=status.HTTP_200_OK)
def list_vocabulary(
    module_id: int | None = Query(None, description="Restrict to one module"),
    learned: bool | None = Query(None, description="Filter by learned state"),
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyListResponse:
    """
    List vocabulary items in import order.

    Args:
        module_id: Optional module filter
        learned: Optional learned-state filter
        use_case: VocabularyUseCase injected via dependency container
    """
    try:
        items = use_case.list_vocabulary(module_id=module_id, learned=learned)
        return VocabularyListResponse(items=build_vocabulary_list(items), total=len(items))
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list vocabulary: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/search", response_model=VocabularyListResponse, status_code=status.HTTP_200_OK)
def search_vocabulary(
    q: str = Query("", description="Text to look for in either side of the pair"),
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyListResponse:
    """Case-insensitive substring search; a blank query returns nothing."""
    try:
        items = use_case.search(q)
        return VocabularyListResponse(items=build_vocabulary_list(items), total=len(items))
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to search vocabulary: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/difficult", response_model=VocabularyListResponse, status_code=status.HTTP_200_OK)
def list_difficult_words(
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyListResponse:
    """List words rated hard, hardest first."""
    try:
        items = use_case.difficult_words()
        return VocabularyListResponse(items=build_vocabulary_list(items), total=len(items))
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list difficult words: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=VocabularyItemResponse, status_code=status.HTTP_201_CREATED)
def add_vocabulary_item(
    request: VocabularyItemCreateRequest,
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyItemResponse:
    """
    Add a vocabulary item to a module.

    The module's word count and progress are recomputed.

    Raises:
        HTTPException: 404 if the module does not exist
    """
    try:
        item = use_case.add_item(_to_new_item(request))
        return VocabularyItemResponse(
            success=True,
            message="Vocabulary item added successfully",
            item=build_vocabulary_item_schema(item),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add vocabulary item: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/bulk", response_model=VocabularyBulkImportResponse, status_code=status.HTTP_201_CREATED
)
def bulk_import_vocabulary(
    request: VocabularyBulkImportRequest,
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyBulkImportResponse:
    """
    Import several items; nothing is written if any module is missing.

    Raises:
        HTTPException: 404 if any referenced module does not exist
    """
    try:
        items = use_case.bulk_import([_to_new_item(entry) for entry in request.items])
        return VocabularyBulkImportResponse(
            success=True,
            message=f"Imported {len(items)} vocabulary items",
            items=build_vocabulary_list(items),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to import vocabulary: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{item_id}", response_model=VocabularyItem, status_code=status.HTTP_200_OK)
def get_vocabulary_item(
    item_id: int,
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyItem:
    """Get a vocabulary item by ID."""
    try:
        return build_vocabulary_item_schema(use_case.get_item(item_id))
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get vocabulary item {item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.patch("/{item_id}", response_model=VocabularyItemResponse, status_code=status.HTTP_200_OK)
def update_vocabulary_item(
    item_id: int,
    request: VocabularyItemUpdateRequest,
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyItemResponse:
    """
    Update difficulty, examples, audio URL or next review time.

    Args:
        item_id: ID of the item to update
        request: Fields to change; at least one is required
        use_case: VocabularyUseCase injected via dependency container

    Raises:
        HTTPException: 400 if no field is given, 404 if the item does not exist
    """
    try:
        item = use_case.update_item(
            item_id=item_id,
            difficulty=request.difficulty,
            examples=request.examples,
            audio_url=request.audio_url,
            next_review_at=request.next_review_at,
        )
        return VocabularyItemResponse(
            success=True,
            message="Vocabulary item updated successfully",
            item=build_vocabulary_item_schema(item),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update vocabulary item {item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{item_id}/learned", response_model=VocabularyItemResponse, status_code=status.HTTP_200_OK
)
def mark_vocabulary_learned(
    item_id: int,
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyItemResponse:
    """Mark an item as learned and refresh the module's progress."""
    try:
        item = use_case.mark_learned(item_id)
        return VocabularyItemResponse(
            success=True,
            message="Vocabulary item marked as learned",
            item=build_vocabulary_item_schema(item),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to mark vocabulary item {item_id} learned: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{item_id}/review", response_model=VocabularyItemResponse, status_code=status.HTTP_200_OK
)
def review_vocabulary_item(
    item_id: int,
    request: VocabularyReviewRequest | None = None,
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyItemResponse:
    """Record a review event, optionally re-rating the item's difficulty."""
    try:
        item = use_case.record_review(
            item_id, difficulty=request.difficulty if request else None
        )
        return VocabularyItemResponse(
            success=True,
            message="Review recorded",
            item=build_vocabulary_item_schema(item),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to record review of vocabulary item {item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
