"""API routes for study modules."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lexitrack.application.learning.use_cases.module_use_case import ModuleUseCase
from lexitrack.application.learning.use_cases.review_use_case import ReviewUseCase
from lexitrack.application.learning.use_cases.vocabulary_use_case import VocabularyUseCase
from lexitrack.core import container
from lexitrack.domain.common.exceptions import DomainError
from lexitrack.exceptions import LexitrackError
from lexitrack.infrastructure.common.di import inject_use_case
from lexitrack.infrastructure.learning.schemas import (
    FlashcardDeckResponse,
    ModuleCreateRequest,
    ModuleLevelGroup,
    ModuleResponse,
    ModulesByLevelResponse,
    ModulesListResponse,
    VocabularyListResponse,
)
from lexitrack.infrastructure.learning.schemas.builders import (
    build_module_schema,
    build_vocabulary_list,
)
from lexitrack.infrastructure.learning.schemas.module_schemas import Module

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/modules", tags=["modules"])


@router.get("", response_model=ModulesListResponse, status_code=status.HTTP_200_OK)
def list_modules(
    completed: bool | None = Query(None, description="Filter by completion state"),
    use_case: ModuleUseCase = Depends(inject_use_case(container.module_use_case)),
) -> ModulesListResponse:
    """
    List modules in study order.

    Args:
        completed: Optional filter on completion state
        use_case: ModuleUseCase injected via dependency container

    Returns:
        Modules sorted by their order
    """
    try:
        modules = use_case.list_modules(completed=completed)
        return ModulesListResponse(modules=[build_module_schema(m) for m in modules])
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list modules: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/by-level", response_model=ModulesByLevelResponse, status_code=status.HTTP_200_OK)
def list_modules_by_level(
    use_case: ModuleUseCase = Depends(inject_use_case(container.module_use_case)),
) -> ModulesByLevelResponse:
    """Group modules by level; each group is sorted by study order."""
    try:
        grouped = use_case.modules_by_level()
        return ModulesByLevelResponse(
            levels=[
                ModuleLevelGroup(
                    level=level, modules=[build_module_schema(m) for m in grouped[level]]
                )
                for level in sorted(grouped)
            ]
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to group modules by level: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=ModuleResponse, status_code=status.HTTP_201_CREATED)
def create_module(
    request: ModuleCreateRequest,
    use_case: ModuleUseCase = Depends(inject_use_case(container.module_use_case)),
) -> ModuleResponse:
    """
    Create a module.

    Args:
        request: Title, description, level, theme and optional order
        use_case: ModuleUseCase injected via dependency container

    Returns:
        The created module, empty and at 0% progress
    """
    try:
        module = use_case.create_module(
            title=request.title,
            description=request.description,
            level=request.level,
            theme=request.theme,
            order=request.order,
        )
        return ModuleResponse(
            success=True,
            message="Module created successfully",
            module=build_module_schema(module),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create module: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{module_id}", response_model=Module, status_code=status.HTTP_200_OK)
def get_module(
    module_id: int,
    use_case: ModuleUseCase = Depends(inject_use_case(container.module_use_case)),
) -> Module:
    """
    Get a module by ID.

    Raises:
        HTTPException: 404 if the module does not exist
    """
    try:
        return build_module_schema(use_case.get_module(module_id))
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/{module_id}/progress", response_model=ModuleResponse, status_code=status.HTTP_200_OK)
def recompute_module_progress(
    module_id: int,
    use_case: ModuleUseCase = Depends(inject_use_case(container.module_use_case)),
) -> ModuleResponse:
    """Recompute a module's progress, completion and word count from its vocabulary."""
    try:
        module = use_case.recompute_progress(module_id)
        return ModuleResponse(
            success=True,
            message="Module progress recomputed",
            module=build_module_schema(module),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to recompute progress of module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{module_id}/vocabulary",
    response_model=VocabularyListResponse,
    status_code=status.HTTP_200_OK,
)
def get_module_vocabulary(
    module_id: int,
    learned: bool | None = Query(None, description="Filter by learned state"),
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyListResponse:
    """List a module's vocabulary in import order."""
    try:
        items = use_case.list_vocabulary(module_id=module_id, learned=learned)
        return VocabularyListResponse(items=build_vocabulary_list(items), total=len(items))
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list vocabulary of module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{module_id}/words-to-learn",
    response_model=VocabularyListResponse,
    status_code=status.HTTP_200_OK,
)
def get_words_to_learn(
    module_id: int,
    use_case: VocabularyUseCase = Depends(inject_use_case(container.vocabulary_use_case)),
) -> VocabularyListResponse:
    """List the module's words that are not learned yet."""
    try:
        items = use_case.words_to_learn(module_id)
        return VocabularyListResponse(items=build_vocabulary_list(items), total=len(items))
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list words to learn in module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{module_id}/flashcards",
    response_model=FlashcardDeckResponse,
    status_code=status.HTTP_200_OK,
)
def get_module_flashcards(
    module_id: int,
    use_case: ReviewUseCase = Depends(inject_use_case(container.review_use_case)),
) -> FlashcardDeckResponse:
    """
    Build a shuffled flashcard deck for a module.

    Unlearned words are always included; learned words only when due.
    """
    try:
        cards = use_case.flashcards(module_id=module_id)
        return FlashcardDeckResponse(
            module_id=module_id, cards=build_vocabulary_list(cards), total=len(cards)
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to build flashcards for module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
