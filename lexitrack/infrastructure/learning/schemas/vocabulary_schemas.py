"""Pydantic schemas for vocabulary API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class VocabularyItemBase(BaseModel):
    """Base schema for VocabularyItem."""

    source_text: str = Field(..., min_length=1, max_length=500, description="Word to learn")
    target_text: str = Field(..., min_length=1, max_length=500, description="Translation")
    difficulty: int | None = Field(None, ge=1, le=3, description="1 (easy) to 3 (hard)")
    examples: list[str] = Field(default_factory=list, description="Example sentences")
    audio_url: str | None = Field(None, max_length=1000, description="Pronunciation audio")


class VocabularyItemCreateRequest(VocabularyItemBase):
    """Schema for adding a vocabulary item."""

    module_id: int = Field(..., description="Owning module")


class VocabularyBulkImportRequest(BaseModel):
    """Schema for importing several vocabulary items at once."""

    items: list[VocabularyItemCreateRequest] = Field(
        ..., min_length=1, description="Items to import, all starting unlearned"
    )


class VocabularyItemUpdateRequest(BaseModel):
    """Schema for updating an item's descriptive fields."""

    difficulty: int | None = Field(None, ge=1, le=3, description="New difficulty rating")
    examples: list[str] | None = Field(None, description="Replacement example sentences")
    audio_url: str | None = Field(None, max_length=1000, description="New audio URL")
    next_review_at: datetime | None = Field(None, description="When the item is due again")


class VocabularyReviewRequest(BaseModel):
    """Schema for recording a review event."""

    difficulty: int | None = Field(None, ge=1, le=3, description="Optional new difficulty")


class VocabularyItem(VocabularyItemBase):
    """Schema for VocabularyItem response."""

    id: int
    module_id: int
    learned: bool
    review_count: int
    last_reviewed_at: datetime | None
    next_review_at: datetime | None

    model_config = {"from_attributes": True}


class VocabularyItemResponse(BaseModel):
    """Schema for a single-item mutation response."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    item: VocabularyItem = Field(..., description="The item after the operation")


class VocabularyListResponse(BaseModel):
    """Schema for list of vocabulary items response."""

    items: list[VocabularyItem] = Field(..., description="Vocabulary items")
    total: int = Field(..., description="Number of items returned")


class VocabularyBulkImportResponse(BaseModel):
    """Schema for bulk import response."""

    success: bool = Field(..., description="Whether the import was successful")
    message: str = Field(..., description="Response message")
    items: list[VocabularyItem] = Field(..., description="Imported items in input order")
