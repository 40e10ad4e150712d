"""Pydantic schemas for Module API request/response validation."""

from pydantic import BaseModel, Field


class ModuleBase(BaseModel):
    """Base schema for Module."""

    title: str = Field(..., min_length=1, max_length=255, description="Module title")
    description: str = Field("", description="Free-text description")
    level: str = Field("", max_length=20, description="Level tag, e.g. A1")
    theme: str = Field("", max_length=100, description="Thematic label")


class ModuleCreateRequest(ModuleBase):
    """Schema for creating a module."""

    order: int | None = Field(
        None, ge=0, description="Study order; defaults to after the last module"
    )


class Module(ModuleBase):
    """Schema for Module response."""

    id: int
    order: int
    completed: bool
    progress: int = Field(..., ge=0, le=100, description="Share of learned words, in percent")
    word_count: int

    model_config = {"from_attributes": True}


class ModuleResponse(BaseModel):
    """Schema for a single-module mutation response."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    module: Module = Field(..., description="The module after the operation")


class ModulesListResponse(BaseModel):
    """Schema for list of modules response."""

    modules: list[Module] = Field(..., description="Modules in study order")


class ModuleLevelGroup(BaseModel):
    """Modules sharing a level."""

    level: str
    modules: list[Module]


class ModulesByLevelResponse(BaseModel):
    """Schema for modules grouped by level."""

    levels: list[ModuleLevelGroup] = Field(..., description="Level groups, sorted by level")
