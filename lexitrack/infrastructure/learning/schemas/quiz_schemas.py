"""Pydantic schemas for quiz API request/response validation."""

from typing import Literal

from pydantic import BaseModel, Field

from lexitrack.infrastructure.learning.schemas.module_schemas import Module


class QuizQuestion(BaseModel):
    """
    Schema for a quiz question.

    correct_answer is only revealed once the question has been answered.
    """

    id: int
    module_id: int
    type: Literal["multiple-choice", "fill-in-blank", "audio"]
    prompt: str
    options: list[str] | None = None
    answered: bool
    completed: bool = Field(..., description="Answered correctly")
    given_answer: str | None = None
    correct_answer: str | None = None


class QuizSession(BaseModel):
    """Schema for the state of a quiz attempt."""

    module_id: int
    questions: list[QuizQuestion]
    current_index: int
    current_question: QuizQuestion
    current_answered: bool
    score: int
    max_score: int
    correct_count: int
    incorrect_count: int
    completed: bool
    percentage: int = Field(..., ge=0, le=100)
    passed: bool
    pass_percentage: int


class QuizSessionResponse(BaseModel):
    """Schema for quiz generation and restart responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    session: QuizSession


class QuizAnswerRequest(BaseModel):
    """Schema for answering the current question."""

    answer: str = Field(..., description="Selected option or typed answer")
    question_id: int | None = Field(
        None, description="Optional guard: must be the current question's ID"
    )


class QuizAnswerResponse(BaseModel):
    """Schema for an answer result."""

    correct: bool
    correct_answer: str
    score: int
    session: QuizSession


class QuizAdvanceResponse(BaseModel):
    """Schema for the state after advancing."""

    session: QuizSession
    passed: bool = Field(..., description="Quiz completed with a passing percentage")
    module: Module | None = Field(None, description="Module, set when a passed quiz completed it")
