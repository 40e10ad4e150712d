"""Database models."""

from datetime import date, datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexitrack.database import Base


class Module(Base):
    """Thematic module grouping vocabulary items."""

    __tablename__ = "modules"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    level: Mapped[str] = mapped_column(String(20), nullable=False, default="", index=True)
    theme: Mapped[str] = mapped_column(String(100), nullable=False, default="", index=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    word_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    vocabulary_items: Mapped[list["VocabularyItem"]] = relationship(
        back_populates="module", cascade="all, delete-orphan"
    )
    quiz_questions: Mapped[list["QuizQuestion"]] = relationship(
        back_populates="module", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of Module."""
        return f"<Module(id={self.id}, title='{self.title}', progress={self.progress})>"


class VocabularyItem(Base):
    """Source/target word pair with learning state."""

    __tablename__ = "vocabulary_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    module_id: Mapped[int] = mapped_column(
        ForeignKey("modules.id", ondelete="CASCADE"), nullable=False, index=True
    )
    source_text: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    target_text: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    learned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_reviewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    difficulty: Mapped[int | None] = mapped_column(Integer, nullable=True)
    examples: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    audio_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    next_review_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    module: Mapped[Module] = relationship(back_populates="vocabulary_items")

    def __repr__(self) -> str:
        """String representation of VocabularyItem."""
        return f"<VocabularyItem(id={self.id}, source='{self.source_text}')>"


class UserProgress(Base):
    """Learner-wide progress record, one row per installation."""

    __tablename__ = "user_progress"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    total_learned: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_reviewed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_study_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    total_study_time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    streak_days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    current_module_id: Mapped[int | None] = mapped_column(
        ForeignKey("modules.id", ondelete="SET NULL"), nullable=True
    )

    def __repr__(self) -> str:
        """String representation of UserProgress."""
        return f"<UserProgress(id={self.id}, streak_days={self.streak_days})>"


class QuizQuestion(Base):
    """Generated quiz question with the learner's saved answer."""

    __tablename__ = "quiz_questions"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    module_id: Mapped[int] = mapped_column(
        ForeignKey("modules.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    options: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    correct_answer: Mapped[str] = mapped_column(String(500), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    given_answer: Mapped[str | None] = mapped_column(String(500), nullable=True)

    module: Mapped[Module] = relationship(back_populates="quiz_questions")

    def __repr__(self) -> str:
        """String representation of QuizQuestion."""
        return f"<QuizQuestion(id={self.id}, module_id={self.module_id}, type='{self.type}')>"
