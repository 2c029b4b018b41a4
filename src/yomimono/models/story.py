"""Story model.

A story is a Japanese reading passage together with the vocabulary
extracted from its content.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from yomimono.text import ExtractionResult

from .database import Base

if TYPE_CHECKING:
    from .user import User

# JSONB on PostgreSQL, plain JSON elsewhere
WordsType = JSON().with_variant(JSONB(), "postgresql")


class Story(Base):
    """Story model with its extracted word list."""

    __tablename__ = "stories"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255))
    content: Mapped[str] = mapped_column(Text, default="")
    word_count: Mapped[int] = mapped_column(Integer, default=0)
    words: Mapped[list[dict[str, str]]] = mapped_column(WordsType, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="stories", lazy="selectin")

    def apply_extraction(self, result: ExtractionResult) -> None:
        """Attach an extraction result to this story."""
        self.words = [word.to_dict() for word in result.words]
        self.word_count = result.word_count

    def __repr__(self) -> str:
        return f"<Story(id={self.id}, title='{self.title}', word_count={self.word_count})>"
