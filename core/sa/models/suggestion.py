# core/sa/models/suggestion.py
from datetime import datetime
from enum import Enum
from typing import Optional
from sqlalchemy import Integer, String, DateTime, Text, Index, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, CreatedAtMixin

class SuggestionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

class BookSuggestion(Base, CreatedAtMixin):
    """A book suggested by a visitor of the public wishlist"""
    __tablename__ = 'book_suggestion'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    cover_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    suggested_by: Mapped[str] = mapped_column(String(255), nullable=False)
    suggested_by_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    genre: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=SuggestionStatus.PENDING.value)
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'approved', 'rejected')", name='ck_book_suggestion_status'),
        Index('idx_book_suggestion_status', 'status'),
        Index('idx_book_suggestion_created', 'created_at'),
    )
