# core/sa/models/book.py
from datetime import datetime
from enum import Enum
from typing import Optional
from sqlalchemy import String, Integer, Float, Boolean, ForeignKey, DateTime, Text, Index, CheckConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, CreatedAtMixin

class BookStatus(str, Enum):
    READING = "reading"
    READ = "read"
    WISHLIST = "wishlist"

class Book(Base, CreatedAtMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    cover_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    cover_storage_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    isbn: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    genre: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    series: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    page_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    pages_read: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    review: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    gifted_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    started_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    finished_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship('User', back_populates='books')

    __table_args__ = (
        CheckConstraint("status IN ('reading', 'read', 'wishlist')", name='ck_book_status'),
        Index('idx_book_user', 'user_id'),
        Index('idx_book_user_status', 'user_id', 'status'),
        Index('idx_book_user_favorite', 'user_id', 'is_favorite'),
    )
