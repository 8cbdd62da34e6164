# core/sa/models/series.py
from typing import Optional
from sqlalchemy import Integer, String, Boolean, ForeignKey, Text, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, CreatedAtMixin

class ArtSeries(Base, CreatedAtMixin):
    """A named group of artworks"""
    __tablename__ = 'art_series'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    cover_image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    is_complete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    user = relationship('User', back_populates='art_series')
    artworks = relationship('Artwork', back_populates='series')

    __table_args__ = (
        Index('idx_art_series_user', 'user_id'),
    )
