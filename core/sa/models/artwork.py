# core/sa/models/artwork.py
from typing import Optional, List
from sqlalchemy import Integer, String, Boolean, ForeignKey, Text, JSON, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, CreatedAtMixin

class Artwork(Base, CreatedAtMixin):
    __tablename__ = 'artwork'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    storage_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    style: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    medium: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    series_id: Mapped[Optional[int]] = mapped_column(ForeignKey('art_series.id'), nullable=True)
    tags: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    likes: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=0)

    # Relationships
    user = relationship('User', back_populates='artworks')
    series = relationship('ArtSeries', back_populates='artworks')

    __table_args__ = (
        Index('idx_artwork_user', 'user_id'),
        Index('idx_artwork_published', 'is_published'),
        Index('idx_artwork_series', 'series_id'),
    )
