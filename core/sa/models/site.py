# core/sa/models/site.py
from datetime import datetime
from typing import Optional
from sqlalchemy import Integer, String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, utcnow

class SiteSettings(Base):
    """Singleton row holding the public page copy"""
    __tablename__ = 'site_settings'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    site_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    hero_title: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    hero_subtitle: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    hero_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    hero_image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    hero_image_storage_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
