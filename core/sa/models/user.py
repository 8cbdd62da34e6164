# core/sa/models/user.py
from datetime import datetime
from enum import Enum
from typing import Optional
from sqlalchemy import Integer, String, Boolean, ForeignKey, DateTime, Text, CheckConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, CreatedAtMixin

class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    KAWAII = "kawaii"

class User(Base, CreatedAtMixin):
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    profile = relationship('UserProfile', back_populates='user', uselist=False, cascade='all, delete-orphan')
    sessions = relationship('AuthSession', back_populates='user', cascade='all, delete-orphan')
    books = relationship('Book', back_populates='user')
    artworks = relationship('Artwork', back_populates='user')
    art_series = relationship('ArtSeries', back_populates='user')
    reading_goals = relationship('ReadingGoal', back_populates='user')
    stored_files = relationship('StoredFile', back_populates='user')

class AuthSession(Base, CreatedAtMixin):
    """A signed-in session. Tokens are only honoured while their session row exists."""
    __tablename__ = 'auth_session'

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False, index=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    user = relationship('User', back_populates='sessions')

class UserProfile(Base):
    __tablename__ = 'user_profile'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_parent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    theme: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    yearly_book_goal: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    notifications: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

    user = relationship('User', back_populates='profile')

    __table_args__ = (
        CheckConstraint("theme IN ('light', 'dark', 'kawaii')", name='ck_user_profile_theme'),
    )
