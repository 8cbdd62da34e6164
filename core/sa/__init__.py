# core/sa/__init__.py
from .database import Database
from .models import (
    Base, User, AuthSession, UserProfile, Book, BookStatus,
    ArtSeries, Artwork, BookSuggestion, SuggestionStatus,
    ReadingGoal, SiteSettings, StoredFile
)

__all__ = [
    'Database',
    'Base',
    'User',
    'AuthSession',
    'UserProfile',
    'Book',
    'BookStatus',
    'ArtSeries',
    'Artwork',
    'BookSuggestion',
    'SuggestionStatus',
    'ReadingGoal',
    'SiteSettings',
    'StoredFile',
]
