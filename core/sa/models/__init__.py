# core/sa/models/__init__.py
from .base import Base, CreatedAtMixin, utcnow
from .user import User, AuthSession, UserProfile, Theme
from .book import Book, BookStatus
from .series import ArtSeries
from .artwork import Artwork
from .suggestion import BookSuggestion, SuggestionStatus
from .goal import ReadingGoal
from .site import SiteSettings
from .storage import StoredFile

__all__ = [
    'Base',
    'CreatedAtMixin',
    'utcnow',
    'User',
    'AuthSession',
    'UserProfile',
    'Theme',
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
