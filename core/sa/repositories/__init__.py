# core/sa/repositories/__init__.py
from .book import BookRepository, DuplicateBookError
from .artwork import ArtworkRepository
from .suggestion import SuggestionRepository
from .user import UserRepository
from .auth import SessionRepository
from .goal import ReadingGoalRepository
from .site import SiteSettingsRepository
from .ownership import OwnershipRepository
from .stored_file import StoredFileRepository

__all__ = [
    'BookRepository',
    'DuplicateBookError',
    'ArtworkRepository',
    'SuggestionRepository',
    'UserRepository',
    'SessionRepository',
    'ReadingGoalRepository',
    'SiteSettingsRepository',
    'OwnershipRepository',
    'StoredFileRepository',
]
