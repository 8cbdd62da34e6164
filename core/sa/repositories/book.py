# core/sa/repositories/book.py
import logging
from typing import Optional, List, TYPE_CHECKING
from sqlalchemy import desc
from sqlalchemy.orm import Session
from ..models import Book, BookStatus, utcnow
from .stored_file import StoredFileRepository

if TYPE_CHECKING:
    from core.storage import BlobStore

logger = logging.getLogger(__name__)

ALREADY_MESSAGES = {
    BookStatus.READ.value: "You've already read this book!",
    BookStatus.READING.value: "You're already reading this book!",
    BookStatus.WISHLIST.value: "This book is already on your wishlist!",
}

UPDATABLE_FIELDS = {
    "title", "author", "cover_url", "cover_storage_id", "isbn", "genre", "series",
    "page_count", "pages_read", "description", "status", "rating", "review",
    "is_favorite", "gifted_by",
}

def normalize(value: str) -> str:
    """Normalise a title or author for duplicate comparison"""
    return (value or "").strip().lower()

class DuplicateBookError(ValueError):
    """The book already exists with a different status.

    Renders as DUPLICATE:<id>:<status> so a client can offer to move the
    existing book instead.
    """

    def __init__(self, book_id: int, status: str):
        self.book_id = book_id
        self.status = status
        super().__init__(f"DUPLICATE:{book_id}:{status}")

class BookRepository:
    def __init__(self, session: Session):
        self.session = session
        self.files = StoredFileRepository(session)

    def _newest_first(self, query):
        return query.order_by(desc(Book.created_at), desc(Book.id))

    def get_by_id(self, book_id: int) -> Optional[Book]:
        return self.session.get(Book, book_id)

    def get_for_user(self, user_id: int, book_id: int) -> Optional[Book]:
        """Get a book owned by the user. Books owned by others are treated as missing."""
        return (
            self.session.query(Book)
            .filter(Book.id == book_id, Book.user_id == user_id)
            .one_or_none()
        )

    def get_my_books(self, user_id: int) -> List[Book]:
        return self._newest_first(
            self.session.query(Book).filter(Book.user_id == user_id)
        ).all()

    def get_by_status(self, user_id: int, status: str) -> List[Book]:
        status = BookStatus(status).value
        return self._newest_first(
            self.session.query(Book).filter(Book.user_id == user_id, Book.status == status)
        ).all()

    def get_favorites(self) -> List[Book]:
        """Favourite books across the site, for the public pages"""
        return self._newest_first(
            self.session.query(Book).filter(Book.is_favorite.is_(True))
        ).all()

    def get_read_books(self) -> List[Book]:
        return self._newest_first(
            self.session.query(Book).filter(Book.status == BookStatus.READ.value)
        ).all()

    def get_wishlist(self) -> List[Book]:
        return self._newest_first(
            self.session.query(Book).filter(Book.status == BookStatus.WISHLIST.value)
        ).all()

    def find_duplicate(self, title: str, author: str, user_id: Optional[int] = None) -> Optional[Book]:
        """Find a book with the same normalised title and author.

        Args:
            title: Book title
            author: Book author
            user_id: Only consider this user's books. Searches the whole site if None.

        Returns:
            The first matching Book or None
        """
        normalized_title = normalize(title)
        normalized_author = normalize(author)

        query = self.session.query(Book)
        if user_id is not None:
            query = query.filter(Book.user_id == user_id)

        return next(
            (
                b for b in query.order_by(Book.id).all()
                if normalize(b.title) == normalized_title
                and normalize(b.author) == normalized_author
            ),
            None,
        )

    def add_book(self, user_id: int, title: str, author: str, status: str, **fields) -> Book:
        """Add a book for a user.

        Raises:
            ValueError: If the user already has the book with the same status,
                or cover_storage_id is not one of the user's files
            DuplicateBookError: If the user already has the book with another status
        """
        status = BookStatus(status).value
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown book fields: {', '.join(sorted(unknown))}")
        self.files.check_owned(user_id, fields.get("cover_storage_id"))

        existing = self.find_duplicate(title, author, user_id=user_id)
        if existing:
            if existing.status == status:
                raise ValueError(ALREADY_MESSAGES[status])
            raise DuplicateBookError(existing.id, existing.status)

        now = utcnow()
        book = Book(
            user_id=user_id,
            title=title,
            author=author,
            status=status,
            is_favorite=bool(fields.pop("is_favorite", False)),
            started_at=now if status == BookStatus.READING.value else None,
            finished_at=now if status == BookStatus.READ.value else None,
            created_at=now,
            **fields,
        )
        self.session.add(book)
        self.session.commit()
        logger.info(f"User {user_id} added book {book.id} '{title}' as {status}")
        return book

    def update_book(self, user_id: int, book_id: int, **updates) -> Optional[Book]:
        """Patch the given fields of a user's book. None values are ignored.

        Entering the read status stamps finished_at; staying in it does not.

        Returns:
            The updated Book, or None if the user has no such book
        """
        book = self.get_for_user(user_id, book_id)
        if not book:
            return None

        updates = {k: v for k, v in updates.items() if v is not None}
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown book fields: {', '.join(sorted(unknown))}")
        self.files.check_owned(user_id, updates.get("cover_storage_id"))

        if "status" in updates:
            updates["status"] = BookStatus(updates["status"]).value
            if updates["status"] == BookStatus.READ.value and book.status != BookStatus.READ.value:
                book.finished_at = utcnow()

        for field, value in updates.items():
            setattr(book, field, value)

        self.session.commit()
        return book

    def remove_book(self, user_id: int, book_id: int, storage: Optional["BlobStore"] = None) -> bool:
        """Delete a user's book, and its stored cover when a storage is given.

        Returns:
            True if the book was deleted, False if not found
        """
        book = self.get_for_user(user_id, book_id)
        if not book:
            return False

        cover_storage_id = book.cover_storage_id
        self.session.delete(book)
        self.session.commit()
        if cover_storage_id and storage is not None:
            storage.delete(user_id, cover_storage_id)
        logger.info(f"User {user_id} removed book {book_id}")
        return True

    def toggle_favorite(self, user_id: int, book_id: int) -> Optional[Book]:
        book = self.get_for_user(user_id, book_id)
        if not book:
            return None
        book.is_favorite = not book.is_favorite
        self.session.commit()
        return book

    def get_books_missing_cover_cache(self, user_id: int, limit: Optional[int] = None) -> List[Book]:
        """Get a user's books that have a cover URL but no stored copy of it"""
        query = (
            self.session.query(Book)
            .filter(
                Book.user_id == user_id,
                Book.cover_url.isnot(None),
                Book.cover_storage_id.is_(None),
            )
            .order_by(Book.id)
        )
        if limit:
            query = query.limit(limit)
        return query.all()
