# core/sa/repositories/suggestion.py
import logging
from typing import Optional, List, Dict, Any
from sqlalchemy import desc
from sqlalchemy.orm import Session
from ..models import Book, BookStatus, BookSuggestion, SuggestionStatus, utcnow
from .book import BookRepository, normalize

logger = logging.getLogger(__name__)

# Where an existing book sits, as reported by check_duplicate
LOCATIONS = {
    BookStatus.READ.value: "already read",
    BookStatus.READING.value: "currently reading",
    BookStatus.WISHLIST.value: "already on wishlist",
}

# Messages shown to a visitor whose suggestion is rejected on submit
SUBMIT_MESSAGES = {
    BookStatus.READ.value: "I've already read this book!",
    BookStatus.READING.value: "I'm currently reading this book!",
    BookStatus.WISHLIST.value: "This book is already on my wishlist!",
}

class SuggestionRepository:
    def __init__(self, session: Session):
        self.session = session
        self.books = BookRepository(session)

    def get_by_id(self, suggestion_id: int) -> Optional[BookSuggestion]:
        return self.session.get(BookSuggestion, suggestion_id)

    def get_all(self) -> List[BookSuggestion]:
        return (
            self.session.query(BookSuggestion)
            .order_by(desc(BookSuggestion.created_at), desc(BookSuggestion.id))
            .all()
        )

    def get_pending(self) -> List[BookSuggestion]:
        return (
            self.session.query(BookSuggestion)
            .filter(BookSuggestion.status == SuggestionStatus.PENDING.value)
            .order_by(desc(BookSuggestion.created_at), desc(BookSuggestion.id))
            .all()
        )

    def find_pending_duplicate(self, title: str, author: str) -> Optional[BookSuggestion]:
        normalized_title = normalize(title)
        normalized_author = normalize(author)
        return next(
            (
                s for s in self.get_pending()
                if normalize(s.title) == normalized_title
                and normalize(s.author) == normalized_author
            ),
            None,
        )

    def check_duplicate(self, title: str, author: str) -> Dict[str, Any]:
        """Check whether a book is already on the site or already suggested.

        Returns:
            {"exists": False} or {"exists": True, "location": ..., "book"/"suggestion": ...}
        """
        book = self.books.find_duplicate(title, author)
        if book:
            return {"exists": True, "location": LOCATIONS[book.status], "book": book}

        suggestion = self.find_pending_duplicate(title, author)
        if suggestion:
            return {"exists": True, "location": "already suggested", "suggestion": suggestion}

        return {"exists": False}

    def submit(self, title: str, author: str, suggested_by: str, **fields) -> BookSuggestion:
        """Record a visitor's suggestion as pending.

        Raises:
            ValueError: If the book is already on the site or already pending
        """
        book = self.books.find_duplicate(title, author)
        if book:
            raise ValueError(SUBMIT_MESSAGES[book.status])

        if self.find_pending_duplicate(title, author):
            raise ValueError("This book has already been suggested!")

        suggestion = BookSuggestion(
            title=title,
            author=author,
            suggested_by=suggested_by,
            status=SuggestionStatus.PENDING.value,
            **fields,
        )
        self.session.add(suggestion)
        self.session.commit()
        logger.info(f"New suggestion {suggestion.id} '{title}' by {suggested_by}")
        return suggestion

    def _review(self, suggestion_id: int, status: SuggestionStatus) -> Optional[BookSuggestion]:
        suggestion = self.get_by_id(suggestion_id)
        if not suggestion:
            return None
        suggestion.status = status.value
        suggestion.reviewed_at = utcnow()
        self.session.commit()
        logger.info(f"Suggestion {suggestion_id} {status.value}")
        return suggestion

    def approve(self, suggestion_id: int) -> Optional[BookSuggestion]:
        return self._review(suggestion_id, SuggestionStatus.APPROVED)

    def reject(self, suggestion_id: int) -> Optional[BookSuggestion]:
        return self._review(suggestion_id, SuggestionStatus.REJECTED)

    def remove(self, suggestion_id: int) -> bool:
        suggestion = self.get_by_id(suggestion_id)
        if not suggestion:
            return False
        self.session.delete(suggestion)
        self.session.commit()
        return True

    def add_to_books(self, user_id: int, suggestion_id: int) -> Optional[Book]:
        """Put a suggestion on the user's wishlist and mark it approved.

        Returns:
            The new wishlist Book, or None if the suggestion does not exist
        """
        suggestion = self.get_by_id(suggestion_id)
        if not suggestion:
            return None

        now = utcnow()
        book = Book(
            user_id=user_id,
            title=suggestion.title,
            author=suggestion.author,
            cover_url=suggestion.cover_url,
            genre=suggestion.genre,
            status=BookStatus.WISHLIST.value,
            is_favorite=False,
            gifted_by=suggestion.suggested_by,
            created_at=now,
        )
        self.session.add(book)
        suggestion.status = SuggestionStatus.APPROVED.value
        suggestion.reviewed_at = now
        self.session.commit()
        logger.info(f"Suggestion {suggestion_id} added to wishlist of user {user_id} as book {book.id}")
        return book
