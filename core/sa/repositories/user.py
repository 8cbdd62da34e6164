# core/sa/repositories/user.py
import logging
from typing import Optional, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from core.security import hash_password, verify_password
from ..models import User, UserProfile, Book, BookStatus, Artwork, Theme

logger = logging.getLogger(__name__)

PROFILE_FIELDS = {
    "name", "username", "avatar_url", "bio", "is_parent", "theme",
    "yearly_book_goal", "notifications",
}

class UserRepository:
    """Repository for users, their profiles and their reading statistics."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create_user(self, email: str, password: str, name: Optional[str] = None) -> User:
        """Create a new user account.

        Args:
            email: Sign-in email, stored lowercased
            password: Plain password, stored as a bcrypt hash
            name: Optional display name

        Returns:
            The created User object

        Raises:
            ValueError: If an account with the email already exists
        """
        email = email.strip().lower()
        if self.get_by_email(email):
            raise ValueError("An account with this email already exists")

        user = User(email=email, name=name, password_hash=hash_password(password))
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ValueError("An account with this email already exists")
        logger.info(f"Created user {user.id} <{email}>")
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by their ID.

        Args:
            user_id: The ID of the user to retrieve

        Returns:
            The User object if found, None otherwise
        """
        return self.session.query(User).filter(User.id == user_id).one_or_none()

    def get_by_email(self, email: str) -> Optional[User]:
        return (
            self.session.query(User)
            .filter(User.email == email.strip().lower())
            .one_or_none()
        )

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Check credentials.

        Returns:
            The User if the email exists and the password matches, None otherwise
        """
        user = self.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user

    def get_profile(self, user_id: int) -> Optional[UserProfile]:
        return (
            self.session.query(UserProfile)
            .filter(UserProfile.user_id == user_id)
            .one_or_none()
        )

    def create_profile(self, user_id: int, name: str, is_parent: bool = False, **fields) -> UserProfile:
        """Create the user's profile. If one already exists it is returned unchanged.

        Raises:
            ValueError: For unknown fields or an invalid theme
        """
        existing = self.get_profile(user_id)
        if existing:
            return existing

        fields = self._clean_profile_fields(fields)
        profile = UserProfile(user_id=user_id, name=name, is_parent=is_parent, **fields)
        self.session.add(profile)
        self.session.commit()
        logger.info(f"Created profile for user {user_id}")
        return profile

    def update_profile(self, user_id: int, **updates) -> Optional[UserProfile]:
        """Patch the user's profile. None values are ignored.

        Returns:
            The updated profile, or None if the user has no profile
        """
        profile = self.get_profile(user_id)
        if not profile:
            return None

        for field, value in self._clean_profile_fields(updates).items():
            setattr(profile, field, value)
        self.session.commit()
        return profile

    def _clean_profile_fields(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields = {k: v for k, v in fields.items() if v is not None}
        unknown = set(fields) - PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")
        if "theme" in fields:
            fields["theme"] = Theme(fields["theme"]).value
        return fields

    def get_user_stats(self, user_id: int) -> Dict[str, int]:
        """Get reading and art statistics for a user.

        Args:
            user_id: The ID of the user

        Returns:
            Dictionary containing book counts by status, total pages,
            favourites and artwork counts
        """
        books = self.session.query(Book).filter(Book.user_id == user_id).all()
        artworks = self.session.query(Artwork).filter(Artwork.user_id == user_id).all()

        return {
            "books_read": sum(1 for b in books if b.status == BookStatus.READ.value),
            "books_reading": sum(1 for b in books if b.status == BookStatus.READING.value),
            "books_wishlist": sum(1 for b in books if b.status == BookStatus.WISHLIST.value),
            "total_books": len(books),
            "total_pages": sum(b.page_count or 0 for b in books),
            "favorites": sum(1 for b in books if b.is_favorite),
            "total_artworks": len(artworks),
            "published_artworks": sum(1 for a in artworks if a.is_published),
        }
