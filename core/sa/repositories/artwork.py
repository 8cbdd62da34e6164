# core/sa/repositories/artwork.py
import logging
from typing import Optional, List, TYPE_CHECKING
from sqlalchemy import desc, or_
from sqlalchemy.orm import Session
from ..models import Artwork, ArtSeries
from .stored_file import StoredFileRepository

if TYPE_CHECKING:
    from core.storage import BlobStore

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "title", "description", "style", "medium", "series_id", "tags", "is_published",
}

class ArtworkRepository:
    """Repository for artworks and the art series that group them."""

    def __init__(self, session: Session):
        self.session = session
        self.files = StoredFileRepository(session)

    def _newest_first(self, query):
        return query.order_by(desc(Artwork.created_at), desc(Artwork.id))

    def _check_series(self, user_id: int, series_id: Optional[int]) -> None:
        if series_id is not None and self.get_series_for_user(user_id, series_id) is None:
            raise ValueError("Series not found")

    def get_published(self, limit: Optional[int] = None) -> List[Artwork]:
        query = self._newest_first(
            self.session.query(Artwork).filter(Artwork.is_published.is_(True))
        )
        if limit:
            query = query.limit(limit)
        return query.all()

    def get_my_artworks(self, user_id: int) -> List[Artwork]:
        return self._newest_first(
            self.session.query(Artwork).filter(Artwork.user_id == user_id)
        ).all()

    def get_by_series(self, series_id: int, user_id: Optional[int] = None) -> List[Artwork]:
        """Get artworks in a series.

        Args:
            series_id: The art series ID
            user_id: Caller, if signed in. Their unpublished artworks are included.

        Returns:
            Published artworks in the series plus the caller's own
        """
        visible = Artwork.is_published.is_(True)
        if user_id is not None:
            visible = or_(visible, Artwork.user_id == user_id)
        return self._newest_first(
            self.session.query(Artwork).filter(Artwork.series_id == series_id, visible)
        ).all()

    def get_by_id(self, artwork_id: int, user_id: Optional[int] = None) -> Optional[Artwork]:
        """Get an artwork if it is published or owned by the caller"""
        artwork = self.session.get(Artwork, artwork_id)
        if artwork is None:
            return None
        if artwork.is_published or (user_id is not None and artwork.user_id == user_id):
            return artwork
        return None

    def get_for_user(self, user_id: int, artwork_id: int) -> Optional[Artwork]:
        return (
            self.session.query(Artwork)
            .filter(Artwork.id == artwork_id, Artwork.user_id == user_id)
            .one_or_none()
        )

    def create_artwork(
        self,
        user_id: int,
        title: str,
        image_url: str,
        is_published: bool,
        **fields
    ) -> Artwork:
        """Create an artwork with no likes yet.

        Raises:
            ValueError: If series_id is not one of the user's series, or
                storage_id is not one of the user's files
        """
        unknown = set(fields) - UPDATABLE_FIELDS - {"storage_id"}
        if unknown:
            raise ValueError(f"Unknown artwork fields: {', '.join(sorted(unknown))}")
        self._check_series(user_id, fields.get("series_id"))
        self.files.check_owned(user_id, fields.get("storage_id"))

        artwork = Artwork(
            user_id=user_id,
            title=title,
            image_url=image_url,
            is_published=is_published,
            likes=0,
            **fields,
        )
        self.session.add(artwork)
        self.session.commit()
        logger.info(f"User {user_id} created artwork {artwork.id} '{title}'")
        return artwork

    def update_artwork(self, user_id: int, artwork_id: int, **updates) -> Optional[Artwork]:
        """Patch the given fields of a user's artwork. None values are ignored.

        Returns:
            The updated Artwork, or None if the user has no such artwork
        """
        artwork = self.get_for_user(user_id, artwork_id)
        if not artwork:
            return None

        updates = {k: v for k, v in updates.items() if v is not None}
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown artwork fields: {', '.join(sorted(unknown))}")
        self._check_series(user_id, updates.get("series_id"))

        for field, value in updates.items():
            setattr(artwork, field, value)
        self.session.commit()
        return artwork

    def remove_artwork(self, user_id: int, artwork_id: int, storage: Optional["BlobStore"] = None) -> bool:
        """Delete a user's artwork together with its stored image, if it has one.

        Returns:
            True if the artwork was deleted, False if not found
        """
        artwork = self.get_for_user(user_id, artwork_id)
        if not artwork:
            return False

        storage_id = artwork.storage_id
        self.session.delete(artwork)
        self.session.commit()
        if storage_id and storage is not None:
            if not storage.delete(user_id, storage_id):
                logger.warning(f"Stored image {storage_id} of artwork {artwork_id} was not among user {user_id}'s files")
        logger.info(f"User {user_id} removed artwork {artwork_id}")
        return True

    def like(self, artwork_id: int) -> Optional[Artwork]:
        """Add one like. Open to anonymous visitors."""
        artwork = self.session.get(Artwork, artwork_id)
        if not artwork:
            return None
        artwork.likes = (artwork.likes or 0) + 1
        self.session.commit()
        return artwork

    def get_my_series(self, user_id: int) -> List[ArtSeries]:
        return (
            self.session.query(ArtSeries)
            .filter(ArtSeries.user_id == user_id)
            .order_by(desc(ArtSeries.created_at), desc(ArtSeries.id))
            .all()
        )

    def get_series_for_user(self, user_id: int, series_id: int) -> Optional[ArtSeries]:
        return (
            self.session.query(ArtSeries)
            .filter(ArtSeries.id == series_id, ArtSeries.user_id == user_id)
            .one_or_none()
        )

    def create_series(
        self,
        user_id: int,
        title: str,
        description: Optional[str] = None,
        cover_image_url: Optional[str] = None
    ) -> ArtSeries:
        series = ArtSeries(
            user_id=user_id,
            title=title,
            description=description,
            cover_image_url=cover_image_url,
            is_complete=False,
        )
        self.session.add(series)
        self.session.commit()
        logger.info(f"User {user_id} created art series {series.id} '{title}'")
        return series
