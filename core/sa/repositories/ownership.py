# core/sa/repositories/ownership.py
import logging
from typing import Dict, Any
from sqlalchemy.orm import Session
from ..models import Book, Artwork, ArtSeries, StoredFile

logger = logging.getLogger(__name__)

class OwnershipRepository:
    """Find and reassign rows owned by someone other than a given user.

    Used when the site owner's account was recreated and the old rows still
    point at the previous user id.
    """

    MODELS = (("books", Book), ("artworks", Artwork), ("series", ArtSeries), ("files", StoredFile))

    def __init__(self, session: Session):
        self.session = session

    def check_orphaned(self, user_id: int) -> Dict[str, Any]:
        report: Dict[str, Any] = {"user_id": user_id}
        for name, model in self.MODELS:
            rows = self.session.query(model).order_by(model.id).all()
            orphaned = [r for r in rows if r.user_id != user_id]
            report[f"total_{name}"] = len(rows)
            report[f"orphaned_{name}"] = len(orphaned)
            if name == "books":
                report["orphaned_book_ids"] = [
                    {"id": b.id, "title": b.title, "old_user_id": b.user_id}
                    for b in orphaned
                ]
        return report

    def claim_orphaned(self, user_id: int) -> Dict[str, int]:
        """Reassign every book, artwork, art series and stored file to the user.

        Returns:
            Number of rows updated per kind
        """
        counts = {}
        for name, model in self.MODELS:
            counts[f"{name}_updated"] = (
                self.session.query(model)
                .filter(model.user_id != user_id)
                .update({model.user_id: user_id}, synchronize_session=False)
            )
        self.session.commit()
        logger.info(f"Claimed orphaned data for user {user_id}: {counts}")
        return counts
