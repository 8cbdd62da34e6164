# core/sa/repositories/stored_file.py
import re
from typing import Optional
from sqlalchemy.orm import Session
from ..models import StoredFile

STORAGE_ID_PATTERN = re.compile(r'^[0-9a-f]{32}$')

FILE_NOT_FOUND = "File not found"

class StoredFileRepository:
    """Lookups on stored file metadata. Files belong to the user who uploaded them."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, storage_id: str) -> Optional[StoredFile]:
        """Get file metadata by id, None for unknown or malformed ids"""
        if not STORAGE_ID_PATTERN.match(storage_id or ''):
            return None
        return self.session.get(StoredFile, storage_id)

    def get_for_user(self, user_id: int, storage_id: str) -> Optional[StoredFile]:
        """Get a file uploaded by the user. Files of other users are treated as missing."""
        stored = self.get_by_id(storage_id)
        if stored is None or stored.user_id != user_id:
            return None
        return stored

    def check_owned(self, user_id: int, storage_id: Optional[str]) -> None:
        """Raise ValueError unless storage_id is unset or one of the user's files"""
        if storage_id is not None and self.get_for_user(user_id, storage_id) is None:
            raise ValueError(FILE_NOT_FOUND)
