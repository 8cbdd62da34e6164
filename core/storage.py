import uuid
import logging
from pathlib import Path
from typing import Optional
from sqlalchemy.orm import Session

from core import config
from core.sa.models import StoredFile
from core.sa.repositories.stored_file import StoredFileRepository
from core.utils.image import process_image

logger = logging.getLogger(__name__)

class BlobStore:
    """Files on local disk, keyed by an opaque id, with their metadata in stored_file.

    Anyone may read a file by id; only its uploader may delete it.
    """

    def __init__(self, session: Session, base_dir: Optional[str] = None):
        self.session = session
        self.files = StoredFileRepository(session)
        self.base_dir = Path(base_dir or config.STORAGE_DIR)

    def path(self, storage_id: str) -> Path:
        return self.base_dir / storage_id

    def get(self, storage_id: str) -> Optional[StoredFile]:
        return self.files.get_by_id(storage_id)

    def read(self, storage_id: str) -> Optional[bytes]:
        stored = self.get(storage_id)
        if stored is None or not self.path(storage_id).exists():
            return None
        return self.path(storage_id).read_bytes()

    def store(self, user_id: int, data: bytes, content_type: str) -> StoredFile:
        """Write bytes to disk and record them as the user's file.

        Returns:
            The StoredFile row; its id is the storage id
        """
        self.base_dir.mkdir(parents=True, exist_ok=True)
        storage_id = uuid.uuid4().hex
        self.path(storage_id).write_bytes(data)

        stored = StoredFile(id=storage_id, user_id=user_id, content_type=content_type, size=len(data))
        self.session.add(stored)
        try:
            self.session.commit()
        except Exception as e:
            logger.error(f"Failed to record stored file {storage_id}: {e}")
            self.session.rollback()
            self.path(storage_id).unlink(missing_ok=True)
            raise
        logger.info(f"User {user_id} stored file {storage_id} ({content_type}, {len(data)} bytes)")
        return stored

    def store_image(self, user_id: int, data: bytes, max_size: int = 2000) -> StoredFile:
        """Normalise an image to JPEG and store it.

        Raises:
            ValueError: If the data is not an image
        """
        return self.store(user_id, process_image(data, max_size=max_size), 'image/jpeg')

    def delete(self, user_id: int, storage_id: str) -> bool:
        """Delete one of the user's stored files.

        Returns:
            True if the file was deleted, False if not found or owned by someone else
        """
        stored = self.files.get_for_user(user_id, storage_id)
        if stored is None:
            return False
        self.session.delete(stored)
        self.session.commit()
        self.path(storage_id).unlink(missing_ok=True)
        logger.info(f"User {user_id} deleted stored file {storage_id}")
        return True

    @staticmethod
    def url_for(storage_id: str) -> str:
        return f"/storage/{storage_id}"
