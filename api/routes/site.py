# api/routes/site.py

from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.repositories.site import SiteSettingsRepository
from core.sa.repositories.stored_file import FILE_NOT_FOUND
from core.storage import BlobStore
from api.dependencies import get_current_user_id, get_site_owner_id, get_blob_store
from api.schemas.site import SiteSettings, SiteSettingsUpdate, StoredFile

settings_router = APIRouter(prefix="/settings", tags=["settings"])
storage_router = APIRouter(prefix="/storage", tags=["storage"])

@settings_router.get("", response_model=SiteSettings)
def get_settings(db: Session = Depends(get_db)):
    """Public page copy, falling back to the built-in defaults."""
    return SiteSettingsRepository(db).get()

@settings_router.put("", response_model=SiteSettings)
def update_settings(
    updates: SiteSettingsUpdate,
    user_id: int = Depends(get_site_owner_id),
    db: Session = Depends(get_db)
):
    return SiteSettingsRepository(db).update(**updates.model_dump(exclude_none=True))

@storage_router.post("", response_model=StoredFile, status_code=status.HTTP_201_CREATED)
def upload(
    file: UploadFile = File(...),
    user_id: int = Depends(get_current_user_id),
    storage: BlobStore = Depends(get_blob_store)
):
    """
    Upload an image. It is converted to JPEG and scaled down if needed;
    use the returned storage_id and url on an artwork, cover or hero image.
    """
    try:
        stored = storage.store_image(user_id, file.file.read())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return StoredFile(
        storage_id=stored.id,
        url=BlobStore.url_for(stored.id),
        content_type=stored.content_type,
        size=stored.size,
    )

@storage_router.get("/{storage_id}")
def download(storage_id: str, storage: BlobStore = Depends(get_blob_store)):
    stored = storage.get(storage_id)
    if stored is None or not storage.path(storage_id).exists():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=FILE_NOT_FOUND)
    return FileResponse(storage.path(storage_id), media_type=stored.content_type)

@storage_router.delete("/{storage_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    storage_id: str,
    user_id: int = Depends(get_current_user_id),
    storage: BlobStore = Depends(get_blob_store)
):
    if not storage.delete(user_id, storage_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=FILE_NOT_FOUND)
