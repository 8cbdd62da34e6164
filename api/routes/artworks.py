# api/routes/artworks.py

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.repositories.artwork import ArtworkRepository
from core.storage import BlobStore
from api.dependencies import get_current_user_id, get_optional_user_id, get_blob_store
from api.schemas.artwork import Artwork, ArtworkCreate, ArtworkUpdate, ArtSeries, ArtSeriesCreate

router = APIRouter(prefix="/artworks", tags=["artworks"])

ARTWORK_NOT_FOUND = "Artwork not found"

@router.get("/published", response_model=List[Artwork])
def get_published(
    limit: Optional[int] = Query(None, ge=1, le=500, description="Maximum number of artworks to return"),
    db: Session = Depends(get_db)
):
    """Published artworks for the public gallery, newest first."""
    return ArtworkRepository(db).get_published(limit=limit)

@router.get("/mine", response_model=List[Artwork])
def get_my_artworks(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return ArtworkRepository(db).get_my_artworks(user_id)

@router.get("/series", response_model=List[ArtSeries])
def get_my_series(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return ArtworkRepository(db).get_my_series(user_id)

@router.post("/series", response_model=ArtSeries, status_code=status.HTTP_201_CREATED)
def create_series(
    series: ArtSeriesCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return ArtworkRepository(db).create_series(user_id, **series.model_dump())

@router.get("/series/{series_id}", response_model=List[Artwork])
def get_by_series(
    series_id: int,
    user_id: Optional[int] = Depends(get_optional_user_id),
    db: Session = Depends(get_db)
):
    """
    Artworks in a series. Anonymous visitors see the published ones, the
    signed-in owner also sees their drafts.
    """
    return ArtworkRepository(db).get_by_series(series_id, user_id=user_id)

@router.get("/{artwork_id}", response_model=Artwork)
def get_artwork(
    artwork_id: int,
    user_id: Optional[int] = Depends(get_optional_user_id),
    db: Session = Depends(get_db)
):
    artwork = ArtworkRepository(db).get_by_id(artwork_id, user_id=user_id)
    if artwork is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTWORK_NOT_FOUND)
    return artwork

@router.post("", response_model=Artwork, status_code=status.HTTP_201_CREATED)
def create_artwork(
    artwork: ArtworkCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    fields = artwork.model_dump(exclude={"title", "image_url", "is_published"})
    try:
        return ArtworkRepository(db).create_artwork(
            user_id, artwork.title, artwork.image_url, artwork.is_published, **fields
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.patch("/{artwork_id}", response_model=Artwork)
def update_artwork(
    artwork_id: int,
    updates: ArtworkUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        artwork = ArtworkRepository(db).update_artwork(
            user_id, artwork_id, **updates.model_dump(exclude_none=True)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if artwork is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTWORK_NOT_FOUND)
    return artwork

@router.delete("/{artwork_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_artwork(
    artwork_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    storage: BlobStore = Depends(get_blob_store)
):
    """Delete an artwork and its uploaded image, if any."""
    if not ArtworkRepository(db).remove_artwork(user_id, artwork_id, storage=storage):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTWORK_NOT_FOUND)

@router.post("/{artwork_id}/like", response_model=Artwork)
def like_artwork(artwork_id: int, db: Session = Depends(get_db)):
    """Add a like. No sign-in needed."""
    artwork = ArtworkRepository(db).like(artwork_id)
    if artwork is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTWORK_NOT_FOUND)
    return artwork
