# api/routes/users.py

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.repositories.user import UserRepository
from api.dependencies import get_current_user_id, get_optional_user_id
from api.schemas.user import User, Profile, ProfileCreate, ProfileUpdate, UserStats

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/me", response_model=Optional[User])
def get_current_user(user_id: Optional[int] = Depends(get_optional_user_id), db: Session = Depends(get_db)):
    """The signed-in user, or null for anonymous callers."""
    if user_id is None:
        return None
    return UserRepository(db).get_by_id(user_id)

@router.get("/me/profile", response_model=Optional[Profile])
def get_profile(user_id: Optional[int] = Depends(get_optional_user_id), db: Session = Depends(get_db)):
    if user_id is None:
        return None
    return UserRepository(db).get_profile(user_id)

@router.post("/me/profile", response_model=Profile)
def create_profile(
    profile: ProfileCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Create the caller's profile. Calling it again returns the existing
    profile untouched.
    """
    try:
        return UserRepository(db).create_profile(user_id, **profile.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.patch("/me/profile", response_model=Profile)
def update_profile(
    updates: ProfileUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        profile = UserRepository(db).update_profile(user_id, **updates.model_dump(exclude_none=True))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile

@router.get("/me/stats", response_model=Optional[UserStats])
def get_stats(user_id: Optional[int] = Depends(get_optional_user_id), db: Session = Depends(get_db)):
    """
    Reading and art statistics for the caller:
    - Book counts per status, total books and favourites
    - Total pages across all books
    - Total and published artworks
    """
    if user_id is None:
        return None
    return UserRepository(db).get_user_stats(user_id)
