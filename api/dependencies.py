# api/dependencies.py
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from core import config
from core.sa.database import get_db
from core.sa.models import AuthSession
from core.sa.repositories.auth import SessionRepository
from core.sa.repositories.user import UserRepository
from core.storage import BlobStore

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

def not_authenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_auth_session(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[AuthSession]:
    """The caller's live session, or None for anonymous or invalid tokens"""
    if not token:
        return None
    return SessionRepository(db).resolve_token(token)

def require_auth_session(auth_session: Optional[AuthSession] = Depends(get_auth_session)) -> AuthSession:
    if auth_session is None:
        raise not_authenticated()
    return auth_session

def get_optional_user_id(auth_session: Optional[AuthSession] = Depends(get_auth_session)) -> Optional[int]:
    return auth_session.user_id if auth_session else None

def get_current_user_id(user_id: Optional[int] = Depends(get_optional_user_id)) -> int:
    if user_id is None:
        raise not_authenticated()
    return user_id

def get_blob_store(db: Session = Depends(get_db)) -> BlobStore:
    return BlobStore(db)

def get_site_owner_id(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)) -> int:
    """The caller's user id, if they may manage the site itself"""
    owners = config.site_owner_emails()
    if owners:
        user = UserRepository(db).get_by_id(user_id)
        if user is None or user.email not in owners:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the site owner can do this")
    return user_id
