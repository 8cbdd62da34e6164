# api/routes/auth.py
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.models import AuthSession
from core.sa.repositories.auth import SessionRepository
from core.sa.repositories.user import UserRepository
from api.dependencies import require_auth_session
from api.schemas.auth import SignUp, Token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/signup", response_model=Token, status_code=status.HTTP_201_CREATED)
def sign_up(payload: SignUp, db: Session = Depends(get_db)):
    """
    Create an account and sign it in.

    When a name is given the user's profile is created as well.
    """
    repo = UserRepository(db)
    try:
        user = repo.create_user(payload.email, payload.password, name=payload.name)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if payload.name:
        repo.create_profile(user.id, name=payload.name)

    _, token = SessionRepository(db).sign_in(user.id)
    return Token(access_token=token)

@router.post("/login", response_model=Token)
def sign_in(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    user = UserRepository(db).authenticate(form.username, form.password)
    if not user:
        logger.warning(f"Failed sign-in for {form.username}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Incorrect email or password")

    _, token = SessionRepository(db).sign_in(user.id)
    return Token(access_token=token)

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(auth_session: AuthSession = Depends(require_auth_session), db: Session = Depends(get_db)):
    """End the caller's session. The token stops working immediately."""
    SessionRepository(db).sign_out(auth_session.id)
