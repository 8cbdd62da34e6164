# core/sa/repositories/auth.py
import uuid
import logging
from datetime import datetime, UTC
from typing import Optional, Tuple
from sqlalchemy.orm import Session
from core.security import create_access_token, decode_access_token, token_expiry
from ..models import AuthSession

logger = logging.getLogger(__name__)

class SessionRepository:
    """Signed-in sessions. A bearer token is valid only while its session row exists."""

    def __init__(self, session: Session):
        self.session = session

    def sign_in(self, user_id: int) -> Tuple[AuthSession, str]:
        """Open a session for the user.

        Returns:
            Tuple of (session row, bearer token)
        """
        auth_session = AuthSession(
            id=uuid.uuid4().hex,
            user_id=user_id,
            expires_at=token_expiry(),
        )
        self.session.add(auth_session)
        self.session.commit()
        token = create_access_token(user_id, auth_session.id, auth_session.expires_at)
        return auth_session, token

    def get_active(self, session_id: str) -> Optional[AuthSession]:
        auth_session = self.session.get(AuthSession, session_id)
        if auth_session is None:
            return None
        expires_at = auth_session.expires_at
        if expires_at.tzinfo is None:
            # SQLite hands back naive datetimes
            expires_at = expires_at.replace(tzinfo=UTC)
        if expires_at <= datetime.now(UTC):
            return None
        return auth_session

    def resolve_token(self, token: str) -> Optional[AuthSession]:
        """Resolve a bearer token to its live session, None if invalid, expired or signed out"""
        payload = decode_access_token(token)
        if payload is None:
            return None
        auth_session = self.get_active(payload["sid"])
        if auth_session is None or str(auth_session.user_id) != payload["sub"]:
            return None
        return auth_session

    def sign_out(self, session_id: str) -> bool:
        result = self.session.query(AuthSession).filter(AuthSession.id == session_id).delete()
        self.session.commit()
        if result:
            logger.info(f"Session {session_id} signed out")
        return result > 0

    def purge_expired(self) -> int:
        result = (
            self.session.query(AuthSession)
            .filter(AuthSession.expires_at <= datetime.now(UTC))
            .delete()
        )
        self.session.commit()
        return result
