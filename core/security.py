# core/security.py
import logging
from datetime import datetime, timedelta, UTC
from typing import Optional, Dict, Any
import bcrypt
from jose import JWTError, jwt

from core import config

logger = logging.getLogger(__name__)

def hash_password(password: str) -> str:
    """Hash a password with bcrypt. Only the first 72 bytes are significant to bcrypt."""
    if not password:
        raise ValueError("Password cannot be empty")
    password_bytes = password.encode("utf-8")[:72]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode("utf-8")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        password_bytes = plain_password.encode("utf-8")[:72]
        return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))
    except ValueError as e:
        logger.error(f"Malformed password hash: {e}")
        return False

def create_access_token(user_id: int, session_id: str, expires_at: datetime) -> str:
    payload = {
        "sub": str(user_id),
        "sid": session_id,
        "exp": expires_at,
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)

def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and verify a token.

    Returns:
        The payload, or None if the token is invalid or expired
    """
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except JWTError:
        return None
    if not payload.get("sub") or not payload.get("sid"):
        return None
    return payload

def token_expiry(now: Optional[datetime] = None) -> datetime:
    return (now or datetime.now(UTC)) + timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
