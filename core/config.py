# core/config.py
import os
import logging
from typing import List
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///elise_reads.db")
STORAGE_DIR = os.getenv("STORAGE_DIR", "data/storage")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7)))

JWT_SECRET = os.getenv("JWT_SECRET")
if not JWT_SECRET:
    JWT_SECRET = os.urandom(48).hex()
    logger.warning("JWT_SECRET missing, using a temporary key. Tokens will not survive a restart.")

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",        # Vite dev server
    "http://127.0.0.1:5173",
    "http://localhost:4173",        # Vite preview
]


def cors_origins() -> List[str]:
    """Allowed CORS origins: the local dev servers plus anything in CORS_ORIGINS"""
    extra = os.getenv("CORS_ORIGINS", "")
    return DEFAULT_CORS_ORIGINS + [o.strip() for o in extra.split(",") if o.strip()]


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def site_owner_emails() -> List[str]:
    """Accounts allowed to edit the site settings and moderate suggestions.

    Read from SITE_OWNER_EMAILS (comma separated). Empty means every signed-in user.
    """
    owners = os.getenv("SITE_OWNER_EMAILS", "")
    return [e.strip().lower() for e in owners.split(",") if e.strip()]
