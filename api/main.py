# api/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import config
from core.sa.database import db
from api.routes import auth, books, artworks, suggestions, users, goals, site

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database schema on startup
    config.configure_logging()
    db.init_db()
    logger.info("Database ready")
    yield

app = FastAPI(title="Elise Reads API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(books.router)
app.include_router(artworks.router)
app.include_router(suggestions.router)
app.include_router(users.router)
app.include_router(goals.router)
app.include_router(site.settings_router)
app.include_router(site.storage_router)

@app.get("/")
async def root():
    return {"service": "Elise Reads API"}

@app.get("/health")
async def health():
    return {"status": "ok"}
