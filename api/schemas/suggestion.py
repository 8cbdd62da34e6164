# api/schemas/suggestion.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from core.sa.models import SuggestionStatus
from .book import Book

class SuggestionCreate(BaseModel):
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    cover_url: Optional[str] = None
    suggested_by: str = Field(min_length=1)
    suggested_by_email: Optional[EmailStr] = None
    reason: Optional[str] = None
    genre: Optional[str] = None

class Suggestion(BaseModel):
    id: int
    title: str
    author: str
    cover_url: Optional[str] = None
    suggested_by: str
    suggested_by_email: Optional[str] = None
    reason: Optional[str] = None
    genre: Optional[str] = None
    status: SuggestionStatus
    created_at: datetime
    reviewed_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class DuplicateCheck(BaseModel):
    exists: bool
    location: Optional[str] = None
    book: Optional[Book] = None
    suggestion: Optional[Suggestion] = None
