# api/schemas/book.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from core.sa.models import BookStatus

class BookBase(BaseModel):
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    cover_url: Optional[str] = None
    cover_storage_id: Optional[str] = None
    isbn: Optional[str] = None
    genre: Optional[str] = None
    series: Optional[str] = None
    page_count: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    status: BookStatus
    rating: Optional[float] = Field(default=None, ge=0)
    review: Optional[str] = None
    gifted_by: Optional[str] = None

class BookCreate(BookBase):
    is_favorite: Optional[bool] = None

class BookUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = Field(default=None, min_length=1)
    cover_url: Optional[str] = None
    cover_storage_id: Optional[str] = None
    genre: Optional[str] = None
    series: Optional[str] = None
    page_count: Optional[int] = Field(default=None, ge=0)
    pages_read: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    status: Optional[BookStatus] = None
    rating: Optional[float] = Field(default=None, ge=0)
    review: Optional[str] = None
    is_favorite: Optional[bool] = None
    gifted_by: Optional[str] = None

class Book(BookBase):
    id: int
    user_id: int
    pages_read: Optional[int] = None
    is_favorite: bool
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
