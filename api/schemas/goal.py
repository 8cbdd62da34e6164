# api/schemas/goal.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class GoalSet(BaseModel):
    year: int = Field(ge=1900, le=9999)
    target_books: int = Field(ge=1)
    target_pages: Optional[int] = Field(default=None, ge=1)

class Goal(BaseModel):
    id: int
    user_id: int
    year: int
    target_books: int
    target_pages: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class GoalProgress(BaseModel):
    goal: Optional[Goal] = None
    year: int
    books_read: int
    pages_read: int
    book_progress: int
    page_progress: int
