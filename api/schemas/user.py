# api/schemas/user.py
from datetime import datetime
from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, Field

ThemeName = Literal["light", "dark", "kawaii"]

class User(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class ProfileCreate(BaseModel):
    name: str = Field(min_length=1)
    username: Optional[str] = None
    is_parent: bool = False
    theme: Optional[ThemeName] = None
    yearly_book_goal: Optional[int] = Field(default=None, ge=0)
    notifications: Optional[bool] = None

class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    theme: Optional[ThemeName] = None
    yearly_book_goal: Optional[int] = Field(default=None, ge=0)
    notifications: Optional[bool] = None

class Profile(BaseModel):
    id: int
    user_id: int
    name: str
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    is_parent: bool
    theme: Optional[ThemeName] = None
    yearly_book_goal: Optional[int] = None
    notifications: Optional[bool] = None

    model_config = ConfigDict(from_attributes=True)

class UserStats(BaseModel):
    books_read: int
    books_reading: int
    books_wishlist: int
    total_books: int
    total_pages: int
    favorites: int
    total_artworks: int
    published_artworks: int
