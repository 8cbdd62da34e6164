# api/schemas/artwork.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

class ArtworkCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: str = Field(min_length=1)
    storage_id: Optional[str] = None
    style: Optional[str] = None
    medium: Optional[str] = None
    series_id: Optional[int] = None
    tags: Optional[List[str]] = None
    is_published: bool

class ArtworkUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    style: Optional[str] = None
    medium: Optional[str] = None
    series_id: Optional[int] = None
    tags: Optional[List[str]] = None
    is_published: Optional[bool] = None

class Artwork(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    image_url: str
    storage_id: Optional[str] = None
    style: Optional[str] = None
    medium: Optional[str] = None
    series_id: Optional[int] = None
    tags: Optional[List[str]] = None
    is_published: bool
    likes: Optional[int] = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class ArtSeriesCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    cover_image_url: Optional[str] = None

class ArtSeries(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    cover_image_url: Optional[str] = None
    is_complete: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
