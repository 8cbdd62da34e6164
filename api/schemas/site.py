# api/schemas/site.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

class SiteSettings(BaseModel):
    site_name: Optional[str] = None
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    hero_description: Optional[str] = None
    hero_image_url: Optional[str] = None
    hero_image_storage_id: Optional[str] = None
    updated_at: Optional[datetime] = None

class SiteSettingsUpdate(BaseModel):
    site_name: Optional[str] = None
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    hero_description: Optional[str] = None
    hero_image_url: Optional[str] = None
    hero_image_storage_id: Optional[str] = None

class StoredFile(BaseModel):
    storage_id: str
    url: str
    content_type: str
    size: int
