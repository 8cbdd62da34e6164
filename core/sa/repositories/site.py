# core/sa/repositories/site.py
from typing import Dict, Any
from sqlalchemy.orm import Session
from ..models import SiteSettings

DEFAULT_SITE_SETTINGS = {
    "site_name": "Elise Reads",
    "hero_title": "Welcome to My Reading World",
    "hero_subtitle": "Books & Art",
    "hero_description": "A place to track my reading adventures and share my artwork",
}

SETTINGS_FIELDS = {
    "site_name", "hero_title", "hero_subtitle", "hero_description",
    "hero_image_url", "hero_image_storage_id",
}

class SiteSettingsRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_row(self):
        return self.session.query(SiteSettings).order_by(SiteSettings.id).first()

    def get(self) -> Dict[str, Any]:
        """The public page copy, or the defaults if nothing has been saved"""
        settings = self.get_row()
        if settings is None:
            return dict(DEFAULT_SITE_SETTINGS)
        return {
            "site_name": settings.site_name,
            "hero_title": settings.hero_title,
            "hero_subtitle": settings.hero_subtitle,
            "hero_description": settings.hero_description,
            "hero_image_url": settings.hero_image_url,
            "hero_image_storage_id": settings.hero_image_storage_id,
            "updated_at": settings.updated_at,
        }

    def update(self, **updates) -> Dict[str, Any]:
        """Patch the settings, creating the row from the defaults on first write"""
        updates = {k: v for k, v in updates.items() if v is not None}
        unknown = set(updates) - SETTINGS_FIELDS
        if unknown:
            raise ValueError(f"Unknown settings fields: {', '.join(sorted(unknown))}")

        settings = self.get_row()
        if settings is None:
            settings = SiteSettings(**DEFAULT_SITE_SETTINGS)
            self.session.add(settings)
        for field, value in updates.items():
            setattr(settings, field, value)
        self.session.commit()
        return self.get()
