"""Service for the site-wide slideshow settings."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from society_cms.models import SlideshowSettings
from society_cms.schemas.slideshow_settings import SlideshowSettingsUpdate

# Request field -> column, per section
_GENERAL_FIELDS = {
    "default_interval": "default_interval",
    "default_auto_play": "default_auto_play",
    "default_show_controls": "default_show_controls",
    "default_show_indicators": "default_show_indicators",
    "max_slides_per_show": "max_slides_per_show",
}
_ANIMATION_FIELDS = {
    "enabled": "animations_enabled",
    "default_animation": "default_animation",
    "default_duration": "default_animation_duration",
}


class SettingsService:
    """Reads and updates the single settings row, creating it on first use."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self) -> SlideshowSettings:
        result = await self.db.execute(select(SlideshowSettings).limit(1))
        settings_row = result.scalar_one_or_none()

        if settings_row is None:
            settings_row = SlideshowSettings()
            self.db.add(settings_row)
            await self.db.flush()

        return settings_row

    async def update(self, data: SlideshowSettingsUpdate) -> SlideshowSettings:
        settings_row = await self.get()

        if data.general is not None:
            for field, value in data.general.model_dump(exclude_none=True).items():
                setattr(settings_row, _GENERAL_FIELDS[field], value)

        if data.animations is not None:
            for field, value in data.animations.model_dump(exclude_none=True).items():
                setattr(settings_row, _ANIMATION_FIELDS[field], value)

        await self.db.flush()
        return settings_row
