"""Pydantic schemas for the site-wide slideshow settings."""

from typing import Annotated

from pydantic import BaseModel, Field

from society_cms.models.slide import Animation
from society_cms.models.slideshow import MAX_DURATION_MS, MIN_DURATION_MS

Interval = Annotated[int, Field(ge=MIN_DURATION_MS, le=MAX_DURATION_MS)]
MaxSlides = Annotated[int, Field(ge=1, le=50)]
AnimationDuration = Annotated[int, Field(ge=100, le=2000)]


class GeneralSettings(BaseModel):
    default_interval: int
    default_auto_play: bool
    default_show_controls: bool
    default_show_indicators: bool
    max_slides_per_show: int


class AnimationSettings(BaseModel):
    enabled: bool
    default_animation: Animation
    default_duration: int


class SlideshowSettingsResponse(BaseModel):
    """Schema for slideshow settings response."""

    general: GeneralSettings
    animations: AnimationSettings

    model_config = {"from_attributes": True}


class GeneralSettingsUpdate(BaseModel):
    default_interval: Interval | None = None
    default_auto_play: bool | None = None
    default_show_controls: bool | None = None
    default_show_indicators: bool | None = None
    max_slides_per_show: MaxSlides | None = None


class AnimationSettingsUpdate(BaseModel):
    enabled: bool | None = None
    default_animation: Animation | None = None
    default_duration: AnimationDuration | None = None


class SlideshowSettingsUpdate(BaseModel):
    """Partial update; only the fields present are merged in."""

    general: GeneralSettingsUpdate | None = None
    animations: AnimationSettingsUpdate | None = None
