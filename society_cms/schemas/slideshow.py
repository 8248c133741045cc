"""Pydantic schemas for slideshows."""

import enum
from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field

from society_cms.models.slideshow import MAX_DURATION_MS, MIN_DURATION_MS
from society_cms.schemas.slide import SlideResponse

Interval = Annotated[int, Field(ge=MIN_DURATION_MS, le=MAX_DURATION_MS)]


class SlideshowCreate(BaseModel):
    """Schema for creating a slideshow.

    Display options left unset fall back to the site-wide slideshow settings.
    """

    name: str = Field(..., max_length=200)
    description: str | None = None
    pages: list[str]
    is_active: bool = True
    auto_play: bool | None = None
    interval: Interval | None = None
    show_controls: bool | None = None
    show_indicators: bool | None = None


class SlideshowUpdate(BaseModel):
    """Schema for updating a slideshow."""

    name: str | None = Field(None, max_length=200)
    description: str | None = None
    pages: list[str] | None = None
    is_active: bool | None = None
    auto_play: bool | None = None
    interval: Interval | None = None
    show_controls: bool | None = None
    show_indicators: bool | None = None


class SlideshowResponse(BaseModel):
    """Schema for slideshow response."""

    id: UUID
    name: str
    description: str
    pages: list[str]
    is_active: bool
    auto_play: bool
    interval: int
    show_controls: bool
    show_indicators: bool
    author_id: UUID | None
    views: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class SlideshowListItem(SlideshowResponse):
    """Slideshow in a list, with its number of active slides."""

    slide_count: int


class SlideshowDetail(SlideshowResponse):
    """Slideshow with its slides in display order."""

    slides: list[SlideResponse] = []


class SlideshowAction(str, enum.Enum):
    """Quick actions offered on the slideshow list."""

    TOGGLE_ACTIVE = "toggle_active"
    TOGGLE_AUTOPLAY = "toggle_autoplay"
    INCREMENT_VIEWS = "increment_views"


class SlideshowActionRequest(BaseModel):
    """Body of ``PATCH /slideshows/{id}``."""

    action: SlideshowAction
