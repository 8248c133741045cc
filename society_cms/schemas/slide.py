"""Pydantic schemas for slides."""

from datetime import datetime
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BaseModel, Field, RootModel, field_validator

from society_cms.models.slide import DEFAULT_DURATION_MS, Animation
from society_cms.models.slideshow import MAX_DURATION_MS, MIN_DURATION_MS

Duration = Annotated[int, Field(ge=MIN_DURATION_MS, le=MAX_DURATION_MS)]


class LocalizedText(BaseModel):
    """Text in English and Tamil."""

    en: str | None = None
    ta: str | None = None

    @field_validator("en", "ta")
    @classmethod
    def strip(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v

    def is_blank(self) -> bool:
        return not self.en and not self.ta


class SlideCreate(BaseModel):
    """Schema for creating a slide.

    ``order`` is optional: omitted appends the slide, any other value inserts
    it there (clamped into range) and shifts the later slides.
    """

    slideshow_id: UUID
    title: LocalizedText
    content: LocalizedText | None = None
    image_url: str | None = Field(None, max_length=500)
    button_text: LocalizedText | None = None
    button_link: str | None = Field(None, max_length=500)
    is_active: bool = True
    order: int | None = None
    background_color: str = Field("#ffffff", max_length=20)
    text_color: str = Field("#000000", max_length=20)
    animation: Animation = Animation.FADE
    duration: Duration = DEFAULT_DURATION_MS


class SlideUpdate(BaseModel):
    """Schema for updating a slide, including moving it or changing its slideshow."""

    slideshow_id: UUID | None = None
    title: LocalizedText | None = None
    content: LocalizedText | None = None
    image_url: str | None = Field(None, max_length=500)
    button_text: LocalizedText | None = None
    button_link: str | None = Field(None, max_length=500)
    is_active: bool | None = None
    order: int | None = None
    background_color: str | None = Field(None, max_length=20)
    text_color: str | None = Field(None, max_length=20)
    animation: Animation | None = None
    duration: Duration | None = None


class SlideResponse(BaseModel):
    """Schema for slide response."""

    id: UUID
    slideshow_id: UUID
    order: int
    is_active: bool
    title: LocalizedText
    content: LocalizedText
    image_url: str | None
    button_text: LocalizedText
    button_link: str | None
    background_color: str
    text_color: str
    animation: Animation
    duration: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# PATCH /slides/{id} actions


class ToggleActive(BaseModel):
    action: Literal["toggle-active"]


class MoveUp(BaseModel):
    action: Literal["move-up"]


class MoveDown(BaseModel):
    action: Literal["move-down"]


class SetOrder(BaseModel):
    action: Literal["set-order"]
    value: int


class Duplicate(BaseModel):
    action: Literal["duplicate"]


SlideAction = Annotated[
    Union[ToggleActive, MoveUp, MoveDown, SetOrder, Duplicate],
    Field(discriminator="action"),
]


class SlideActionRequest(RootModel[SlideAction]):
    """Body of ``PATCH /slides/{id}``."""


# Admin bulk operations


class _BulkRequest(BaseModel):
    slide_ids: list[UUID] = Field(..., min_length=1)


class BulkActivate(_BulkRequest):
    action: Literal["activate"]


class BulkDeactivate(_BulkRequest):
    action: Literal["deactivate"]


class BulkMoveToSlideshow(_BulkRequest):
    action: Literal["move-to-slideshow"]
    slideshow_id: UUID


class BulkUpdateAnimation(_BulkRequest):
    action: Literal["update-animation"]
    animation: Animation


class BulkUpdateDuration(_BulkRequest):
    action: Literal["update-duration"]
    duration: Duration


class BulkDuplicate(_BulkRequest):
    action: Literal["duplicate"]


BulkAction = Annotated[
    Union[
        BulkActivate,
        BulkDeactivate,
        BulkMoveToSlideshow,
        BulkUpdateAnimation,
        BulkUpdateDuration,
        BulkDuplicate,
    ],
    Field(discriminator="action"),
]


class BulkActionRequest(RootModel[BulkAction]):
    """Body of ``POST /admin/slides``."""


class BulkDeleteRequest(BaseModel):
    """Body of ``DELETE /admin/slides``."""

    slide_ids: list[UUID] = Field(..., min_length=1)


class BulkResult(BaseModel):
    """Outcome of a bulk operation."""

    affected: int


class SlideshowBreakdown(BaseModel):
    slideshow_id: UUID
    name: str
    total_slides: int
    active_slides: int
    inactive_slides: int


class AnimationBreakdown(BaseModel):
    animation: Animation
    count: int


class SlideStats(BaseModel):
    """Counts shown on the admin slide console."""

    total: int
    active: int
    inactive: int
    slideshow_breakdown: list[SlideshowBreakdown]
    animation_breakdown: list[AnimationBreakdown]


class AdminSlideList(BaseModel):
    """Admin list payload: the page of slides plus optional stats."""

    slides: list[SlideResponse]
    stats: SlideStats | None = None
