"""Slide model - one ordered item inside a slideshow."""

import enum
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from society_cms.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from society_cms.models.slideshow import Slideshow


class Animation(str, enum.Enum):
    """Transition animation for a slide."""

    FADE = "fade"
    SLIDE = "slide"
    ZOOM = "zoom"
    NONE = "none"


DEFAULT_DURATION_MS = 5000


class Slide(Base, UUIDMixin, TimestampMixin):
    """Slide model.

    ``order`` is 1-based and dense within a slideshow. It is only ever written
    through ``OrderedCollectionManager``.
    """

    __tablename__ = "slides"
    __table_args__ = (
        Index("ix_slides_slideshow_order", "slideshow_id", "order"),
        Index("ix_slides_slideshow_active", "slideshow_id", "is_active"),
    )

    slideshow_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("slideshows.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    title_en: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    title_ta: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    content_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    content_ta: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    button_text_en: Mapped[str | None] = mapped_column(String(100), nullable=True)
    button_text_ta: Mapped[str | None] = mapped_column(String(100), nullable=True)
    button_link: Mapped[str | None] = mapped_column(String(500), nullable=True)
    background_color: Mapped[str] = mapped_column(String(20), nullable=False, default="#ffffff")
    text_color: Mapped[str] = mapped_column(String(20), nullable=False, default="#000000")
    animation: Mapped[Animation] = mapped_column(
        Enum(Animation, name="slide_animation_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=Animation.FADE,
    )
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=DEFAULT_DURATION_MS)

    # Relationships
    slideshow: Mapped["Slideshow"] = relationship(
        "Slideshow",
        back_populates="slides",
    )

    @property
    def title(self) -> dict[str, str]:
        return {"en": self.title_en, "ta": self.title_ta}

    @property
    def content(self) -> dict[str, str | None]:
        return {"en": self.content_en, "ta": self.content_ta}

    @property
    def button_text(self) -> dict[str, str | None]:
        return {"en": self.button_text_en, "ta": self.button_text_ta}
