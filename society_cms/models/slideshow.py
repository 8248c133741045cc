"""Slideshow model - the parent collection that owns an ordered set of slides."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from society_cms.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from society_cms.models.slide import Slide


# Bounds for slide duration and slideshow interval, in milliseconds
MIN_DURATION_MS = 1000
MAX_DURATION_MS = 30000
DEFAULT_INTERVAL_MS = 5000


class Slideshow(Base, UUIDMixin, TimestampMixin):
    """Slideshow shown on one or more site pages."""

    __tablename__ = "slideshows"

    name: Mapped[str] = mapped_column(String(200), unique=True, index=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    pages: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    auto_play: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    interval: Mapped[int] = mapped_column(Integer, default=DEFAULT_INTERVAL_MS, nullable=False)
    show_controls: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_indicators: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    author_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relationships
    slides: Mapped[list["Slide"]] = relationship(
        "Slide",
        back_populates="slideshow",
        order_by="Slide.order",
        passive_deletes=True,
    )
