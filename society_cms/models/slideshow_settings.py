"""Singleton settings applied to slideshows site-wide."""

from sqlalchemy import Boolean, Enum, Integer
from sqlalchemy.orm import Mapped, mapped_column

from society_cms.models.base import Base, TimestampMixin, UUIDMixin
from society_cms.models.slide import Animation
from society_cms.models.slideshow import DEFAULT_INTERVAL_MS


class SlideshowSettings(Base, UUIDMixin, TimestampMixin):
    """Defaults for new slideshows and the per-slideshow slide cap.

    Only one row is expected; ``SettingsService`` creates it lazily.
    """

    __tablename__ = "slideshow_settings"

    # General
    default_interval: Mapped[int] = mapped_column(Integer, default=DEFAULT_INTERVAL_MS, nullable=False)
    default_auto_play: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    default_show_controls: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    default_show_indicators: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    max_slides_per_show: Mapped[int] = mapped_column(Integer, default=10, nullable=False)

    # Animations
    animations_enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    default_animation: Mapped[Animation] = mapped_column(
        Enum(Animation, name="slide_animation_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=Animation.FADE,
    )
    default_animation_duration: Mapped[int] = mapped_column(Integer, default=500, nullable=False)

    @property
    def general(self) -> dict:
        return {
            "default_interval": self.default_interval,
            "default_auto_play": self.default_auto_play,
            "default_show_controls": self.default_show_controls,
            "default_show_indicators": self.default_show_indicators,
            "max_slides_per_show": self.max_slides_per_show,
        }

    @property
    def animations(self) -> dict:
        return {
            "enabled": self.animations_enabled,
            "default_animation": self.default_animation,
            "default_duration": self.default_animation_duration,
        }
