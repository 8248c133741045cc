from society_cms.models.base import Base
from society_cms.models.user import User, UserRole
from society_cms.models.slideshow import Slideshow, MIN_DURATION_MS, MAX_DURATION_MS
from society_cms.models.slide import Slide, Animation
from society_cms.models.slideshow_settings import SlideshowSettings

__all__ = [
    "Base",
    "User",
    "UserRole",
    "Slideshow",
    "MIN_DURATION_MS",
    "MAX_DURATION_MS",
    "Slide",
    "Animation",
    "SlideshowSettings",
]
