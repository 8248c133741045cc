from society_cms.services.auth import AuthService, auth_service
from society_cms.services.ordering import Direction, OrderedCollectionManager
from society_cms.services.slide_repository import SlideRepository
from society_cms.services.slide_service import SlideService
from society_cms.services.slideshow_service import SlideshowService
from society_cms.services.settings_service import SettingsService

__all__ = [
    "AuthService",
    "auth_service",
    "Direction",
    "OrderedCollectionManager",
    "SlideRepository",
    "SlideService",
    "SlideshowService",
    "SettingsService",
]
