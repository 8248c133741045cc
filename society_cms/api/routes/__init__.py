from society_cms.api.routes.auth import router as auth_router
from society_cms.api.routes.slides import router as slides_router
from society_cms.api.routes.admin_slides import router as admin_slides_router
from society_cms.api.routes.slideshows import router as slideshows_router
from society_cms.api.routes.slideshow_settings import router as slideshow_settings_router

__all__ = [
    "auth_router",
    "slides_router",
    "admin_slides_router",
    "slideshows_router",
    "slideshow_settings_router",
]
