from society_cms.schemas.common import ApiResponse, Pagination
from society_cms.schemas.auth import UserLogin, UserResponse
from society_cms.schemas.slide import (
    LocalizedText,
    SlideCreate,
    SlideUpdate,
    SlideResponse,
    SlideAction,
    SlideActionRequest,
    ToggleActive,
    MoveUp,
    MoveDown,
    SetOrder,
    Duplicate,
    BulkAction,
    BulkActionRequest,
    BulkDeleteRequest,
    BulkResult,
    SlideStats,
    AdminSlideList,
)
from society_cms.schemas.slideshow import (
    SlideshowCreate,
    SlideshowUpdate,
    SlideshowResponse,
    SlideshowListItem,
    SlideshowDetail,
    SlideshowAction,
    SlideshowActionRequest,
)
from society_cms.schemas.slideshow_settings import (
    SlideshowSettingsResponse,
    SlideshowSettingsUpdate,
)

__all__ = [
    "ApiResponse",
    "Pagination",
    "UserLogin",
    "UserResponse",
    # Slides
    "LocalizedText",
    "SlideCreate",
    "SlideUpdate",
    "SlideResponse",
    "SlideAction",
    "SlideActionRequest",
    "ToggleActive",
    "MoveUp",
    "MoveDown",
    "SetOrder",
    "Duplicate",
    "BulkAction",
    "BulkActionRequest",
    "BulkDeleteRequest",
    "BulkResult",
    "SlideStats",
    "AdminSlideList",
    # Slideshows
    "SlideshowCreate",
    "SlideshowUpdate",
    "SlideshowResponse",
    "SlideshowListItem",
    "SlideshowDetail",
    "SlideshowAction",
    "SlideshowActionRequest",
    "SlideshowSettingsResponse",
    "SlideshowSettingsUpdate",
]
