"""Site-wide slideshow settings routes."""

from fastapi import APIRouter

from society_cms.api.deps import AdminUser, DBSession
from society_cms.schemas.common import ApiResponse
from society_cms.schemas.slideshow_settings import (
    SlideshowSettingsResponse,
    SlideshowSettingsUpdate,
)
from society_cms.services.settings_service import SettingsService

router = APIRouter(prefix="/slideshow-settings", tags=["slideshow-settings"])


@router.get("", response_model=ApiResponse[SlideshowSettingsResponse])
async def get_settings(db: DBSession) -> ApiResponse[SlideshowSettingsResponse]:
    """Get slideshow settings, creating the defaults on first use."""
    service = SettingsService(db)
    settings_row = await service.get()
    return ApiResponse(data=SlideshowSettingsResponse.model_validate(settings_row))


@router.put("", response_model=ApiResponse[SlideshowSettingsResponse])
async def update_settings(
    data: SlideshowSettingsUpdate,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[SlideshowSettingsResponse]:
    """Merge new values into the slideshow settings."""
    service = SettingsService(db)
    settings_row = await service.update(data)
    return ApiResponse(
        data=SlideshowSettingsResponse.model_validate(settings_row),
        message="Settings updated successfully",
    )
