"""Slide routes."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from society_cms.api.deps import AdminUser, DBSession
from society_cms.config import settings
from society_cms.schemas.common import ApiResponse, Pagination
from society_cms.schemas.slide import (
    SlideActionRequest,
    SlideCreate,
    SlideResponse,
    SlideUpdate,
)
from society_cms.services.slide_service import SlideService

router = APIRouter(prefix="/slides", tags=["slides"])


@router.get("", response_model=ApiResponse[list[SlideResponse]])
async def list_slides(
    db: DBSession,
    slideshow_id: UUID | None = None,
    is_active: bool | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
) -> ApiResponse[list[SlideResponse]]:
    """List slides, grouped by slideshow in display order."""
    service = SlideService(db)
    slides, total = await service.list_slides(slideshow_id, is_active, page, limit)

    return ApiResponse(
        data=[SlideResponse.model_validate(slide) for slide in slides],
        pagination=Pagination.build(page, limit, total),
    )


@router.post("", response_model=ApiResponse[SlideResponse], status_code=status.HTTP_201_CREATED)
async def create_slide(
    data: SlideCreate,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[SlideResponse]:
    """Create a slide at the end of its slideshow, or at ``order``."""
    service = SlideService(db)
    slide = await service.create(data)

    return ApiResponse(
        data=SlideResponse.model_validate(slide),
        message="Slide created successfully",
    )


@router.get("/{slide_id}", response_model=ApiResponse[SlideResponse])
async def get_slide(slide_id: UUID, db: DBSession) -> ApiResponse[SlideResponse]:
    """Get a single slide."""
    service = SlideService(db)
    slide = await service.get(slide_id)
    return ApiResponse(data=SlideResponse.model_validate(slide))


@router.put("/{slide_id}", response_model=ApiResponse[SlideResponse])
async def update_slide(
    slide_id: UUID,
    data: SlideUpdate,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[SlideResponse]:
    """Update a slide, including moving it within or between slideshows."""
    service = SlideService(db)
    slide = await service.update(slide_id, data)

    return ApiResponse(
        data=SlideResponse.model_validate(slide),
        message="Slide updated successfully",
    )


@router.patch("/{slide_id}", response_model=ApiResponse[SlideResponse])
async def patch_slide(
    slide_id: UUID,
    body: SlideActionRequest,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[SlideResponse]:
    """Quick actions: toggle-active, move-up, move-down, set-order, duplicate."""
    service = SlideService(db)
    slide, message = await service.apply_action(slide_id, body.root)

    return ApiResponse(data=SlideResponse.model_validate(slide), message=message)


@router.delete("/{slide_id}", response_model=ApiResponse[None])
async def delete_slide(
    slide_id: UUID,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[None]:
    """Delete a slide and renumber the rest of its slideshow."""
    service = SlideService(db)
    await service.delete(slide_id)

    return ApiResponse(message="Slide deleted successfully")
