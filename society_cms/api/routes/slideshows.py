"""Slideshow routes."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from society_cms.api.deps import AdminUser, DBSession
from society_cms.schemas.common import ApiResponse, Pagination
from society_cms.schemas.slide import SlideResponse
from society_cms.schemas.slideshow import (
    SlideshowActionRequest,
    SlideshowCreate,
    SlideshowDetail,
    SlideshowListItem,
    SlideshowResponse,
    SlideshowUpdate,
)
from society_cms.services.slideshow_service import SlideshowService

router = APIRouter(prefix="/slideshows", tags=["slideshows"])


@router.get("", response_model=ApiResponse[list[SlideshowListItem]])
async def list_slideshows(
    db: DBSession,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    pages: str | None = Query(None, description="Only slideshows shown on this page"),
    is_active: bool | None = None,
    search: str | None = None,
) -> ApiResponse[list[SlideshowListItem]]:
    """List slideshows, newest first."""
    service = SlideshowService(db)
    rows, total = await service.list_slideshows(page, limit, pages, is_active, search)

    return ApiResponse(
        data=[
            SlideshowListItem(
                **SlideshowResponse.model_validate(slideshow).model_dump(),
                slide_count=slide_count,
            )
            for slideshow, slide_count in rows
        ],
        pagination=Pagination.build(page, limit, total),
    )


@router.post("", response_model=ApiResponse[SlideshowResponse], status_code=status.HTTP_201_CREATED)
async def create_slideshow(
    data: SlideshowCreate,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[SlideshowResponse]:
    """Create a slideshow."""
    service = SlideshowService(db)
    slideshow = await service.create(data, current_user.id)

    return ApiResponse(
        data=SlideshowResponse.model_validate(slideshow),
        message="Slideshow created successfully",
    )


@router.get("/{slideshow_id}", response_model=ApiResponse[SlideshowDetail])
async def get_slideshow(
    slideshow_id: UUID,
    db: DBSession,
    include_slides: bool = True,
    admin: bool = False,
) -> ApiResponse[SlideshowDetail]:
    """Get a slideshow with its slides. Public reads count as a view."""
    service = SlideshowService(db)
    slideshow, slides = await service.get(
        slideshow_id, include_slides=include_slides, count_view=not admin
    )

    return ApiResponse(
        data=SlideshowDetail(
            **SlideshowResponse.model_validate(slideshow).model_dump(),
            slides=[SlideResponse.model_validate(slide) for slide in slides],
        )
    )


@router.put("/{slideshow_id}", response_model=ApiResponse[SlideshowResponse])
async def update_slideshow(
    slideshow_id: UUID,
    data: SlideshowUpdate,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[SlideshowResponse]:
    """Update a slideshow."""
    service = SlideshowService(db)
    slideshow = await service.update(slideshow_id, data)

    return ApiResponse(
        data=SlideshowResponse.model_validate(slideshow),
        message="Slideshow updated successfully",
    )


@router.patch("/{slideshow_id}", response_model=ApiResponse[SlideshowResponse])
async def patch_slideshow(
    slideshow_id: UUID,
    body: SlideshowActionRequest,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[SlideshowResponse]:
    """Quick actions: toggle_active, toggle_autoplay, increment_views."""
    service = SlideshowService(db)
    slideshow = await service.apply_action(slideshow_id, body.action)

    return ApiResponse(
        data=SlideshowResponse.model_validate(slideshow),
        message=f"Slideshow {body.action.value.replace('_', ' ')} successfully",
    )


@router.delete("/{slideshow_id}", response_model=ApiResponse[None])
async def delete_slideshow(
    slideshow_id: UUID,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[None]:
    """Delete a slideshow and all of its slides."""
    service = SlideshowService(db)
    await service.delete(slideshow_id)

    return ApiResponse(message="Slideshow and associated slides deleted successfully")
