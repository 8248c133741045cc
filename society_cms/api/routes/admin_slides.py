"""Admin slide console routes: search, stats and bulk operations."""

from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Query

from society_cms.api.deps import AdminUser, DBSession
from society_cms.config import settings
from society_cms.schemas.common import ApiResponse, Pagination
from society_cms.schemas.slide import (
    AdminSlideList,
    BulkActionRequest,
    BulkDeleteRequest,
    BulkResult,
    SlideResponse,
)
from society_cms.services.slide_service import SlideService, SortField

router = APIRouter(prefix="/admin/slides", tags=["admin"])


@router.get("", response_model=ApiResponse[AdminSlideList])
async def list_admin_slides(
    current_user: AdminUser,
    db: DBSession,
    slideshow_id: UUID | None = None,
    is_active: bool | None = None,
    search: str | None = None,
    sort_by: SortField = "created_at",
    sort_order: Literal["asc", "desc"] = "desc",
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    include_stats: bool = False,
) -> ApiResponse[AdminSlideList]:
    """Search and sort slides across all slideshows."""
    service = SlideService(db)
    slides, total = await service.admin_list(
        slideshow_id=slideshow_id,
        is_active=is_active,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    stats = await service.stats() if include_stats else None

    return ApiResponse(
        data=AdminSlideList(
            slides=[SlideResponse.model_validate(slide) for slide in slides],
            stats=stats,
        ),
        pagination=Pagination.build(page, limit, total),
    )


@router.post("", response_model=ApiResponse[BulkResult])
async def bulk_slide_action(
    body: BulkActionRequest,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[BulkResult]:
    """Apply one action to many slides."""
    service = SlideService(db)
    affected, message = await service.bulk_action(body.root)
    return ApiResponse(data=BulkResult(affected=affected), message=message)


@router.delete("", response_model=ApiResponse[BulkResult])
async def bulk_delete_slides(
    body: BulkDeleteRequest,
    current_user: AdminUser,
    db: DBSession,
) -> ApiResponse[BulkResult]:
    """Delete many slides and renumber the affected slideshows."""
    service = SlideService(db)
    deleted = await service.bulk_delete(body.slide_ids)
    return ApiResponse(
        data=BulkResult(affected=deleted),
        message=f"{deleted} slides deleted successfully",
    )
