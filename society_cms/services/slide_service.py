"""Service for slide lifecycle operations."""

import logging
from typing import Any, Literal
from uuid import UUID

from sqlalchemy import case, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from society_cms.exceptions import BoundaryError, ConflictError, NotFound, ValidationError
from society_cms.models import Slide, Slideshow
from society_cms.models.base import utcnow
from society_cms.schemas.slide import (
    BulkAction,
    BulkActivate,
    BulkDeactivate,
    BulkDuplicate,
    BulkMoveToSlideshow,
    BulkUpdateAnimation,
    BulkUpdateDuration,
    Duplicate,
    MoveDown,
    MoveUp,
    SetOrder,
    SlideAction,
    SlideCreate,
    SlideStats,
    SlideUpdate,
    ToggleActive,
)
from society_cms.services.ordering import Direction, OrderedCollectionManager
from society_cms.services.settings_service import SettingsService
from society_cms.services.slide_repository import SlideRepository

logger = logging.getLogger(__name__)

COPY_SUFFIX = {"en": " (Copy)", "ta": " (நகல்)"}

SortField = Literal["created_at", "updated_at", "order", "slideshow", "duration", "animation"]

_LOCALIZED_FIELDS = ("title", "content", "button_text")

# Columns that cannot be cleared; an explicit null leaves them unchanged
_REQUIRED_FIELDS = ("is_active", "background_color", "text_color", "animation", "duration")


def _apply_fields(slide: Slide, values: dict[str, Any]) -> None:
    """Copy request fields onto the model, splitting bilingual ones per locale."""
    for field, value in values.items():
        if field in _LOCALIZED_FIELDS:
            value = value or {}
            en, ta = value.get("en"), value.get("ta")
            if field == "title":
                # Title columns are not nullable
                en, ta = en or "", ta or ""
            setattr(slide, f"{field}_en", en)
            setattr(slide, f"{field}_ta", ta)
        else:
            setattr(slide, field, value)


class SlideService:
    """Create, update, reorder and delete slides.

    All order changes go through ``OrderedCollectionManager``.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = SlideRepository(db)
        self.ordering = OrderedCollectionManager(self.repository)
        self.settings_service = SettingsService(db)

    async def _check_capacity(self, slideshow_id: UUID, incoming: int = 1) -> None:
        """Refuse to grow a slideshow past the configured maximum."""
        settings_row = await self.settings_service.get()
        count = await self.repository.count_in_scope(slideshow_id)

        if count + incoming > settings_row.max_slides_per_show:
            logger.warning(
                f"Slideshow {slideshow_id} is full ({count}/{settings_row.max_slides_per_show})"
            )
            raise ConflictError(
                f"Slideshow already has the maximum of {settings_row.max_slides_per_show} slides"
            )

    async def _lock_slide(self, slide_id: UUID, *other_scopes: UUID) -> Slide:
        """Lock the slide's slideshow (and any other scopes), then load the slide as stored."""
        slideshow_id = await self.repository.get_parent_id(slide_id)
        await self.repository.lock_scope(slideshow_id, *other_scopes)

        slide = await self.repository.get_by_id(slide_id, refresh=True)
        if slide.slideshow_id != slideshow_id:
            logger.warning(f"Slide {slide_id} moved to another slideshow while waiting for a lock")
            raise ConflictError("Slide was moved by another request, please retry")
        return slide

    async def get(self, slide_id: UUID) -> Slide:
        return await self.repository.get_by_id(slide_id)

    async def list_slides(
        self,
        slideshow_id: UUID | None = None,
        is_active: bool | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> tuple[list[Slide], int]:
        """List slides grouped by slideshow in display order."""
        query = select(Slide)
        if slideshow_id is not None:
            query = query.where(Slide.slideshow_id == slideshow_id)
        if is_active is not None:
            query = query.where(Slide.is_active == is_active)

        total = await self._count(query)
        result = await self.db.execute(
            query.order_by(Slide.slideshow_id, Slide.order)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        return list(result.scalars().all()), total

    async def create(self, data: SlideCreate) -> Slide:
        """Create a slide, appending it or inserting it at ``data.order``."""
        if data.title.is_blank():
            raise ValidationError("Title is required in at least one language")

        async def _create() -> Slide:
            await self.repository.lock_scope(data.slideshow_id)
            await self._check_capacity(data.slideshow_id)

            if data.order is None:
                order = await self.ordering.next_order(data.slideshow_id)
            else:
                order = await self.ordering.insert_at(data.slideshow_id, data.order)

            slide = Slide(slideshow_id=data.slideshow_id, order=order)
            _apply_fields(slide, data.model_dump(exclude={"slideshow_id", "order"}))
            await self.repository.insert_record(slide)
            return slide

        slide = await self.repository.run_in_transaction(_create)
        logger.info(f"Created slide {slide.id} in slideshow {slide.slideshow_id} at order {slide.order}")
        return slide

    async def update(self, slide_id: UUID, data: SlideUpdate) -> Slide:
        """Update a slide; a new order or slideshow is applied through the ordering manager."""
        values = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field not in _REQUIRED_FIELDS
        }
        if "title" in values and (data.title is None or data.title.is_blank()):
            raise ValidationError("Title must have content in at least one language")

        target_slideshow_id = values.pop("slideshow_id", None)
        target_order = values.pop("order", None)

        async def _update() -> Slide:
            other_scopes = [target_slideshow_id] if target_slideshow_id is not None else []
            slide = await self._lock_slide(slide_id, *other_scopes)

            if target_slideshow_id is not None and target_slideshow_id != slide.slideshow_id:
                await self._check_capacity(target_slideshow_id)
                await self.ordering.move_to_parent(
                    slide.id, slide.slideshow_id, target_slideshow_id, target_order
                )
            elif target_order is not None and target_order != slide.order:
                await self.ordering.move_to(slide.slideshow_id, slide.id, target_order)

            _apply_fields(slide, values)
            slide.updated_at = utcnow()
            await self.db.flush()
            return slide

        return await self.repository.run_in_transaction(_update)

    async def delete(self, slide_id: UUID) -> None:
        """Delete a slide and close the gap it leaves."""

        async def _delete() -> None:
            slide = await self._lock_slide(slide_id)
            slideshow_id, order = slide.slideshow_id, slide.order

            await self.repository.delete_record(slide.id)
            await self.ordering.close_gap(slideshow_id, order)

        await self.repository.run_in_transaction(_delete)
        logger.info(f"Deleted slide {slide_id}")

    async def duplicate(self, slide_id: UUID) -> Slide:
        """Copy a slide to the end of its slideshow. Copies always start inactive."""

        async def _duplicate() -> Slide:
            source = await self._lock_slide(slide_id)
            await self._check_capacity(source.slideshow_id)

            clone = Slide(
                slideshow_id=source.slideshow_id,
                order=await self.ordering.next_order(source.slideshow_id),
                is_active=False,
                title_en=f"{source.title_en}{COPY_SUFFIX['en']}" if source.title_en else "",
                title_ta=f"{source.title_ta}{COPY_SUFFIX['ta']}" if source.title_ta else "",
                content_en=source.content_en,
                content_ta=source.content_ta,
                image_url=source.image_url,
                button_text_en=source.button_text_en,
                button_text_ta=source.button_text_ta,
                button_link=source.button_link,
                background_color=source.background_color,
                text_color=source.text_color,
                animation=source.animation,
                duration=source.duration,
            )
            await self.repository.insert_record(clone)
            return clone

        clone = await self.repository.run_in_transaction(_duplicate)
        logger.info(f"Duplicated slide {slide_id} as {clone.id}")
        return clone

    async def apply_action(self, slide_id: UUID, action: SlideAction) -> tuple[Slide, str]:
        """Run a PATCH action and return the affected slide with a status message.

        For ``duplicate`` the returned slide is the new copy.
        """
        if isinstance(action, Duplicate):
            return await self.duplicate(slide_id), "Slide duplicated successfully"

        slide = await self._lock_slide(slide_id)

        if isinstance(action, ToggleActive):
            slide.is_active = not slide.is_active
            slide.updated_at = utcnow()
            await self.db.flush()
            state = "activated" if slide.is_active else "deactivated"
            return slide, f"Slide {state} successfully"

        if isinstance(action, (MoveUp, MoveDown)):
            direction = Direction.UP if isinstance(action, MoveUp) else Direction.DOWN
            moved = await self.ordering.swap_adjacent(slide.slideshow_id, slide.id, direction)
            if not moved:
                edge = "top" if direction == Direction.UP else "bottom"
                raise BoundaryError(f"Slide is already at the {edge}")
            return slide, f"Slide moved {direction.value} successfully"

        if isinstance(action, SetOrder):
            if action.value < 1:
                raise ValidationError("Invalid order value")
            await self.ordering.move_to(slide.slideshow_id, slide.id, action.value)
            return slide, "Slide order updated successfully"

        raise ValidationError("Invalid action")

    # Admin console

    async def admin_list(
        self,
        slideshow_id: UUID | None = None,
        is_active: bool | None = None,
        search: str | None = None,
        sort_by: SortField = "created_at",
        sort_order: Literal["asc", "desc"] = "desc",
        page: int = 1,
        limit: int = 20,
    ) -> tuple[list[Slide], int]:
        """Search and sort slides across slideshows."""
        query = select(Slide)
        if slideshow_id is not None:
            query = query.where(Slide.slideshow_id == slideshow_id)
        if is_active is not None:
            query = query.where(Slide.is_active == is_active)
        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(
                    Slide.title_en.ilike(pattern),
                    Slide.title_ta.ilike(pattern),
                    Slide.content_en.ilike(pattern),
                    Slide.content_ta.ilike(pattern),
                )
            )

        def direction(column):
            return column.desc() if sort_order == "desc" else column.asc()

        if sort_by == "slideshow":
            ordering = [direction(Slide.slideshow_id), Slide.order.asc()]
        elif sort_by == "order":
            ordering = [Slide.slideshow_id.asc(), direction(Slide.order)]
        else:
            ordering = [direction(getattr(Slide, sort_by))]

        total = await self._count(query)
        result = await self.db.execute(
            query.order_by(*ordering).offset((page - 1) * limit).limit(limit)
        )
        return list(result.scalars().all()), total

    async def stats(self) -> SlideStats:
        """Slide counts overall, per slideshow (top 10) and per animation."""
        total = await self._count(select(Slide))
        active = await self._count(select(Slide).where(Slide.is_active == True))

        total_col = func.count(Slide.id).label("total")
        active_col = func.sum(case((Slide.is_active == True, 1), else_=0)).label("active")
        per_slideshow = await self.db.execute(
            select(Slide.slideshow_id, Slideshow.name, total_col, active_col)
            .join(Slideshow, Slideshow.id == Slide.slideshow_id)
            .group_by(Slide.slideshow_id, Slideshow.name)
            .order_by(total_col.desc())
            .limit(10)
        )
        count_col = func.count(Slide.id).label("slide_count")
        per_animation = await self.db.execute(
            select(Slide.animation, count_col)
            .group_by(Slide.animation)
            .order_by(count_col.desc())
        )

        return SlideStats(
            total=total,
            active=active,
            inactive=total - active,
            slideshow_breakdown=[
                {
                    "slideshow_id": row.slideshow_id,
                    "name": row.name,
                    "total_slides": row.total,
                    "active_slides": row.active or 0,
                    "inactive_slides": row.total - (row.active or 0),
                }
                for row in per_slideshow
            ],
            animation_breakdown=[
                {"animation": row.animation, "count": row.slide_count} for row in per_animation
            ],
        )

    async def bulk_action(self, action: BulkAction) -> tuple[int, str]:
        """Apply one action to many slides. Unknown ids are skipped."""
        result = await self.db.execute(
            select(Slide)
            .where(Slide.id.in_(action.slide_ids))
            .order_by(Slide.slideshow_id, Slide.order)
        )
        slides = list(result.scalars().all())

        if isinstance(action, BulkDuplicate):
            for slide in slides:
                await self.duplicate(slide.id)
            return len(slides), f"{len(slides)} slides duplicated"

        if isinstance(action, BulkMoveToSlideshow):
            return await self._bulk_move(action.slide_ids, action.slideshow_id)

        if isinstance(action, (BulkActivate, BulkDeactivate)):
            field, value = "is_active", isinstance(action, BulkActivate)
            message = "activated" if value else "deactivated"
        elif isinstance(action, BulkUpdateAnimation):
            field, value = "animation", action.animation
            message = f"updated with {action.animation.value} animation"
        elif isinstance(action, BulkUpdateDuration):
            field, value = "duration", action.duration
            message = f"updated with {action.duration}ms duration"
        else:
            raise ValidationError("Invalid action")

        now = utcnow()
        for slide in slides:
            setattr(slide, field, value)
            slide.updated_at = now
        await self.db.flush()

        return len(slides), f"{len(slides)} slides {message}"

    async def _bulk_move(self, slide_ids: list[UUID], slideshow_id: UUID) -> tuple[int, str]:
        async def _move() -> tuple[int, str]:
            target = await self.db.get(Slideshow, slideshow_id)
            if target is None:
                raise NotFound("Target slideshow not found")

            result = await self.db.execute(
                select(Slide.slideshow_id).where(Slide.id.in_(slide_ids)).distinct()
            )
            await self.repository.lock_scope(slideshow_id, *result.scalars().all())

            # Re-read under the locks; sources are taken from the stored rows
            result = await self.db.execute(
                select(Slide)
                .where(Slide.id.in_(slide_ids), Slide.slideshow_id != slideshow_id)
                .order_by(Slide.slideshow_id, Slide.order)
                .execution_options(populate_existing=True)
            )
            moving = list(result.scalars().all())

            await self._check_capacity(slideshow_id, incoming=len(moving))
            for slide in moving:
                await self.ordering.move_to_parent(slide.id, slide.slideshow_id, slideshow_id)
            return len(moving), target.name

        moved, name = await self.repository.run_in_transaction(_move)
        return moved, f"{moved} slides moved to {name}"

    async def bulk_delete(self, slide_ids: list[UUID]) -> int:
        """Delete many slides, closing the gaps in every affected slideshow."""
        result = await self.db.execute(select(Slide.id).where(Slide.id.in_(slide_ids)))
        found = list(result.scalars().all())

        async def _delete_all() -> None:
            for slide_id in found:
                await self.delete(slide_id)

        await self.repository.run_in_transaction(_delete_all)
        return len(found)

    async def _count(self, query) -> int:
        result = await self.db.execute(select(func.count()).select_from(query.subquery()))
        return result.scalar_one()
