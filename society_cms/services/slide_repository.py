"""Repository for slide persistence used by the ordering logic."""

import logging
import uuid
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from society_cms.exceptions import NotFound, StorageError
from society_cms.models import Slide, Slideshow
from society_cms.models.base import utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SlideRepository:
    """Scope-oriented access to slides.

    A scope is the set of slides that share one ``slideshow_id``.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def run_in_transaction(self, fn: Callable[[], Awaitable[T]]) -> T:
        """Run ``fn`` inside a savepoint so its writes land together or not at all."""
        try:
            async with self.db.begin_nested():
                return await fn()
        except SQLAlchemyError as e:
            logger.error(f"Slide transaction failed: {e}", exc_info=True)
            raise StorageError("Failed to update slides") from e

    async def lock_scope(self, *slideshow_ids: uuid.UUID) -> None:
        """Lock the parent slideshow rows so reorders of a scope serialize.

        Rows are locked in a stable order to keep two-scope moves deadlock free.
        """
        for slideshow_id in sorted(set(slideshow_ids), key=str):
            result = await self.db.execute(
                select(Slideshow.id)
                .where(Slideshow.id == slideshow_id)
                .with_for_update()
            )
            if result.scalar_one_or_none() is None:
                raise NotFound("Slideshow not found")

    async def count_in_scope(self, slideshow_id: uuid.UUID) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Slide)
            .where(Slide.slideshow_id == slideshow_id)
        )
        return result.scalar_one()

    async def list_in_scope(self, slideshow_id: uuid.UUID) -> list[Slide]:
        """Slides of a scope in order, as currently stored.

        Rows already in the session are overwritten with the database values so
        that callers holding the scope lock never shift from stale orders.
        """
        result = await self.db.execute(
            select(Slide)
            .where(Slide.slideshow_id == slideshow_id)
            .order_by(Slide.order)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_parent_id(self, slide_id: uuid.UUID) -> uuid.UUID:
        """Read a slide's slideshow straight from the database."""
        result = await self.db.execute(select(Slide.slideshow_id).where(Slide.id == slide_id))
        slideshow_id = result.scalar_one_or_none()
        if slideshow_id is None:
            raise NotFound("Slide not found")
        return slideshow_id

    async def get_by_id(self, slide_id: uuid.UUID, refresh: bool = False) -> Slide:
        slide = await self.db.get(Slide, slide_id, populate_existing=refresh)
        if slide is None:
            raise NotFound("Slide not found")
        return slide

    async def save_order(self, slide_id: uuid.UUID, order: int) -> None:
        await self.save_order_batch({slide_id: order})

    async def save_order_batch(self, orders: dict[uuid.UUID, int]) -> None:
        """Write several order values in one flush."""
        if not orders:
            return

        now = utcnow()
        for slide_id, order in orders.items():
            slide = await self.get_by_id(slide_id)
            slide.order = order
            slide.updated_at = now

        await self.db.flush()

    async def save_parent(self, slide_id: uuid.UUID, slideshow_id: uuid.UUID, order: int) -> None:
        """Move a slide to another scope, writing parent and order together."""
        slide = await self.get_by_id(slide_id)
        slide.slideshow_id = slideshow_id
        slide.order = order
        slide.updated_at = utcnow()
        await self.db.flush()

    async def insert_record(self, slide: Slide) -> uuid.UUID:
        self.db.add(slide)
        await self.db.flush()
        return slide.id

    async def delete_record(self, slide_id: uuid.UUID) -> None:
        slide = await self.get_by_id(slide_id)
        await self.db.delete(slide)
        await self.db.flush()
