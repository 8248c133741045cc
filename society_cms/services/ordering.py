"""Ordering operations for slides within a slideshow.

Every slideshow keeps its slides at orders ``1..N`` with no gaps and no
duplicates. The operations below are the only writers of ``Slide.order`` and
``Slide.slideshow_id``; each runs in its own transaction with the affected
slideshow rows locked.
"""

import enum
import logging
import uuid

from society_cms.exceptions import NotFound
from society_cms.models import Slide
from society_cms.services.slide_repository import SlideRepository

logger = logging.getLogger(__name__)


class Direction(str, enum.Enum):
    """Direction for swapping a slide with its neighbour."""

    UP = "up"
    DOWN = "down"


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _find(items: list[Slide], slide_id: uuid.UUID) -> Slide:
    for item in items:
        if item.id == slide_id:
            return item
    raise NotFound("Slide not found in slideshow")


class OrderedCollectionManager:
    """Keeps slide orders dense and unique per slideshow."""

    def __init__(self, repository: SlideRepository):
        self.repository = repository

    async def next_order(self, slideshow_id: uuid.UUID) -> int:
        """Order for a slide appended at the end of the slideshow."""
        return await self.repository.count_in_scope(slideshow_id) + 1

    async def insert_at(self, slideshow_id: uuid.UUID, requested_order: int) -> int:
        """Open a slot at ``requested_order`` and return the (clamped) slot.

        Slides at or after the slot move one position later. The caller is
        expected to store the new slide at the returned order within the same
        transaction.
        """

        async def _insert() -> int:
            await self.repository.lock_scope(slideshow_id)
            items = await self.repository.list_in_scope(slideshow_id)
            position = clamp(requested_order, 1, len(items) + 1)

            shifted = {item.id: item.order + 1 for item in items if item.order >= position}
            await self.repository.save_order_batch(shifted)

            logger.debug(f"Opened order {position} in slideshow {slideshow_id}")
            return position

        return await self.repository.run_in_transaction(_insert)

    async def close_gap(self, slideshow_id: uuid.UUID, removed_order: int) -> None:
        """Pull every slide after ``removed_order`` one position earlier."""

        async def _close() -> None:
            await self.repository.lock_scope(slideshow_id)
            items = await self.repository.list_in_scope(slideshow_id)

            shifted = {item.id: item.order - 1 for item in items if item.order > removed_order}
            await self.repository.save_order_batch(shifted)

            logger.debug(f"Closed gap at order {removed_order} in slideshow {slideshow_id}")

        await self.repository.run_in_transaction(_close)

    async def swap_adjacent(
        self, slideshow_id: uuid.UUID, slide_id: uuid.UUID, direction: Direction
    ) -> bool:
        """Swap a slide with its neighbour.

        Returns False, leaving the slideshow untouched, when the slide is
        already first (up) or last (down).
        """

        async def _swap() -> bool:
            await self.repository.lock_scope(slideshow_id)
            items = await self.repository.list_in_scope(slideshow_id)
            slide = _find(items, slide_id)

            neighbour_order = slide.order - 1 if direction == Direction.UP else slide.order + 1
            if neighbour_order < 1 or neighbour_order > len(items):
                return False

            neighbour = next(item for item in items if item.order == neighbour_order)
            await self.repository.save_order_batch(
                {slide.id: neighbour.order, neighbour.id: slide.order}
            )

            logger.debug(f"Swapped slide {slide_id} {direction.value} in slideshow {slideshow_id}")
            return True

        return await self.repository.run_in_transaction(_swap)

    async def move_to(
        self, slideshow_id: uuid.UUID, slide_id: uuid.UUID, target_order: int
    ) -> int:
        """Move a slide to ``target_order`` (clamped), shifting the slides in between.

        Returns the slide's final order. Moving to the current order changes
        nothing.
        """

        async def _move() -> int:
            await self.repository.lock_scope(slideshow_id)
            items = await self.repository.list_in_scope(slideshow_id)
            slide = _find(items, slide_id)

            current = slide.order
            target = clamp(target_order, 1, len(items))
            if target == current:
                return current

            if target > current:
                # Slides in (current, target] move one earlier
                orders = {
                    item.id: item.order - 1
                    for item in items
                    if item.id != slide.id and current < item.order <= target
                }
            else:
                # Slides in [target, current) move one later
                orders = {
                    item.id: item.order + 1
                    for item in items
                    if item.id != slide.id and target <= item.order < current
                }
            orders[slide.id] = target
            await self.repository.save_order_batch(orders)

            logger.debug(
                f"Moved slide {slide_id} from {current} to {target} in slideshow {slideshow_id}"
            )
            return target

        return await self.repository.run_in_transaction(_move)

    async def move_to_parent(
        self,
        slide_id: uuid.UUID,
        from_slideshow_id: uuid.UUID,
        to_slideshow_id: uuid.UUID,
        target_order: int | None = None,
    ) -> int:
        """Move a slide into another slideshow and return its new order.

        The gap left in the source is closed; the slide is appended to the
        destination unless ``target_order`` is given.
        """
        if from_slideshow_id == to_slideshow_id:
            if target_order is not None:
                return await self.move_to(from_slideshow_id, slide_id, target_order)

            await self.repository.lock_scope(from_slideshow_id)
            slide = await self.repository.get_by_id(slide_id, refresh=True)
            if slide.slideshow_id != from_slideshow_id:
                raise NotFound("Slide not found in slideshow")
            return slide.order

        async def _reparent() -> int:
            await self.repository.lock_scope(from_slideshow_id, to_slideshow_id)
            slide = await self.repository.get_by_id(slide_id, refresh=True)
            if slide.slideshow_id != from_slideshow_id:
                raise NotFound("Slide not found in slideshow")

            # The moving slide keeps its old order until it is written below, and
            # close_gap only touches orders after it.
            await self.close_gap(from_slideshow_id, slide.order)

            if target_order is None:
                position = await self.next_order(to_slideshow_id)
            else:
                position = await self.insert_at(to_slideshow_id, target_order)

            await self.repository.save_parent(slide_id, to_slideshow_id, position)

            logger.info(
                f"Moved slide {slide_id} from slideshow {from_slideshow_id} "
                f"to {to_slideshow_id} at order {position}"
            )
            return position

        return await self.repository.run_in_transaction(_reparent)
