"""Service for slideshow operations."""

import logging
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from society_cms.exceptions import ConflictError, NotFound, ValidationError
from society_cms.models import Slide, Slideshow
from society_cms.models.base import utcnow
from society_cms.schemas.slideshow import SlideshowAction, SlideshowCreate, SlideshowUpdate
from society_cms.services.settings_service import SettingsService

logger = logging.getLogger(__name__)


class SlideshowService:
    """Service for slideshow CRUD operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get(self, slideshow_id: UUID) -> Slideshow:
        slideshow = await self.db.get(Slideshow, slideshow_id)
        if slideshow is None:
            raise NotFound("Slideshow not found")
        return slideshow

    async def _clean_name(self, name: str | None, exclude_id: UUID | None = None) -> str:
        """Trim the name and make sure no other slideshow uses it."""
        if not name or not name.strip():
            raise ValidationError("Slideshow name is required")
        name = name.strip()

        query = select(Slideshow.id).where(Slideshow.name == name)
        if exclude_id is not None:
            query = query.where(Slideshow.id != exclude_id)
        result = await self.db.execute(query)
        if result.first() is not None:
            logger.warning(f"Slideshow name already taken: {name}")
            raise ConflictError("A slideshow with this name already exists")

        return name

    @staticmethod
    def _check_pages(pages: list[str] | None) -> list[str]:
        pages = [page.strip() for page in pages or [] if page and page.strip()]
        if not pages:
            raise ValidationError("At least one page must be specified")
        return pages

    async def create(self, data: SlideshowCreate, author_id: UUID | None) -> Slideshow:
        """Create a slideshow; unset display options come from the slideshow settings."""
        name = await self._clean_name(data.name)
        pages = self._check_pages(data.pages)
        defaults = await SettingsService(self.db).get()

        slideshow = Slideshow(
            name=name,
            description=(data.description or "").strip(),
            pages=pages,
            is_active=data.is_active,
            auto_play=data.auto_play if data.auto_play is not None else defaults.default_auto_play,
            interval=data.interval if data.interval is not None else defaults.default_interval,
            show_controls=(
                data.show_controls
                if data.show_controls is not None
                else defaults.default_show_controls
            ),
            show_indicators=(
                data.show_indicators
                if data.show_indicators is not None
                else defaults.default_show_indicators
            ),
            author_id=author_id,
            views=0,
        )
        self.db.add(slideshow)
        await self.db.flush()

        logger.info(f"Created slideshow {slideshow.id} ({slideshow.name})")
        return slideshow

    async def get(
        self, slideshow_id: UUID, include_slides: bool = True, count_view: bool = False
    ) -> tuple[Slideshow, list[Slide]]:
        """Get a slideshow and its slides in display order."""
        slideshow = await self._get(slideshow_id)

        slides: list[Slide] = []
        if include_slides:
            result = await self.db.execute(
                select(Slide)
                .where(Slide.slideshow_id == slideshow_id)
                .order_by(Slide.order)
            )
            slides = list(result.scalars().all())

        if count_view:
            slideshow.views += 1
            await self.db.flush()

        return slideshow, slides

    async def list_slideshows(
        self,
        page: int = 1,
        limit: int = 10,
        page_filter: str | None = None,
        is_active: bool | None = None,
        search: str | None = None,
    ) -> tuple[list[tuple[Slideshow, int]], int]:
        """List slideshows, newest first, each with its active slide count."""
        query = select(Slideshow)
        if is_active is not None:
            query = query.where(Slideshow.is_active == is_active)
        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(Slideshow.name.ilike(pattern), Slideshow.description.ilike(pattern))
            )

        result = await self.db.execute(query.order_by(Slideshow.created_at.desc()))
        slideshows = list(result.scalars().all())

        # Pages live in a JSON list, filtered here to stay portable across backends
        if page_filter and page_filter != "all":
            slideshows = [s for s in slideshows if page_filter in s.pages]

        total = len(slideshows)
        slideshows = slideshows[(page - 1) * limit : page * limit]

        counts: dict[UUID, int] = {}
        if slideshows:
            result = await self.db.execute(
                select(Slide.slideshow_id, func.count(Slide.id))
                .where(
                    Slide.slideshow_id.in_([s.id for s in slideshows]),
                    Slide.is_active == True,
                )
                .group_by(Slide.slideshow_id)
            )
            counts = {slideshow_id: count for slideshow_id, count in result.all()}

        return [(s, counts.get(s.id, 0)) for s in slideshows], total

    async def update(self, slideshow_id: UUID, data: SlideshowUpdate) -> Slideshow:
        """Update a slideshow."""
        slideshow = await self._get(slideshow_id)
        update_data = data.model_dump(exclude_unset=True)

        if "name" in update_data:
            update_data["name"] = await self._clean_name(data.name, exclude_id=slideshow_id)
        if "pages" in update_data:
            update_data["pages"] = self._check_pages(data.pages)
        if "description" in update_data:
            update_data["description"] = (data.description or "").strip()

        for field, value in update_data.items():
            if value is None:
                continue
            setattr(slideshow, field, value)

        slideshow.updated_at = utcnow()
        await self.db.flush()
        return slideshow

    async def delete(self, slideshow_id: UUID) -> None:
        """Delete a slideshow together with all of its slides."""
        slideshow = await self._get(slideshow_id)

        await self.db.execute(delete(Slide).where(Slide.slideshow_id == slideshow_id))
        await self.db.delete(slideshow)
        await self.db.flush()

        logger.info(f"Deleted slideshow {slideshow_id} and its slides")

    async def apply_action(self, slideshow_id: UUID, action: SlideshowAction) -> Slideshow:
        """Quick actions from the slideshow list."""
        slideshow = await self._get(slideshow_id)

        if action == SlideshowAction.TOGGLE_ACTIVE:
            slideshow.is_active = not slideshow.is_active
        elif action == SlideshowAction.TOGGLE_AUTOPLAY:
            slideshow.auto_play = not slideshow.auto_play
        elif action == SlideshowAction.INCREMENT_VIEWS:
            slideshow.views += 1
        else:
            raise ValidationError(f"Invalid action: {action}")

        slideshow.updated_at = utcnow()
        await self.db.flush()
        return slideshow
