"""
Society CMS - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator

import pytest
from faker import Faker
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set testing environment before the app reads its settings
os.environ['APP_ENV'] = 'development'
os.environ['DATABASE_URL_OVERRIDE'] = 'sqlite+aiosqlite://'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'

from society_cms.db import create_engine, get_db
from society_cms.main import app
from society_cms.models import Base, Slide, Slideshow, User, UserRole
from society_cms.services.auth import auth_service

fake = Faker()


@pytest.fixture(scope='function')
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh in-memory database and session for each test"""
    test_engine = create_engine('sqlite+aiosqlite://', poolclass=StaticPool)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session
        await session.rollback()

    await test_engine.dispose()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


async def _create_user(db_session: AsyncSession, role: UserRole, password: str) -> User:
    user = User(
        email=fake.unique.email(),
        name=fake.name(),
        hashed_password=auth_service.hash_password(password),
        role=role,
        is_active=True,
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> User:
    """Create an admin test user"""
    return await _create_user(db_session, UserRole.ADMIN, 'adminpassword123')


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a non-admin test user"""
    return await _create_user(db_session, UserRole.USER, 'testpassword123')


@pytest.fixture
def admin_client(client: AsyncClient, admin_user: User) -> AsyncClient:
    """Client carrying an admin access-token cookie"""
    client.cookies.set('access_token', auth_service.create_access_token(admin_user.id, admin_user.email))
    return client


@pytest.fixture
def user_client(client: AsyncClient, test_user: User) -> AsyncClient:
    """Client carrying a non-admin access-token cookie"""
    client.cookies.set('access_token', auth_service.create_access_token(test_user.id, test_user.email))
    return client


@pytest.fixture
def make_slideshow(db_session: AsyncSession):
    """Factory for slideshows stored directly in the database"""
    async def _make(name: str | None = None, pages: list[str] | None = None, **kwargs) -> Slideshow:
        slideshow = Slideshow(
            name=name or fake.unique.catch_phrase(),
            pages=pages or ['home'],
            **kwargs,
        )
        db_session.add(slideshow)
        await db_session.flush()
        return slideshow

    return _make


@pytest.fixture
def make_slides(db_session: AsyncSession):
    """Factory for ``count`` slides titled ``<prefix>1..N`` at orders 1..N"""
    async def _make(slideshow: Slideshow, count: int, prefix: str = 'S') -> list[Slide]:
        slides = []
        for order in range(1, count + 1):
            slide = Slide(slideshow_id=slideshow.id, order=order, title_en=f'{prefix}{order}')
            db_session.add(slide)
            slides.append(slide)
        await db_session.flush()
        return slides

    return _make


@pytest.fixture
def scope_titles(db_session: AsyncSession):
    """Titles of a slideshow's slides, read back from the database in order"""
    async def _titles(slideshow_id) -> list[str]:
        result = await db_session.execute(
            select(Slide.title_en).where(Slide.slideshow_id == slideshow_id).order_by(Slide.order)
        )
        return list(result.scalars().all())

    return _titles


@pytest.fixture
def scope_orders(db_session: AsyncSession):
    """Order values of a slideshow's slides, sorted"""
    async def _orders(slideshow_id) -> list[int]:
        result = await db_session.execute(
            select(Slide.order).where(Slide.slideshow_id == slideshow_id).order_by(Slide.order)
        )
        return list(result.scalars().all())

    return _orders
