"""Integration fixtures — the app wired to a throwaway in-memory SQLite database.

Tables are created fresh for every test and both the ``articles`` and
``users`` tables are cleared afterwards through the repositories'
``clear_all`` hooks.
"""

from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from articles_api.domain.entities import Article
from articles_api.infrastructure.database import Base, get_db_session
from articles_api.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyUserRepository,
)
from articles_api.main import create_app

SessionFactory = async_sessionmaker[AsyncSession]


@pytest_asyncio.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine: AsyncEngine) -> AsyncIterator[SessionFactory]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    yield factory

    async with factory() as session:
        await SQLAlchemyArticleRepository(session).clear_all()
        await SQLAlchemyUserRepository(session).clear_all()
        await session.commit()


@pytest.fixture
def app(session_factory: SessionFactory) -> FastAPI:
    app = create_app()

    async def _test_db_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _test_db_session
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def store_article(session_factory: SessionFactory) -> Callable[[str, str], Awaitable[Article]]:
    """Save an article straight through the repository, bypassing HTTP."""

    async def _store(title: str, content: str) -> Article:
        async with session_factory() as session:
            article = await SQLAlchemyArticleRepository(session).create(
                Article(title=title, content=content)
            )
            await session.commit()
        return article

    return _store


@pytest.fixture
def load_articles(session_factory: SessionFactory) -> Callable[[], Awaitable[list[Article]]]:
    async def _load() -> list[Article]:
        async with session_factory() as session:
            return await SQLAlchemyArticleRepository(session).get_all()

    return _load
