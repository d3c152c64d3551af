"""Tests for the SQLAlchemy repositories and the table reset helpers."""

import pytest
from sqlalchemy.exc import IntegrityError

from articles_api.domain.entities import Article, User
from articles_api.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyUserRepository,
)


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamps(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        created = await repo.create(Article(title="Hello", content="World"))
        await session.commit()

    assert created.id is not None
    assert created.created_at is not None
    assert created.updated_at is not None


@pytest.mark.asyncio
async def test_get_all_returns_insertion_order(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        for title in ("first", "second", "third"):
            await repo.create(Article(title=title, content="..."))
        await session.commit()

        articles = await repo.get_all()

    assert [a.title for a in articles] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(session_factory):
    async with session_factory() as session:
        assert await SQLAlchemyArticleRepository(session).get_by_id(76142896) is None


@pytest.mark.asyncio
async def test_update_writes_fields(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        created = await repo.create(Article(title="Old", content="Body"))
        await session.commit()

    created.update(title="New")
    async with session_factory() as session:
        await SQLAlchemyArticleRepository(session).update(created)
        await session.commit()

    async with session_factory() as session:
        stored = await SQLAlchemyArticleRepository(session).get_by_id(created.id)

    assert stored is not None
    assert stored.title == "New"
    assert stored.content == "Body"


@pytest.mark.asyncio
@pytest.mark.parametrize("title, content", [("  ", "Body"), ("Title", "")])
async def test_database_rejects_blank_text(session_factory, title, content):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        with pytest.raises(IntegrityError):
            await repo.create(Article(title=title, content=content))
        await session.rollback()

        assert await repo.get_all() == []


@pytest.mark.asyncio
async def test_clear_all_empties_articles_and_users(session_factory):
    async with session_factory() as session:
        articles = SQLAlchemyArticleRepository(session)
        users = SQLAlchemyUserRepository(session)
        await articles.create(Article(title="A", content="B"))
        await users.create(User(name="Ada", email="ada@example.com"))
        await session.commit()

        await articles.clear_all()
        await users.clear_all()
        await session.commit()

        assert await articles.get_all() == []
        assert await users.get_all() == []
