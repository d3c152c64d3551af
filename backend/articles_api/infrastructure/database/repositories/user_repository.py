"""Concrete user repository backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.application.interfaces import UserRepository
from articles_api.domain.entities import User
from articles_api.infrastructure.database.maintenance import truncate_tables
from articles_api.infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def create(self, user: User) -> User:
        model = UserModel(
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def get_all(self) -> list[User]:
        result = await self._session.execute(select(UserModel).order_by(UserModel.id.asc()))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def clear_all(self) -> None:
        await truncate_tables(self._session, UserModel)
