"""Port for user persistence."""

from abc import ABC, abstractmethod

from articles_api.domain.entities import User


class UserRepository(ABC):
    """Users only take part in database resets; no API exposes them."""

    @abstractmethod
    async def create(self, user: User) -> User:
        ...

    @abstractmethod
    async def get_all(self) -> list[User]:
        ...

    @abstractmethod
    async def clear_all(self) -> None:
        """Remove every user."""
        ...
