"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from articles_api.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article in creation order."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return the stored record with its generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Write the article's fields over the stored record and return it."""
        ...

    @abstractmethod
    async def clear_all(self) -> None:
        """Remove every article. Administrative use only (test setup, resets)."""
        ...
