from .article import ArticleCreate, ArticleUpdate, ArticleResponse, ArticleWriteResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleWriteResponse",
]
