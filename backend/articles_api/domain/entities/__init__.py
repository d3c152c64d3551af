from .article import ARTICLE_FIELDS, Article, is_blank, project_article_fields
from .user import User

__all__ = [
    "ARTICLE_FIELDS",
    "Article",
    "User",
    "is_blank",
    "project_article_fields",
]
