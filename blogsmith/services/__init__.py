"""Service layer: article generation and multi-destination publishing."""

from .article_service import ArticleService
from .dispatcher import PublishDispatcher

__all__ = ["ArticleService", "PublishDispatcher"]
