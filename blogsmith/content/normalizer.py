"""Compose extraction, title resolution, body cleanup and tagging."""

from __future__ import annotations

from typing import Sequence

from ..utils.logging import get_logger
from .body import clean_body
from .extractor import extract, first_heading
from .models import PLACEHOLDER_TITLE, Article
from .tags import BASE_TAGS, MAX_TAGS, derive_tags

LOGGER = get_logger(__name__)


class ArticleNormalizer:
    """Turn generator output into a canonical :class:`Article`."""

    version = 3

    def __init__(
        self,
        *,
        base_tags: Sequence[str] = BASE_TAGS,
        max_tags: int = MAX_TAGS,
        placeholder_title: str = PLACEHOLDER_TITLE,
    ) -> None:
        self._base_tags = tuple(base_tags)
        self._max_tags = max_tags
        self._placeholder_title = placeholder_title

    def normalize(self, raw: str, topic: str) -> Article:
        """Normalize raw marker-formatted (or marker-free) generator text."""
        extracted = extract(raw)
        return self.normalize_parts(extracted.title, extracted.body, topic)

    def normalize_parts(self, title: str | None, content: str, topic: str) -> Article:
        """Normalize an already split title/content pair."""
        resolved_title = self._resolve_title(title, content)
        body = clean_body(content)
        tags = derive_tags(topic, base_tags=self._base_tags, limit=self._max_tags)
        LOGGER.debug(
            "Normalized article",
            extra={
                "event": "article.normalized",
                "normalizer_version": self.version,
                "title": resolved_title,
                "tags": list(tags),
                "body_chars": len(body),
            },
        )
        return Article(title=resolved_title, body=body, topic=topic or "", tags=tags)

    def _resolve_title(self, title: str | None, content: str) -> str:
        if title and title.strip():
            return title.strip()
        heading = first_heading(content)
        if heading:
            return heading
        return self._placeholder_title


_DEFAULT = ArticleNormalizer()


def normalize_generation(raw: str, topic: str) -> Article:
    return _DEFAULT.normalize(raw, topic)


def normalize_parts(title: str | None, content: str, topic: str) -> Article:
    return _DEFAULT.normalize_parts(title, content, topic)


__all__ = ["ArticleNormalizer", "normalize_generation", "normalize_parts"]
