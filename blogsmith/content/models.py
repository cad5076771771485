"""Value objects shared by the normalization and publishing layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .tags import derive_tags

PLACEHOLDER_TITLE = "Untitled Blog"


@dataclass(slots=True, frozen=True)
class ExtractedText:
    """Title/body pair parsed out of a raw generation."""

    title: str | None
    body: str


@dataclass(slots=True, frozen=True)
class Article:
    """Canonical, publishable article.

    Instances are produced by :class:`~blogsmith.content.normalizer.ArticleNormalizer`
    and are read-only for every downstream consumer; ``tags`` is a tuple so
    adapters cannot append to it in place.
    """

    title: str
    body: str
    topic: str = ""
    tags: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the generation response shape (``blog`` holds the body)."""
        return {
            "title": self.title,
            "blog": self.body,
            "topic": self.topic,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Article":
        """Rebuild an article from a saved payload.

        The generation shape (``blog``) was normalized when it was produced, so
        title and body are taken as stored and only the tags are derived again
        from the topic. The publish request shape (``content``) is raw and goes
        through full normalization.
        """
        topic = str(data.get("topic") or "")
        if "blog" in data:
            title = str(data.get("title") or "").strip()
            return cls(
                title=title or PLACEHOLDER_TITLE,
                body=str(data.get("blog") or ""),
                topic=topic,
                tags=derive_tags(topic),
            )

        from .normalizer import normalize_parts

        return normalize_parts(data.get("title"), str(data.get("content") or ""), topic)


__all__ = ["Article", "ExtractedText", "PLACEHOLDER_TITLE"]
