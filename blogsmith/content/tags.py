"""Tag derivation from a free-text topic."""

from __future__ import annotations

import re
from typing import Sequence

BASE_TAGS: tuple[str, ...] = ("ai", "blogging")
MAX_TAGS = 4
MIN_WORD_LENGTH = 4

_PUNCTUATION = re.compile(r"[^\w\s]")


def derive_tags(
    topic: str | None,
    *,
    base_tags: Sequence[str] = BASE_TAGS,
    limit: int = MAX_TAGS,
) -> tuple[str, ...]:
    """Return base tags followed by the distinct long words of ``topic``.

    Words shorter than ``MIN_WORD_LENGTH`` are dropped, duplicates are removed
    case-insensitively in first-seen order and the result is capped at ``limit``.
    """
    tags: list[str] = []
    seen: set[str] = set()

    def _add(tag: str) -> None:
        key = tag.lower()
        if key not in seen:
            seen.add(key)
            tags.append(tag)

    for tag in base_tags:
        _add(tag)

    words = _PUNCTUATION.sub("", (topic or "").lower()).split()
    for word in words:
        if len(word) >= MIN_WORD_LENGTH:
            _add(word)

    return tuple(tags[:limit])


__all__ = ["BASE_TAGS", "MAX_TAGS", "derive_tags"]
