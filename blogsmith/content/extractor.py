"""Parse marker-formatted generator output into a title and a body."""

from __future__ import annotations

import re

from .models import ExtractedText

_TITLE_MARKER = re.compile(r"blog-title:(.*)", re.IGNORECASE)
_BODY_MARKER = re.compile(r"blog-body:(.*)", re.IGNORECASE | re.DOTALL)
_HEADING_PREFIX = "# "


def extract(raw: str) -> ExtractedText:
    """Split ``raw`` on the ``blog-title:`` / ``blog-body:`` markers.

    Missing markers are not an error: without a body marker the whole input is
    the body, and without a title marker the title is ``None`` so the caller
    can fall back to :func:`first_heading`.
    """
    text = raw or ""

    title: str | None = None
    title_match = _TITLE_MARKER.search(text)
    if title_match:
        title = title_match.group(1).strip()

    body_match = _BODY_MARKER.search(text)
    body = body_match.group(1).strip() if body_match else text

    return ExtractedText(title=title, body=body)


def first_heading(text: str) -> str | None:
    """Return the first level-1 heading in ``text`` without its ``#`` marker."""
    for line in (text or "").splitlines():
        stripped = line.strip()
        if stripped.startswith(_HEADING_PREFIX):
            heading = stripped[len(_HEADING_PREFIX):].strip()
            if heading:
                return heading
    return None


__all__ = ["extract", "first_heading"]
