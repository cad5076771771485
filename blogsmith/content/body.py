"""Body cleanup applied before an article is shown or published."""

from __future__ import annotations


def clean_body(text: str) -> str:
    """Drop the leading ``# `` heading line (it repeats the title) and trim.

    Blank lines before the heading are skipped. At most one line is removed
    per call.
    """
    lines = (text or "").split("\n")
    first = next((index for index, line in enumerate(lines) if line.strip()), None)
    if first is not None and lines[first].strip().startswith("# "):
        del lines[first]
    return "\n".join(lines).strip()


__all__ = ["clean_body"]
