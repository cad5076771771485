"""AI generation helpers."""

from .generator import (
    DEFAULT_PROMPT,
    SEO_KEYWORDS,
    BlogGenerator,
    GenerationError,
    GenerationRequest,
    build_prompt,
)

__all__ = [
    "BlogGenerator",
    "DEFAULT_PROMPT",
    "GenerationError",
    "GenerationRequest",
    "SEO_KEYWORDS",
    "build_prompt",
]
