"""Content normalization: extraction, tagging and body cleanup."""

from .body import clean_body
from .extractor import extract, first_heading
from .models import PLACEHOLDER_TITLE, Article, ExtractedText
from .normalizer import ArticleNormalizer, normalize_generation, normalize_parts
from .tags import BASE_TAGS, MAX_TAGS, derive_tags

__all__ = [
    "Article",
    "ArticleNormalizer",
    "BASE_TAGS",
    "ExtractedText",
    "MAX_TAGS",
    "PLACEHOLDER_TITLE",
    "clean_body",
    "derive_tags",
    "extract",
    "first_heading",
    "normalize_generation",
    "normalize_parts",
]
