"""Generation request -> canonical article."""

from __future__ import annotations

from typing import Protocol

from ..ai import GenerationRequest, build_prompt
from ..content import Article, ArticleNormalizer
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)


class Completer(Protocol):
    prompt_template: str

    def complete(self, prompt: str) -> str: ...


class ArticleService:
    """Runs one AI completion per request and normalizes the result."""

    def __init__(self, generator: Completer, normalizer: ArticleNormalizer | None = None) -> None:
        self._generator = generator
        self._normalizer = normalizer or ArticleNormalizer()

    def generate(self, request: GenerationRequest) -> Article:
        prompt = build_prompt(request, self._generator.prompt_template)
        raw = self._generator.complete(prompt)
        article = self._normalizer.normalize(raw, request.topic)
        LOGGER.info(
            "Generated article",
            extra={
                "event": "generation.complete",
                "topic": request.topic,
                "title": article.title,
                "tags": list(article.tags),
            },
        )
        return article
