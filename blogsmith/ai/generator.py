"""Gemini-backed blog generation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from google import genai
from google.genai import types

from ..settings import GenerationSettings
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_PROMPT = """\
Write a {length} blog post about "{topic}".
- Tone: {tone}
- Include these keywords: {keywords}
- Use headers, bullet points, and a strong conclusion.
- Make it engaging and suitable for publication on developer blogging platforms.

Reply using exactly this format:
blog-title: <a single-line title>
blog-body: <the full post in Markdown>
"""

SEO_KEYWORDS = "SEO, search engine optimization, content marketing"


class GenerationError(RuntimeError):
    """Raised when the AI collaborator fails to return usable text."""


@dataclass(slots=True, frozen=True)
class GenerationRequest:
    topic: str
    tone: str = "informative"
    length: str = "medium-length"
    keywords: str = ""


def build_prompt(request: GenerationRequest, template: str = DEFAULT_PROMPT) -> str:
    """Embed the request fields into the marker-format instructions."""
    return template.format(
        topic=request.topic,
        tone=request.tone or "informative",
        length=request.length or "medium-length",
        keywords=request.keywords or "none",
    )


class BlogGenerator:
    """Thin wrapper around ``client.models.generate_content``."""

    def __init__(
        self,
        client: genai.Client,
        *,
        model: str,
        thinking_budget: int | None = None,
        prompt_template: str = DEFAULT_PROMPT,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._thinking_budget = thinking_budget
        self.prompt_template = prompt_template
        self._logger = logger or LOGGER

    @staticmethod
    def create_client(api_key: str | None = None, *, timeout: float | None = None) -> genai.Client:
        resolved_key = api_key or os.environ.get("GEMINI_API_KEY")
        if not resolved_key:
            raise GenerationError(
                "Gemini API key not found. Set GEMINI_API_KEY or pass --api-key."
            )
        if timeout:
            # HttpOptions.timeout is expressed in milliseconds.
            return genai.Client(
                api_key=resolved_key,
                http_options=types.HttpOptions(timeout=int(timeout * 1000)),
            )
        return genai.Client(api_key=resolved_key)

    @classmethod
    def from_settings(
        cls,
        settings: GenerationSettings,
        *,
        api_key: str | None = None,
    ) -> "BlogGenerator":
        template = DEFAULT_PROMPT
        if settings.prompt_path is not None:
            template = Path(settings.prompt_path).read_text(encoding="utf-8")
        client = cls.create_client(api_key, timeout=settings.timeout)
        LOGGER.info(
            "Initialized BlogGenerator model=%s prompt=%s",
            settings.model,
            settings.prompt_path or "<default>",
        )
        return cls(
            client,
            model=settings.model,
            thinking_budget=settings.thinking_budget,
            prompt_template=template,
        )

    def complete(self, prompt: str) -> str:
        """Send ``prompt`` once and return the raw text; no retries."""
        request_kwargs: dict[str, Any] = {
            "model": self._model,
            "contents": prompt,
        }
        if self._thinking_budget and self._thinking_budget > 0:
            request_kwargs["config"] = types.GenerateContentConfig(
                thinking_config=types.ThinkingConfig(thinking_budget=self._thinking_budget)
            )
            self._logger.debug("Thinking mode enabled budget=%s", self._thinking_budget)

        self._logger.info(
            "Requesting generation",
            extra={"event": "generation.request", "model": self._model, "chars": len(prompt)},
        )
        try:
            response = self._client.models.generate_content(**request_kwargs)
        except Exception as exc:
            raise GenerationError(f"Failed to generate blog post: {exc}") from exc

        text = response.text or ""
        if not text.strip():
            raise GenerationError("Failed to generate blog post: empty response")
        return text
