"""Tests for prompt construction, the Gemini wrapper and the article service."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from blogsmith.ai import (
    DEFAULT_PROMPT,
    BlogGenerator,
    GenerationError,
    GenerationRequest,
    build_prompt,
)
from blogsmith.services import ArticleService


class StubModels:
    def __init__(self, text: str | None = None, *, error: Exception | None = None) -> None:
        self._text = text
        self._error = error
        self.calls: list[dict[str, Any]] = []

    def generate_content(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return SimpleNamespace(text=self._text)


class StubClient:
    def __init__(self, models: StubModels) -> None:
        self.models = models


def _generator(models: StubModels, **kwargs: Any) -> BlogGenerator:
    return BlogGenerator(StubClient(models), model="gemini-test", **kwargs)  # type: ignore[arg-type]


def test_build_prompt_embeds_request_and_markers() -> None:
    prompt = build_prompt(
        GenerationRequest(topic="AI in Healthcare", tone="friendly", length="short", keywords="SEO")
    )

    assert 'blog post about "AI in Healthcare"' in prompt
    assert "Tone: friendly" in prompt
    assert "Include these keywords: SEO" in prompt
    assert "blog-title:" in prompt
    assert "blog-body:" in prompt


def test_build_prompt_custom_template() -> None:
    prompt = build_prompt(GenerationRequest(topic="Rust"), "{topic}|{tone}|{length}|{keywords}")

    assert prompt == "Rust|informative|medium-length|none"


def test_complete_returns_raw_text() -> None:
    models = StubModels("blog-title: X\nblog-body: Y")

    text = _generator(models).complete("prompt")

    assert text == "blog-title: X\nblog-body: Y"
    assert models.calls == [{"model": "gemini-test", "contents": "prompt"}]


def test_complete_with_thinking_budget_sets_config() -> None:
    models = StubModels("text")

    _generator(models, thinking_budget=256).complete("prompt")

    assert "config" in models.calls[0]


def test_complete_wraps_upstream_errors() -> None:
    models = StubModels(error=RuntimeError("quota exceeded"))

    with pytest.raises(GenerationError, match="quota exceeded"):
        _generator(models).complete("prompt")
    assert len(models.calls) == 1


def test_complete_rejects_empty_text() -> None:
    with pytest.raises(GenerationError):
        _generator(StubModels("   ")).complete("prompt")


def test_create_client_requires_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(GenerationError):
        BlogGenerator.create_client()


class StubCompleter:
    prompt_template = DEFAULT_PROMPT

    def __init__(self, raw: str) -> None:
        self._raw = raw
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self._raw


def test_service_generates_normalized_article() -> None:
    completer = StubCompleter("blog-title: Hello World\nblog-body: # Hello World\nSome **bold** text.")

    article = ArticleService(completer).generate(GenerationRequest(topic="AI in Healthcare"))

    assert article.title == "Hello World"
    assert article.body == "Some **bold** text."
    assert article.tags == ("ai", "blogging", "healthcare")
    assert len(completer.prompts) == 1
    assert "AI in Healthcare" in completer.prompts[0]


def test_service_propagates_generation_error() -> None:
    class FailingCompleter(StubCompleter):
        def complete(self, prompt: str) -> str:
            raise GenerationError("Failed to generate blog post: boom")

    with pytest.raises(GenerationError, match="boom"):
        ArticleService(FailingCompleter("")).generate(GenerationRequest(topic="x"))
