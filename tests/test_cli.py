"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from blogsmith.ai import GenerationError
from blogsmith.app import cli
from blogsmith.content import Article
from blogsmith.platforms import PublishFailure, PublishSuccess, default_factory
from blogsmith.services import PublishDispatcher


def _write_article(tmp_path: Path) -> Path:
    path = tmp_path / "post.json"
    path.write_text(
        json.dumps(
            {
                "title": "Hello <World>",
                "content": "# Hello\nSome **bold** text.\n\n- one\n- two",
                "topic": "AI in Healthcare",
            }
        ),
        encoding="utf-8",
    )
    return path


def _write_config(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text("[publishing]\nmax_workers = 1\n", encoding="utf-8")
    return path


def test_preview_renders_html(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    article_path = _write_article(tmp_path)

    code = cli.main(["--log-plain", "preview", str(article_path)])

    out = capsys.readouterr().out
    assert code == 0
    assert "<h1>Hello &lt;World&gt;</h1>" in out
    assert "<strong>bold</strong>" in out
    assert "<li>one</li>" in out
    assert "<h1>Hello</h1>" not in out


def test_destinations_lists_credential_status(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DEVTO_API_KEY", "secret-value")
    monkeypatch.delenv("HASHNODE_API_KEY", raising=False)
    monkeypatch.delenv("HASHNODE_PUBLICATION_ID", raising=False)

    code = cli.main(["--log-plain", "--config", str(_write_config(tmp_path)), "destinations"])

    out = capsys.readouterr().out
    summary = json.loads(out)
    assert code == 0
    assert summary["devto"]["configured"] is True
    assert summary["hashnode"]["configured"] is False
    assert "secret-value" not in out


class StubDispatcher:
    def __init__(self, config: Any) -> None:
        self.config = config

    def publish(self, article: Article, names: list[str]) -> dict[str, Any]:
        StubDispatcher.article = article
        return {
            "devto": PublishSuccess("devto", url="https://dev.to/me/hello"),
            "hashnode": PublishFailure("hashnode", "unauthorized"),
        }


def test_publish_reports_each_destination(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(cli, "PublishDispatcher", StubDispatcher)
    article_path = _write_article(tmp_path)

    code = cli.main(
        [
            "--log-plain",
            "--config",
            str(_write_config(tmp_path)),
            "publish",
            str(article_path),
            "--to",
            "devto",
            "hashnode",
        ]
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["devto"] == {"success": True, "url": "https://dev.to/me/hello"}
    assert payload["hashnode"] == {"success": False, "error": "unauthorized"}
    assert StubDispatcher.article.body == "Some **bold** text.\n\n- one\n- two"
    assert StubDispatcher.article.tags == ("ai", "blogging", "healthcare")


class StubGenerator:
    prompt_template = "{topic}|{keywords}"

    def complete(self, prompt: str) -> str:
        return f"blog-title: Generated\nblog-body: # Generated\nprompt was {prompt}"


def test_generate_writes_article(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(cli.BlogGenerator, "from_settings", classmethod(lambda cls, *a, **k: StubGenerator()))
    output = tmp_path / "out" / "post.json"

    code = cli.main(
        [
            "--log-plain",
            "--config",
            str(_write_config(tmp_path)),
            "generate",
            "--topic",
            "Edge computing",
            "--seo",
            "--output",
            str(output),
        ]
    )

    printed = json.loads(capsys.readouterr().out)
    saved = json.loads(output.read_text(encoding="utf-8"))
    assert code == 0
    assert printed == saved
    assert saved["title"] == "Generated"
    assert saved["blog"] == "prompt was Edge computing|SEO, search engine optimization, content marketing"
    assert saved["tags"] == ["ai", "blogging", "edge", "computing"]


def test_generate_failure_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    def _fail(cls: Any, *args: Any, **kwargs: Any) -> Any:
        raise GenerationError("Gemini API key not found.")

    monkeypatch.setattr(cli.BlogGenerator, "from_settings", classmethod(_fail))

    code = cli.main(
        ["--log-plain", "--config", str(_write_config(tmp_path)), "generate", "--topic", "x"]
    )

    assert code == 1
    assert json.loads(capsys.readouterr().out) == {"error": "Gemini API key not found."}


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--log-plain"]) == 1


class StubResponse:
    status_code = 201
    ok = True

    def __init__(self, payload: dict[str, Any]) -> None:
        self._payload = payload
        self.text = json.dumps(payload)

    def json(self) -> dict[str, Any]:
        return self._payload


class StubSession:
    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> StubResponse:
        self.calls.append({"url": url, **kwargs})
        return StubResponse({"url": "https://dev.to/me/hello"})


class TwoHeadingGenerator:
    prompt_template = "{topic}"

    def complete(self, prompt: str) -> str:
        return "blog-title: Hello\nblog-body: # Hello\n# Part One\nText"


def test_generated_article_is_published_as_stored(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(
        cli.BlogGenerator, "from_settings", classmethod(lambda cls, *a, **k: TwoHeadingGenerator())
    )
    monkeypatch.setenv("DEVTO_API_KEY", "dev-key")
    session = StubSession()
    monkeypatch.setattr(
        cli,
        "PublishDispatcher",
        lambda config: PublishDispatcher(config, factory=default_factory(session)),
    )
    config_path = str(_write_config(tmp_path))
    article_path = tmp_path / "post.json"

    generate_argv = ["--log-plain", "--config", config_path, "generate", "--topic", "Event sourcing"]
    assert cli.main([*generate_argv, "--output", str(article_path)]) == 0
    capsys.readouterr()

    code = cli.main(
        ["--log-plain", "--config", config_path, "publish", str(article_path), "--to", "devto"]
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload == {"devto": {"success": True, "url": "https://dev.to/me/hello"}}
    sent = session.calls[0]["json"]["article"]
    assert sent["title"] == "Hello"
    assert sent["body_markdown"] == "# Part One\nText"
    assert sent["tags"] == ["ai", "blogging", "event", "sourcing"]

    assert cli.main(["--log-plain", "preview", str(article_path)]) == 0
    assert "<h1>Part One</h1>" in capsys.readouterr().out


@pytest.mark.parametrize("command", ["publish", "preview"])
@pytest.mark.parametrize("content", [None, "{not json", "[1, 2]"])
def test_unreadable_article_file_is_reported(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], command: str, content: str | None
) -> None:
    article_path = tmp_path / "post.json"
    if content is not None:
        article_path.write_text(content, encoding="utf-8")
    argv = ["--log-plain", "--config", str(_write_config(tmp_path)), command, str(article_path)]
    if command == "publish":
        argv += ["--to", "devto"]

    code = cli.main(argv)

    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["error"].startswith("Cannot load article")
