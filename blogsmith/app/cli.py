"""Command-line interface for generating and publishing articles."""

from __future__ import annotations

import argparse
import html
import json
import sys
from pathlib import Path
from typing import Any, Callable, Sequence

from markdown import markdown

from ..ai import SEO_KEYWORDS, BlogGenerator, GenerationError, GenerationRequest
from ..content import Article
from ..services import ArticleService, PublishDispatcher
from ..settings import AppConfig, load_config
from ..utils.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)

_DESTINATION_FIELDS = {
    "devto": ("api_key",),
    "hashnode": ("api_key", "publication_id"),
    "blogger": ("api_key", "blog_id"),
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, structured=not args.log_plain)

    handler: Callable[[argparse.Namespace], int] | None = getattr(args, "handler", None)
    if handler is None:
        parser.print_help(sys.stderr)
        return 1
    return handler(args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blogsmith", description="blogsmith CLI")
    parser.add_argument("--config", help="Path to configuration file", default=None)
    parser.add_argument(
        "--log-plain",
        action="store_true",
        help="Use plain-text logs instead of JSON",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default INFO)")

    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser("generate", help="Generate an article with Gemini")
    generate_parser.add_argument("--topic", required=True, help="What the post is about")
    generate_parser.add_argument("--tone", default="informative")
    generate_parser.add_argument("--length", default="medium-length")
    keywords = generate_parser.add_mutually_exclusive_group()
    keywords.add_argument("--keywords", default="", help="Comma separated keywords")
    keywords.add_argument(
        "--seo",
        action="store_true",
        help="Ask for SEO-oriented keywords",
    )
    generate_parser.add_argument("--output", type=Path, help="Write the article JSON here")
    generate_parser.add_argument(
        "--api-key",
        dest="api_key",
        default=None,
        help="Gemini API key override",
    )
    generate_parser.set_defaults(handler=_handle_generate)

    publish_parser = subparsers.add_parser("publish", help="Publish a saved article")
    publish_parser.add_argument("article", type=Path, help="Article JSON produced by 'generate'")
    publish_parser.add_argument(
        "--to",
        dest="destinations",
        nargs="+",
        required=True,
        metavar="DESTINATION",
        help="Configured destination names",
    )
    publish_parser.set_defaults(handler=_handle_publish)

    preview_parser = subparsers.add_parser("preview", help="Render a saved article as HTML")
    preview_parser.add_argument("article", type=Path)
    preview_parser.add_argument("--output", type=Path, help="Write the HTML here")
    preview_parser.set_defaults(handler=_handle_preview)

    destinations_parser = subparsers.add_parser(
        "destinations", help="List destinations and credential status"
    )
    destinations_parser.set_defaults(handler=_handle_destinations)

    return parser


def _handle_generate(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    request = GenerationRequest(
        topic=args.topic,
        tone=args.tone,
        length=args.length,
        keywords=SEO_KEYWORDS if args.seo else args.keywords,
    )
    LOGGER.info(
        "Generating article",
        extra={"event": "cli.command", "command": "generate", "topic": args.topic},
    )
    try:
        generator = BlogGenerator.from_settings(config.generation, api_key=args.api_key)
        article = ArticleService(generator).generate(request)
    except GenerationError as exc:
        _emit({"error": str(exc)})
        return 1

    payload = article.to_dict()
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Wrote article to %s", args.output)
    _emit(payload)
    return 0


def _handle_publish(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    try:
        article = _load_article(args.article)
    except (OSError, ValueError) as exc:
        _emit({"error": f"Cannot load article {args.article}: {exc}"})
        return 1
    dispatcher = PublishDispatcher(config)
    results = dispatcher.publish(article, args.destinations)
    _emit({name: result.as_response() for name, result in results.items()})
    return 0 if all(result.ok for result in results.values()) else 1


def _handle_preview(args: argparse.Namespace) -> int:
    try:
        article = _load_article(args.article)
    except (OSError, ValueError) as exc:
        _emit({"error": f"Cannot load article {args.article}: {exc}"})
        return 1
    rendered = f"<h1>{html.escape(article.title)}</h1>\n" + markdown(
        article.body, extensions=["fenced_code", "tables"]
    )
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered, encoding="utf-8")
        LOGGER.info("Wrote preview to %s", args.output)
    else:
        sys.stdout.write(rendered + "\n")
    return 0


def _handle_destinations(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    _emit(_describe_destinations(config))
    return 0


def _describe_destinations(config: AppConfig) -> dict[str, dict[str, Any]]:
    summary: dict[str, dict[str, Any]] = {}
    for name, destination in sorted(config.destinations.items()):
        required = _DESTINATION_FIELDS.get(destination.kind, ("api_key",))
        summary[name] = {
            "kind": destination.kind,
            "endpoint": destination.endpoint,
            "configured": destination.has_credentials(*required),
        }
    return summary


def _load_article(path: Path) -> Article:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return Article.from_dict(data)


def _emit(payload: Any) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
