"""DEV.to (Forem) article publisher."""

from __future__ import annotations

import requests

from ..content.models import Article
from .base import DestinationConfig, PublishError, PublishFailure, PublishResult, PublishSuccess
from .http import HttpSession, post_json

DEFAULT_ENDPOINT = "https://dev.to/api/articles"
DEFAULT_TAGS = ("AI", "Blogging")


class DevToPublisher:
    """Creates a published article through the Forem REST API."""

    kind = "devto"

    def __init__(self, session: HttpSession | None = None) -> None:
        self._session = session or requests.Session()

    def build_payload(self, article: Article, destination: DestinationConfig) -> dict[str, object]:
        tags = list(article.tags) or list(destination.default_tags or DEFAULT_TAGS)
        return {
            "article": {
                "title": article.title,
                "body_markdown": article.body,
                "published": True,
                "tags": tags,
            }
        }

    def publish(self, article: Article, destination: DestinationConfig) -> PublishResult:
        try:
            api_key = destination.require("api_key")
            data = post_json(
                self._session,
                destination.endpoint or DEFAULT_ENDPOINT,
                payload=self.build_payload(article, destination),
                headers={"api-key": api_key},
                timeout=destination.timeout,
            )
        except PublishError as exc:
            return PublishFailure.from_error(destination.name, exc)

        url = data.get("url") or data.get("canonical_url")
        if not url:
            return PublishFailure(
                destination.name,
                "DEV.to response did not include an article URL",
                details={"response": data},
            )
        return PublishSuccess(destination.name, url=str(url))
