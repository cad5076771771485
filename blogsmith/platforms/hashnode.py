"""Hashnode publisher using the GraphQL ``publishPost`` mutation."""

from __future__ import annotations

import re
from typing import Any

import requests

from ..content.models import Article
from ..utils.logging import get_logger
from .base import DestinationConfig, PublishError, PublishFailure, PublishResult, PublishSuccess
from .http import HttpSession, post_json

LOGGER = get_logger(__name__)

DEFAULT_ENDPOINT = "https://gql.hashnode.com"

PUBLISH_POST_MUTATION = """
mutation PublishPost($input: PublishPostInput!) {
  publishPost(input: $input) {
    post {
      id
      url
    }
  }
}
""".strip()

_SLUG_INVALID = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    return _SLUG_INVALID.sub("-", value.lower()).strip("-")


class HashnodePublisher:
    """Publishes markdown posts to a Hashnode publication."""

    kind = "hashnode"

    def __init__(self, session: HttpSession | None = None) -> None:
        self._session = session or requests.Session()

    def build_payload(self, article: Article, publication_id: str) -> dict[str, Any]:
        return {
            "query": PUBLISH_POST_MUTATION,
            "variables": {
                "input": {
                    "title": article.title,
                    "contentMarkdown": article.body,
                    "publicationId": publication_id,
                    "tags": [{"name": tag, "slug": slugify(tag)} for tag in article.tags],
                }
            },
        }

    def publish(self, article: Article, destination: DestinationConfig) -> PublishResult:
        try:
            token = destination.require("api_key")
            publication_id = destination.require("publication_id")
            data = post_json(
                self._session,
                destination.endpoint or DEFAULT_ENDPOINT,
                payload=self.build_payload(article, publication_id),
                headers={"Authorization": token},
                timeout=destination.timeout,
            )
        except PublishError as exc:
            return PublishFailure.from_error(destination.name, exc)

        errors = data.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) and errors else errors
            message = first.get("message") if isinstance(first, dict) else None
            return PublishFailure(
                destination.name,
                str(message or errors),
                details={"errors": errors},
            )

        url = _nested(data, "data", "publishPost", "post", "url")
        if url is None:
            # The mutation went through; Hashnode simply did not echo the post back.
            LOGGER.warning(
                "Hashnode response missing post URL",
                extra={"event": "publish.partial", "destination": destination.name},
            )
            return PublishSuccess(destination.name, url=None)
        return PublishSuccess(destination.name, url=str(url))


def _nested(data: Any, *keys: str) -> Any:
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
