"""Blogger (Google) publisher; the destination has no tag concept."""

from __future__ import annotations

import requests

from ..content.models import Article
from .base import DestinationConfig, PublishError, PublishFailure, PublishResult, PublishSuccess
from .http import HttpSession, post_json

DEFAULT_ENDPOINT = "https://www.googleapis.com/blogger/v3"


class BloggerPublisher:
    """Inserts a post into a Blogger blog via the v3 REST API."""

    kind = "blogger"

    def __init__(self, session: HttpSession | None = None) -> None:
        self._session = session or requests.Session()

    @staticmethod
    def posts_url(endpoint: str, blog_id: str) -> str:
        return f"{endpoint.rstrip('/')}/blogs/{blog_id}/posts/"

    def build_payload(self, article: Article) -> dict[str, str]:
        return {"kind": "blogger#post", "title": article.title, "content": article.body}

    def publish(self, article: Article, destination: DestinationConfig) -> PublishResult:
        try:
            token = destination.require("api_key")
            blog_id = destination.require("blog_id")
            data = post_json(
                self._session,
                self.posts_url(destination.endpoint or DEFAULT_ENDPOINT, blog_id),
                payload=self.build_payload(article),
                headers={"Authorization": f"Bearer {token}"},
                timeout=destination.timeout,
            )
        except PublishError as exc:
            return PublishFailure.from_error(destination.name, exc)

        url = data.get("url")
        if not url:
            return PublishFailure(
                destination.name,
                "Blogger response did not include a post URL",
                details={"response": data},
            )
        return PublishSuccess(destination.name, url=str(url))
