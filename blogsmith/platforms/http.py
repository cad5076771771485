"""JSON-over-HTTP helper shared by the destination adapters."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

import requests

from .base import PublishError


class HttpSession(Protocol):
    """The subset of :class:`requests.Session` the adapters rely on."""

    def post(self, url: str, **kwargs: Any) -> requests.Response: ...


def post_json(
    session: HttpSession,
    url: str,
    *,
    payload: Mapping[str, Any],
    headers: Mapping[str, str],
    timeout: float,
) -> dict[str, Any]:
    """POST ``payload`` and return the decoded JSON response.

    Raises :class:`PublishError` on transport errors, non-2xx responses and
    non-JSON bodies. The upstream body is carried unmodified: as the error
    message, and parsed under ``details["response"]`` when it is JSON.
    """
    request_headers = {"Content-Type": "application/json", **headers}
    try:
        response = session.post(url, json=dict(payload), headers=request_headers, timeout=timeout)
    except requests.RequestException as exc:
        raise PublishError(str(exc), details={"url": url}) from exc

    body = response.text or ""
    try:
        data: Any = response.json()
    except ValueError:
        data = None

    if not response.ok:
        details: dict[str, Any] = {"status": response.status_code}
        if data is not None:
            details["response"] = data
        raise PublishError(body or f"HTTP {response.status_code}", details=details)

    if not isinstance(data, dict):
        raise PublishError(
            body or "Empty response body",
            details={"status": response.status_code},
        )
    return data


__all__ = ["HttpSession", "post_json"]
