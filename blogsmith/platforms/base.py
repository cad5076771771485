"""Base contracts for publishing destinations."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, Union

from ..content.models import Article


class PublishError(RuntimeError):
    """Raised inside adapters when a destination call fails."""

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = dict(details or {})

    def __str__(self) -> str:
        base = super().__str__()
        if not self.details:
            return base
        try:
            detail_repr = json.dumps(self.details, ensure_ascii=False)
        except TypeError:
            detail_repr = str(self.details)
        return f"{base} | details: {detail_repr}"


class ConfigurationMissingError(PublishError):
    """A credential or identifier required by a destination is not configured."""


@dataclass(slots=True, frozen=True)
class DestinationConfig:
    """Static per-destination settings, loaded once at start-up."""

    name: str
    kind: str
    endpoint: str | None = None
    api_key: str | None = None
    publication_id: str | None = None
    blog_id: str | None = None
    default_tags: tuple[str, ...] = ()
    timeout: float = 30.0
    extra: Mapping[str, Any] = field(default_factory=dict)

    def require(self, attribute: str) -> str:
        """Return a configured value or raise :class:`ConfigurationMissingError`."""
        value = getattr(self, attribute, None)
        if value is None:
            value = self.extra.get(attribute)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ConfigurationMissingError(
                f"Destination '{self.name}' is missing '{attribute}'",
                details={"destination": self.name, "field": attribute},
            )
        return str(value)

    def has_credentials(self, *attributes: str) -> bool:
        try:
            for attribute in attributes or ("api_key",):
                self.require(attribute)
        except ConfigurationMissingError:
            return False
        return True


@dataclass(slots=True, frozen=True)
class PublishSuccess:
    """The destination accepted the article; ``url`` may be unknown."""

    destination: str
    url: str | None = None

    @property
    def ok(self) -> bool:
        return True

    def as_response(self) -> dict[str, Any]:
        return {"success": True, "url": self.url}


@dataclass(slots=True, frozen=True)
class PublishFailure:
    """The destination call failed; ``details`` holds the upstream payload verbatim."""

    destination: str
    reason: str
    details: Mapping[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return False

    def as_response(self) -> dict[str, Any]:
        response: dict[str, Any] = {"success": False, "error": self.reason}
        if self.details:
            response["details"] = dict(self.details)
        return response

    @classmethod
    def from_error(cls, destination: str, error: PublishError) -> "PublishFailure":
        return cls(destination=destination, reason=error.args[0], details=error.details or None)


PublishResult = Union[PublishSuccess, PublishFailure]


class PublishAdapter(Protocol):
    """Maps a canonical article onto one destination's API."""

    kind: str

    def publish(self, article: Article, destination: DestinationConfig) -> PublishResult:
        """Publish ``article`` and report the outcome; never raises for upstream errors."""


__all__ = [
    "ConfigurationMissingError",
    "DestinationConfig",
    "PublishAdapter",
    "PublishError",
    "PublishFailure",
    "PublishResult",
    "PublishSuccess",
]
