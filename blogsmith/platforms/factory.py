"""Registry mapping destination kinds to publisher adapters."""

from __future__ import annotations

from typing import Callable, Mapping

from .base import PublishAdapter
from .blogger import BloggerPublisher
from .devto import DevToPublisher
from .hashnode import HashnodePublisher
from .http import HttpSession


class DictPlatformFactory:
    """Simple registry-backed factory.

    Every ``create`` call builds a new adapter, so destinations published
    concurrently never share an adapter or its HTTP session.
    """

    def __init__(self, builders: Mapping[str, Callable[[], PublishAdapter]]) -> None:
        self._builders = {key.lower(): value for key, value in builders.items()}

    @property
    def kinds(self) -> tuple[str, ...]:
        return tuple(sorted(self._builders))

    def create(self, kind: str) -> PublishAdapter:
        key = kind.lower()
        try:
            builder = self._builders[key]
        except KeyError as exc:
            raise ValueError(f"Unsupported platform: {kind}") from exc
        return builder()


def default_factory(session: HttpSession | None = None) -> DictPlatformFactory:
    """Factory with the built-in DEV.to, Hashnode and Blogger adapters.

    Without ``session`` each adapter opens its own :class:`requests.Session`;
    a session passed in is shared by every adapter built here.
    """
    return DictPlatformFactory(
        {
            DevToPublisher.kind: lambda: DevToPublisher(session),
            HashnodePublisher.kind: lambda: HashnodePublisher(session),
            BloggerPublisher.kind: lambda: BloggerPublisher(session),
        }
    )
