"""Fan an article out to one or more publishing destinations."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

from ..content.models import Article
from ..platforms import (
    DestinationConfig,
    DictPlatformFactory,
    PublishAdapter,
    PublishFailure,
    PublishResult,
    default_factory,
)
from ..settings import AppConfig
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)

Target = tuple[PublishAdapter, DestinationConfig]


class PublishDispatcher:
    """Runs adapters independently and reports one result per destination."""

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        factory: DictPlatformFactory | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._config = config
        self._factory = factory or default_factory()
        if max_workers is None:
            max_workers = config.publishing.max_workers if config else 1
        self._max_workers = max(1, max_workers)

    def dispatch_one(
        self,
        article: Article,
        adapter: PublishAdapter,
        destination: DestinationConfig,
    ) -> PublishResult:
        """Publish to a single destination."""
        try:
            result = adapter.publish(article, destination)
        except Exception as exc:
            LOGGER.exception(
                "Adapter raised while publishing",
                extra={"event": "publish.crash", "destination": destination.name},
            )
            result = PublishFailure(destination.name, str(exc) or type(exc).__name__)
        self._log_result(result)
        return result

    def dispatch_all(self, article: Article, targets: Iterable[Target]) -> dict[str, PublishResult]:
        """Publish to every target; one failure never affects the others."""
        pending = list(targets)
        if self._max_workers == 1 or len(pending) <= 1:
            return {
                destination.name: self.dispatch_one(article, adapter, destination)
                for adapter, destination in pending
            }

        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(pending))) as pool:
            futures = [
                (destination.name, pool.submit(self.dispatch_one, article, adapter, destination))
                for adapter, destination in pending
            ]
            # dispatch_one never raises, so collecting in submission order is safe.
            return {name: future.result() for name, future in futures}

    def resolve(self, name: str) -> Target:
        if self._config is None:
            raise KeyError(f"No configuration loaded; cannot resolve destination '{name}'")
        destination = self._config.destination(name)
        return self._factory.create(destination.kind), destination

    def publish(self, article: Article, names: Sequence[str]) -> dict[str, PublishResult]:
        """Publish to destinations by configured name."""
        results: dict[str, PublishResult] = {}
        targets: list[Target] = []
        for name in dict.fromkeys(names):
            try:
                targets.append(self.resolve(name))
            except (KeyError, ValueError) as exc:
                failure = PublishFailure(name, exc.args[0] if exc.args else str(exc))
                self._log_result(failure)
                results[name] = failure
        results.update(self.dispatch_all(article, targets))
        return results

    @staticmethod
    def _log_result(result: PublishResult) -> None:
        if result.ok:
            LOGGER.info(
                "Published article",
                extra={"event": "publish.success", "destination": result.destination, "url": result.url},
            )
        else:
            LOGGER.warning(
                "Publishing failed",
                extra={
                    "event": "publish.failure",
                    "destination": result.destination,
                    "reason": result.reason,
                },
            )
