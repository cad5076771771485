"""Publishing destinations."""

from __future__ import annotations

from .base import (
    ConfigurationMissingError,
    DestinationConfig,
    PublishAdapter,
    PublishError,
    PublishFailure,
    PublishResult,
    PublishSuccess,
)
from .blogger import BloggerPublisher
from .devto import DevToPublisher
from .factory import DictPlatformFactory, default_factory
from .hashnode import HashnodePublisher

__all__ = [
    "BloggerPublisher",
    "ConfigurationMissingError",
    "DestinationConfig",
    "DevToPublisher",
    "DictPlatformFactory",
    "HashnodePublisher",
    "PublishAdapter",
    "PublishError",
    "PublishFailure",
    "PublishResult",
    "PublishSuccess",
    "default_factory",
]
