"""Settings package exports."""

from .loader import (
    CONFIG_ENV_VAR,
    AppConfig,
    GenerationSettings,
    PublishingSettings,
    load_config,
)

__all__ = [
    "AppConfig",
    "CONFIG_ENV_VAR",
    "GenerationSettings",
    "PublishingSettings",
    "load_config",
]
