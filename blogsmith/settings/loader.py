"""Helpers for loading configuration and destination credentials."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from ..platforms.base import DestinationConfig
from ..security import SecretProvider, default_provider

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_NAME = "config.toml"
CONFIG_ENV_VAR = "BLOGSMITH_CONFIG"
DEFAULT_MODEL = "gemini-1.5-flash"

_BUILTIN_DESTINATIONS: dict[str, dict[str, Any]] = {
    "devto": {"kind": "devto", "default_tags": ["AI", "Blogging"]},
    "hashnode": {"kind": "hashnode"},
    "blogger": {"kind": "blogger"},
}

_SECRET_FIELDS = ("api_key", "publication_id", "blog_id")


@dataclass(slots=True)
class GenerationSettings:
    model: str = DEFAULT_MODEL
    timeout: float = 60.0
    thinking_budget: int | None = None
    prompt_path: Path | None = None


@dataclass(slots=True)
class PublishingSettings:
    max_workers: int = 4


@dataclass(slots=True)
class AppConfig:
    generation: GenerationSettings = field(default_factory=GenerationSettings)
    publishing: PublishingSettings = field(default_factory=PublishingSettings)
    destinations: dict[str, DestinationConfig] = field(default_factory=dict)
    source: Path | None = None

    def destination(self, name: str) -> DestinationConfig:
        try:
            return self.destinations[name.lower()]
        except KeyError as exc:
            available = ", ".join(sorted(self.destinations)) or "<none>"
            raise KeyError(f"Unknown destination '{name}' (configured: {available})") from exc


def _to_path(value: str | None) -> Path | None:
    if not value:
        return None
    candidate = Path(value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def _config_path(explicit: str | os.PathLike[str] | None = None) -> tuple[Path, bool]:
    if explicit:
        candidate, required = Path(explicit), True
    else:
        env_value = os.environ.get(CONFIG_ENV_VAR)
        if env_value:
            candidate, required = Path(env_value), True
        else:
            candidate, required = Path(DEFAULT_CONFIG_NAME), False
    path = candidate if candidate.is_absolute() else PROJECT_ROOT / candidate
    return path, required


def _load_toml(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise FileNotFoundError(f"Config file not found: {path}")
        return {}
    with path.open("rb") as fp:
        return tomllib.load(fp)


def _optional_int(value: Any) -> int | None:
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str) and value.strip():
        return int(float(value))
    return None


def _build_destination(
    name: str,
    data: Mapping[str, Any],
    *,
    secrets: SecretProvider,
    default_timeout: float,
) -> DestinationConfig:
    values: dict[str, Any] = {}
    for key in _SECRET_FIELDS:
        explicit = data.get(key)
        values[key] = str(explicit) if explicit else secrets.get_optional(f"{name}.{key}")

    recognised = {"kind", "endpoint", "default_tags", "timeout", *_SECRET_FIELDS}
    timeout = data.get("timeout")
    return DestinationConfig(
        name=name,
        kind=str(data.get("kind", name)).lower(),
        endpoint=data.get("endpoint") or None,
        default_tags=tuple(str(tag) for tag in data.get("default_tags", ())),
        timeout=float(timeout) if timeout is not None else default_timeout,
        extra={k: v for k, v in data.items() if k not in recognised},
        **values,
    )


def load_config(
    config_path: str | os.PathLike[str] | None = None,
    *,
    secrets: SecretProvider | None = None,
) -> AppConfig:
    """Load ``config.toml`` (or ``$BLOGSMITH_CONFIG``) and resolve credentials.

    The default config file is optional; built-in destinations are always
    present and pick their credentials up from the environment
    (``DEVTO_API_KEY``, ``HASHNODE_PUBLICATION_ID``...) or the secrets file.
    """
    path, required = _config_path(config_path)
    data = _load_toml(path, required=required)

    generation_section = data.get("generation", {})
    publishing_section = data.get("publishing", {})
    destinations_section = data.get("destinations", {})

    if secrets is None:
        secrets_file = _to_path(publishing_section.get("secrets_file"))
        secrets = default_provider(secrets_file)

    generation = GenerationSettings(
        model=str(generation_section.get("model", DEFAULT_MODEL)),
        timeout=float(generation_section.get("timeout", 60)),
        thinking_budget=_optional_int(generation_section.get("thinking_budget")),
        prompt_path=_to_path(generation_section.get("prompt_path")),
    )
    publishing = PublishingSettings(
        max_workers=max(1, int(publishing_section.get("max_workers", 4))),
    )
    default_timeout = float(publishing_section.get("timeout", 30))

    merged: dict[str, dict[str, Any]] = {
        name: dict(values) for name, values in _BUILTIN_DESTINATIONS.items()
    }
    for name, values in destinations_section.items():
        merged.setdefault(name.lower(), {}).update(values)

    destinations = {
        name: _build_destination(
            name, values, secrets=secrets, default_timeout=default_timeout
        )
        for name, values in merged.items()
    }

    return AppConfig(
        generation=generation,
        publishing=publishing,
        destinations=destinations,
        source=path if path.exists() else None,
    )
