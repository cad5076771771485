"""Secret lookup for destination credentials.

Keys use ``<destination>.<field>`` form, e.g. ``devto.api_key``.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from configparser import ConfigParser
from pathlib import Path
from typing import Iterable, Mapping


class SecretNotFoundError(KeyError):
    """Raised when a secret cannot be resolved."""


class SecretProvider(ABC):
    """Abstract secret lookup contract."""

    @abstractmethod
    def get_secret(self, key: str) -> str:
        """Return the secret associated with ``key``."""

    def get_optional(self, key: str) -> str | None:
        """Return the secret or ``None`` when it is not configured."""
        try:
            return self.get_secret(key)
        except SecretNotFoundError:
            return None


class EnvSecretProvider(SecretProvider):
    """Reads secrets from environment variables (``devto.api_key`` -> ``DEVTO_API_KEY``)."""

    def __init__(self, env: Mapping[str, str] | None = None, *, prefix: str = "") -> None:
        self._env = env if env is not None else os.environ
        self._prefix = prefix

    @staticmethod
    def variable_name(key: str, prefix: str = "") -> str:
        return f"{prefix}{key}".upper().replace(".", "_").replace("-", "_")

    def get_secret(self, key: str) -> str:
        name = self.variable_name(key, self._prefix)
        value = self._env.get(name)
        if not value:
            raise SecretNotFoundError(name)
        return value


class FileSecretProvider(SecretProvider):
    """Loads secrets from an INI file with one section per destination."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._parser = ConfigParser()
        if path.exists():
            self._parser.read(path, encoding="utf-8")

    def get_secret(self, key: str) -> str:
        section, _, option = key.partition(".")
        if not section or not option:
            raise SecretNotFoundError(key)
        if self._parser.has_option(section, option):
            value = self._parser.get(section, option).strip()
            if value:
                return value
        raise SecretNotFoundError(key)


class MappingSecretProvider(SecretProvider):
    """Wraps a plain dictionary; handy in tests."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = dict(mapping)

    def get_secret(self, key: str) -> str:
        value = self._mapping.get(key)
        if not value:
            raise SecretNotFoundError(key)
        return value


class ChainedSecretProvider(SecretProvider):
    """Tries multiple providers in order until one returns a secret."""

    def __init__(self, providers: Iterable[SecretProvider]) -> None:
        self._providers = tuple(providers)

    def get_secret(self, key: str) -> str:
        for provider in self._providers:
            try:
                return provider.get_secret(key)
            except SecretNotFoundError:
                continue
        raise SecretNotFoundError(key)


def default_provider(secrets_file: Path | None = None) -> SecretProvider:
    """Environment first, then the optional INI secrets file."""
    providers: list[SecretProvider] = [EnvSecretProvider()]
    if secrets_file is not None:
        providers.append(FileSecretProvider(secrets_file))
    return ChainedSecretProvider(providers)


__all__ = [
    "ChainedSecretProvider",
    "EnvSecretProvider",
    "FileSecretProvider",
    "MappingSecretProvider",
    "SecretNotFoundError",
    "SecretProvider",
    "default_provider",
]
