"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import NokExrClientConfig
from .core.errors import NokExrValidationError


def validate_client_config(config: NokExrClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise NokExrValidationError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
