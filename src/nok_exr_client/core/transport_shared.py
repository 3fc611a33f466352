"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import NokExrClientConfig


def build_default_headers(config: NokExrClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/vnd.sdmx.data+json, application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: NokExrClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def normalize_base_url(config: NokExrClientConfig) -> str:
    return config.base_url.rstrip("/") + "/"


def normalize_endpoint(endpoint: str) -> str:
    return endpoint.lstrip("/")


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "normalize_base_url",
    "normalize_endpoint",
]
