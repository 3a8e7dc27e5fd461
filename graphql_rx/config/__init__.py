"""Unified configuration layer for the bridge.

Sources are merged in a predictable order (later wins):

1. Built-in defaults (``config.defaults``)
2. Optional config file named by ``GRAPHQL_RX_CONFIG_FILE`` (JSON, else YAML)
3. Environment variables (``GRAPHQL_RX_CACHE_POLICY``,
   ``GRAPHQL_RX_TIMEOUT_SECONDS``)
4. In-code overrides passed to ``get_bridge_config``

Example config file::

    default_cache_policy: fetch_ignoring_cache_data
    timeout_seconds: 10

Invalid values fall back to the built-in default rather than raising.
The merged result is cached per process; ``reset_bridge_config`` clears it.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..base.models import CachePolicy
from .defaults import DEFAULT_CACHE_POLICY, DEFAULT_TIMEOUT_SECONDS
from .env import CONFIG_FILE_ENV, env_overrides, parse_positive_float


@dataclass(frozen=True)
class BridgeConfig:
    """Resolved bridge settings.

    Attributes:
        default_cache_policy: Policy for fetch/watch when the caller gives none.
        timeout_seconds: Default for ``Single.timeout()`` without an argument.
    """

    default_cache_policy: CachePolicy = CachePolicy(DEFAULT_CACHE_POLICY)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


_CACHED: Optional[BridgeConfig] = None


def _load_config_file() -> Dict[str, Any]:
    """Read the optional config file; unreadable or non-mapping content yields ``{}``."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            data = None
    return data if isinstance(data, dict) else {}


def _build(raw: Mapping[str, Any]) -> BridgeConfig:
    default_policy = CachePolicy(DEFAULT_CACHE_POLICY)
    return BridgeConfig(
        default_cache_policy=CachePolicy.parse(raw.get("default_cache_policy"), default_policy),
        timeout_seconds=parse_positive_float(raw.get("timeout_seconds"), DEFAULT_TIMEOUT_SECONDS),
    )


def get_bridge_config(overrides: Optional[Mapping[str, Any]] = None) -> BridgeConfig:
    """Return the merged bridge configuration.

    Without ``overrides`` the process-cached value is returned. With
    overrides a fresh config is built on top of the cached sources and not
    cached itself.
    """
    global _CACHED  # noqa: PLW0603 - documented module cache
    if _CACHED is None or overrides:
        merged: Dict[str, Any] = {}
        merged |= _load_config_file()
        merged |= env_overrides()
        if not overrides:
            _CACHED = _build(merged)
            return _CACHED
        merged |= {k: v for k, v in overrides.items() if v is not None}
        return _build(merged)
    return _CACHED


def reset_bridge_config() -> None:
    """Drop the cached configuration so the next call re-reads all sources."""
    global _CACHED  # noqa: PLW0603
    _CACHED = None


__all__ = ["BridgeConfig", "get_bridge_config", "reset_bridge_config"]
