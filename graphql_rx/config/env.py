"""Environment variable names and parsing helpers for bridge configuration."""

from __future__ import annotations

import os
from typing import Dict, Optional

CONFIG_FILE_ENV = "GRAPHQL_RX_CONFIG_FILE"
CACHE_POLICY_ENV = "GRAPHQL_RX_CACHE_POLICY"
TIMEOUT_SECONDS_ENV = "GRAPHQL_RX_TIMEOUT_SECONDS"

# config field -> environment variable
ENV_FIELD_MAP: Dict[str, str] = {
    "default_cache_policy": CACHE_POLICY_ENV,
    "timeout_seconds": TIMEOUT_SECONDS_ENV,
}


def parse_positive_float(raw: object, default: Optional[float]) -> Optional[float]:
    """Return ``raw`` as a positive float, else ``default``.

    Accepts numbers and numeric strings; zero, negatives and garbage fall back.
    """
    if raw is None or raw == "":
        return default
    try:
        val = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return val if val > 0 else default


def env_overrides() -> Dict[str, str]:
    """Collect the bridge settings present in the process environment."""
    out: Dict[str, str] = {}
    for field, name in ENV_FIELD_MAP.items():
        val = os.getenv(name)
        if val:
            out[field] = val
    return out


__all__ = [
    "CONFIG_FILE_ENV",
    "CACHE_POLICY_ENV",
    "TIMEOUT_SECONDS_ENV",
    "ENV_FIELD_MAP",
    "parse_positive_float",
    "env_overrides",
]
