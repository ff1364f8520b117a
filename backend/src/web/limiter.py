"""
Rate Limiter - SlowAPI configuration for API rate limiting
"""
from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import AppConfig


def build_limiter(config: AppConfig) -> Limiter:
    """
    Create the per-app limiter.

    Every route gets `config.rate_limit` per client address; with
    `rate_limit_enabled` off the limiter is installed but never blocks.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[config.rate_limit],
        enabled=config.rate_limit_enabled,
    )
