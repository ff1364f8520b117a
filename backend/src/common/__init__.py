"""
Common utilities shared across modules.

This module provides:
- log_setup: root logger configuration
"""

from .log_setup import setup_logging

__all__ = [
    "setup_logging",
]
