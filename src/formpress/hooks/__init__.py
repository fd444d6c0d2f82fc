"""Process-level hooks: logging setup."""

from __future__ import annotations

from formpress.hooks.logging_config import setup_logging

__all__ = ["setup_logging"]
