"""Exception hierarchy for formpress.

Re-exports the package-level exceptions so framework code can import
everything from ``formpress.core``.
"""

from __future__ import annotations

from formpress.exceptions import (
    ConfigurationError,
    DocumentGenerationError,
    FormPressError,
    PageAllocationError,
)

__all__ = [
    "FormPressError",
    "ConfigurationError",
    "PageAllocationError",
    "DocumentGenerationError",
]
