"""Renderers that serialize a laid-out ``Document``.

Usage::

    from formpress.formatters import PDFRenderer, JSONRenderer

    pdf_bytes = PDFRenderer().render(document)
    layout_json = JSONRenderer().render(document)
"""

from __future__ import annotations

from typing import Any

from formpress.formatters.json_renderer import JSONRenderer
from formpress.formatters.protocols import IDocumentRenderer

__all__ = [
    "IDocumentRenderer",
    "JSONRenderer",
    "PDFRenderer",
]


def __getattr__(name: str) -> Any:
    """Lazy-load PDFRenderer so reportlab is only imported when needed."""
    if name == "PDFRenderer":
        from formpress.formatters.pdf_renderer import PDFRenderer

        return PDFRenderer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
