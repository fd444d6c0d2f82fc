"""Layout engine: metrics, word wrapping, pages and the page composer."""

from __future__ import annotations

from formpress.layout.composer import Cursor, PageComposer
from formpress.layout.metrics import FontMetrics, TextRole
from formpress.layout.pages import Document, DrawInstruction, Page, PageAllocator
from formpress.layout.text_flow import estimate_width, wrap

__all__ = [
    "Cursor",
    "Document",
    "DrawInstruction",
    "FontMetrics",
    "Page",
    "PageAllocator",
    "PageComposer",
    "TextRole",
    "estimate_width",
    "wrap",
]
