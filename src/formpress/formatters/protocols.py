"""Renderer protocol: the contract every document serializer implements."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from formpress.layout.pages import Document


@runtime_checkable
class IDocumentRenderer(Protocol):
    """Protocol for document renderers (PDF, JSON layout dumps, ...)."""

    def render(self, document: Document) -> bytes:
        """Serialize the laid-out *document* into output bytes."""
        ...

    def render_to_file(self, document: Document, path: Path) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/pdf')."""
        ...


__all__ = ["IDocumentRenderer"]
