"""JSON layout renderer: dumps draw instructions per page for inspection and tests."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path

from formpress.layout.pages import Document


class JSONRenderer:
    """Renders a laid-out ``Document`` as indented JSON bytes."""

    def render(self, document: Document) -> bytes:
        """Serialize *document* to pretty-printed JSON bytes."""
        payload = {
            "title": document.title,
            "font_family": document.font_family,
            "page_count": document.page_count,
            "pages": [dataclasses.asdict(page) for page in document.pages],
        }
        return json.dumps(payload, indent=2, default=str).encode()

    def render_to_file(self, document: Document, path: Path) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.render(document))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
