"""PDF renderer using the reportlab canvas.

Replays every positioned draw instruction of a laid-out ``Document`` onto
a reportlab canvas, one PDF page per layout page. The canvas runs in
invariant mode, so identical documents serialize to identical bytes.
Requires the ``reportlab`` dependency::

    pip install formpress
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

from formpress.core.config import PDFRenderConfig
from formpress.layout.pages import Document

try:
    from reportlab.lib.colors import HexColor
    from reportlab.pdfgen.canvas import Canvas
except ImportError as _exc:
    raise ImportError(
        "reportlab is required for PDF output. Install with: pip install reportlab"
    ) from _exc

log = logging.getLogger(__name__)


class PDFRenderer:
    """Serializes a ``Document`` to PDF bytes."""

    def __init__(self, config: PDFRenderConfig | None = None) -> None:
        self._config = config or PDFRenderConfig()

    # ── Public API ───────────────────────────────────────────────────

    def render(self, document: Document) -> bytes:
        """Render *document* to PDF bytes."""
        buffer = BytesIO()
        first = document.pages[0] if document.pages else None
        pagesize = (first.width, first.height) if first else (612.0, 792.0)
        canvas = Canvas(
            buffer,
            pagesize=pagesize,
            invariant=1,
            pageCompression=1 if self._config.compress else 0,
        )
        canvas.setTitle(document.title)
        canvas.setCreator("formpress")
        if self._config.author:
            canvas.setAuthor(self._config.author)

        colors: dict[str, HexColor] = {}
        for page in document.pages:
            canvas.setPageSize((page.width, page.height))
            for ins in page.instructions:
                if ins.color not in colors:
                    colors[ins.color] = HexColor(ins.color)
                canvas.setFont(document.font_family, ins.font_size)
                canvas.setFillColor(colors[ins.color])
                canvas.drawString(ins.x, ins.y, ins.text)
            canvas.showPage()
        canvas.save()
        data = buffer.getvalue()
        log.debug("Rendered %d pages into %d bytes", document.page_count, len(data))
        return data

    def render_to_file(self, document: Document, path: Path) -> Path:
        """Write PDF to *path* and return it."""
        path.write_bytes(self.render(document))
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"
