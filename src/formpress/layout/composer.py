"""Page composer: cursor-driven placement of titles, fields and summary rows.

Coordinates follow PDF convention: ``y`` is measured up from the bottom
edge, so the cursor moves *down* the page by decreasing ``y``.

Every placement is a block of rows spaced by a fixed step. Before a block
is drawn its extent (first baseline to last baseline, plus any room it
must keep for what follows) is compared with the room left above the
active safety margin::

    remaining = cursor.y - margin
    if remaining <= extent: new page

so a block whose last baseline would land exactly on the margin moves to
the next page. A block taller than a whole page flows row by row instead
of being clipped.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from formpress.core.config import LayoutConfig
from formpress.layout.metrics import FontMetrics, TextRole, sanitize_text
from formpress.layout.pages import Document, DrawInstruction, Page, PageAllocator
from formpress.layout.text_flow import wrap
from formpress.models import ExtractedSummaryItem, FieldMapping, Styling

log = logging.getLogger(__name__)

SUMMARY_HEADER = "EXTRACTED DATA SUMMARY:"
SUMMARY_CONTINUATION_HEADER = "EXTRACTED DATA SUMMARY (continued):"
FOOTER_PREFIX = "Generated on: "

_WORD_START = re.compile(r"\b\w")


def humanize(name: str) -> str:
    """``full_name`` -> ``Full Name``; already upper-cased names are kept."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), name.replace("_", " "))


@dataclass
class Cursor:
    """Current page index and baseline of the next row."""

    page_index: int
    y: float


# (text, x, role, color)
_Piece = tuple[str, float, TextRole, str]


class PageComposer:
    """Lays content out top-to-bottom, allocating pages as needed.

    One composer serves one generation call; it owns its cursor and never
    keeps a reference to a page across a page break.
    """

    def __init__(
        self,
        document: Document,
        allocator: PageAllocator,
        config: LayoutConfig,
        metrics: FontMetrics,
        styling: Styling,
    ) -> None:
        self._document = document
        self._allocator = allocator
        self._config = config
        self._metrics = metrics
        self._styling = styling
        self._in_summary = False
        if not document.pages:
            allocator.new_page(document)
        self.cursor = Cursor(page_index=len(document.pages) - 1, y=config.content_top)
        self._top_y = config.content_top
        self._page_empty = True

    # ── Cursor helpers ───────────────────────────────────────────────

    @property
    def page(self) -> Page:
        return self._document.page(self.cursor.page_index)

    @property
    def in_summary(self) -> bool:
        return self._in_summary

    def _at_page_top(self) -> bool:
        """True until the first content block lands on the current page."""
        return self._page_empty and self.cursor.y >= self._top_y

    def _advance(self, amount: float) -> None:
        self.cursor.y = max(self.cursor.y - amount, 0.0)

    def _emit(self, text: str, x: float, y: float, role: TextRole, color: str) -> None:
        self.page.draw(
            DrawInstruction(
                text=text,
                x=x,
                y=y,
                font_size=self._metrics.font_size(role),
                color=color,
                role=role,
            )
        )

    def break_page(self) -> Page:
        """Start a new page and move the cursor to its content top."""
        page = self._allocator.new_page(self._document)
        self.cursor.page_index = page.index
        self.cursor.y = self._config.content_top
        if self._in_summary:
            self._emit(
                SUMMARY_CONTINUATION_HEADER,
                self._config.left_margin,
                self.cursor.y,
                TextRole.CONTINUATION_HEADER,
                self._styling.primary_color,
            )
            self._advance(self._config.continuation_header_advance)
        self._top_y = self.cursor.y
        self._page_empty = True
        return page

    def _place_rows(self, rows: list[list[_Piece]], step: float, margin: float, keep: float = 0.0) -> None:
        """Draw *rows* one *step* apart, breaking pages around *margin*.

        On return the cursor sits on the last row's baseline.
        """
        extent = (len(rows) - 1) * step + keep
        if not self._at_page_top() and self.cursor.y - margin <= extent:
            self.break_page()
        for i, row in enumerate(rows):
            if i:
                self._advance(step)
                if self.cursor.y <= margin:
                    self.break_page()
            for text, x, role, color in row:
                self._emit(text, x, self.cursor.y, role, color)
            self._page_empty = False

    def _wrap(self, text: str, width: float, role: TextRole) -> list[str]:
        return wrap(sanitize_text(text), width, self._metrics.char_width(role))

    def _ellipsize(self, line: str, width: float, role: TextRole) -> str:
        while line and self._metrics.text_width(f"{line}...", role) > width:
            line = line[:-1]
        return f"{line.rstrip()}..."

    # ── Placements ───────────────────────────────────────────────────

    def place_title(self, text: str) -> None:
        """Draw the document title above the content area of the current page.

        A title that wraps pushes the content top down by the same gap the
        single-line title leaves. The content top stays above both safety
        margins; lines beyond that are cut and the last kept line ends
        with an ellipsis.
        """
        cfg = self._config
        role = TextRole.TITLE
        step = self._metrics.font_size(role) * 1.2
        width = cfg.content_right - cfg.left_margin
        lines = self._wrap(text, width, role) or [""]
        floor = max(cfg.field_safety_margin, cfg.summary_safety_margin)
        fit = max(math.ceil((cfg.content_top - floor) / step), 1)
        if len(lines) > fit:
            log.debug("Title wraps to %d lines; keeping %d", len(lines), fit)
            lines = lines[:fit]
            lines[-1] = self._ellipsize(lines[-1], width, role)

        gap = cfg.page_height - cfg.title_offset - cfg.content_top
        y = cfg.page_height - cfg.title_offset
        for i, line in enumerate(lines):
            if i:
                y -= step
            self._emit(line, cfg.left_margin, y, role, self._styling.primary_color)
        if y - gap < self.cursor.y:
            self.cursor.y = y - gap
            self._top_y = self.cursor.y

    def place_section_header(self, text: str) -> None:
        """Draw a section title, keeping room for the first field under it."""
        cfg = self._config
        role = TextRole.SECTION_HEADER
        lines = self._wrap(text, cfg.content_right - cfg.left_margin, role) or [""]
        rows = [[(line, cfg.left_margin, role, self._styling.primary_color)] for line in lines]
        step = cfg.section_header_advance
        self._place_rows(rows, step, cfg.field_safety_margin, keep=step)
        self._advance(step)

    def place_field(self, mapping: FieldMapping, value: str) -> None:
        """Draw ``LABEL:`` at the left margin and the wrapped value at the indent."""
        cfg = self._config
        labels = self._wrap(f"{humanize(mapping.pdf_field_name)}:", cfg.label_max_width, TextRole.FIELD_LABEL)
        values = self._wrap(value, cfg.value_max_width, TextRole.FIELD_VALUE)
        rows: list[list[_Piece]] = []
        for i in range(max(len(labels), len(values), 1)):
            row: list[_Piece] = []
            if i < len(labels):
                row.append((labels[i], cfg.left_margin, TextRole.FIELD_LABEL, self._styling.secondary_color))
            if i < len(values):
                row.append((values[i], cfg.value_x, TextRole.FIELD_VALUE, self._styling.primary_color))
            rows.append(row)
        self._place_rows(rows, cfg.line_height, cfg.field_safety_margin)
        self._advance(cfg.field_tail + cfg.field_spacing)

    def end_section(self) -> None:
        self._advance(self._config.section_spacing)

    def begin_summary(self) -> None:
        """Draw the separator and summary header; later breaks repeat the header."""
        cfg = self._config
        sep_width = self._metrics.char_width(TextRole.SEPARATOR)
        dashes = min(cfg.summary_separator_width, math.floor((cfg.content_right - cfg.left_margin) / sep_width))
        rows = [
            [("-" * dashes, cfg.left_margin, TextRole.SEPARATOR, self._styling.secondary_color)],
            [(SUMMARY_HEADER, cfg.left_margin, TextRole.SUMMARY_HEADER, self._styling.primary_color)],
        ]
        keep = cfg.summary_header_advance + cfg.summary_name_advance
        self._place_rows(rows, cfg.summary_header_gap, cfg.summary_safety_margin, keep=keep)
        self._advance(cfg.summary_header_advance)
        self._in_summary = True

    def place_summary_item(self, item: ExtractedSummaryItem) -> None:
        """Draw the item's name line and its ``value (NN% confidence)`` line."""
        cfg = self._config
        name_lines = self._wrap(
            f"{humanize(item.field_name)}:", cfg.content_right - cfg.summary_name_x, TextRole.SUMMARY_NAME
        )
        value_lines = self._wrap(
            f"{item.field_value} ({item.confidence_percent}% confidence)",
            cfg.content_right - cfg.summary_value_x,
            TextRole.SUMMARY_VALUE,
        )
        rows: list[list[_Piece]] = [
            [(line, cfg.summary_name_x, TextRole.SUMMARY_NAME, self._styling.primary_color)] for line in name_lines
        ]
        rows.extend(
            [(line, cfg.summary_value_x, TextRole.SUMMARY_VALUE, self._styling.secondary_color)]
            for line in value_lines
        )
        self._place_rows(rows, cfg.summary_name_advance, cfg.summary_safety_margin)
        self._advance(cfg.summary_item_spacing)

    def place_footer(self, timestamp: str) -> None:
        """Stamp the generation time at the bottom of the page the cursor is on."""
        self._emit(
            f"{FOOTER_PREFIX}{timestamp}",
            self._config.left_margin,
            self._config.footer_y,
            TextRole.FOOTER,
            self._styling.secondary_color,
        )
