"""Approximate font metrics for the layout engine.

Widths are estimated from a single average character advance, scaled by
font size. Real glyph metrics (kerning, per-glyph advances) are not used;
the layout only guarantees that no line is *estimated* wider than its box.
"""

from __future__ import annotations

from enum import Enum

from formpress.core.config import FontConfig, LayoutConfig


class TextRole(str, Enum):
    """Every kind of text the composer draws."""

    TITLE = "title"
    SECTION_HEADER = "section_header"
    FIELD_LABEL = "field_label"
    FIELD_VALUE = "field_value"
    SEPARATOR = "separator"
    SUMMARY_HEADER = "summary_header"
    CONTINUATION_HEADER = "continuation_header"
    SUMMARY_NAME = "summary_name"
    SUMMARY_VALUE = "summary_value"
    FOOTER = "footer"


class FontMetrics:
    """Font sizes per role and per-size character width estimates.

    ``avg_char_width`` is the advance of one character at the field-value
    size; every other size is scaled linearly from it.
    """

    def __init__(self, fonts: FontConfig | None = None, layout: LayoutConfig | None = None) -> None:
        self._fonts = fonts or FontConfig()
        layout = layout or LayoutConfig()
        self._value_char_width = layout.avg_char_width
        self._sizes: dict[TextRole, float] = {
            TextRole.TITLE: self._fonts.title_size,
            TextRole.SECTION_HEADER: self._fonts.section_header_size,
            TextRole.FIELD_LABEL: self._fonts.label_size,
            TextRole.FIELD_VALUE: self._fonts.value_size,
            TextRole.SEPARATOR: self._fonts.separator_size,
            TextRole.SUMMARY_HEADER: self._fonts.summary_header_size,
            TextRole.CONTINUATION_HEADER: self._fonts.continuation_header_size,
            TextRole.SUMMARY_NAME: self._fonts.summary_name_size,
            TextRole.SUMMARY_VALUE: self._fonts.summary_value_size,
            TextRole.FOOTER: self._fonts.footer_size,
        }

    def font_size(self, role: TextRole) -> float:
        return self._sizes[role]

    def char_width(self, role: TextRole) -> float:
        """Estimated advance of one character drawn in *role*."""
        return self._value_char_width * self._sizes[role] / self._fonts.value_size

    def text_width(self, text: str, role: TextRole) -> float:
        return len(text) * self.char_width(role)


# ── Glyph coverage ───────────────────────────────────────────────────
# The standard PDF fonts lack glyphs for typographic punctuation that
# pasted or extracted answers often carry. Text is normalized before it is
# measured so the estimated width matches what is drawn.

_UNICODE_REPLACEMENTS: dict[str, str] = {
    # Dashes / hyphens
    "\u2011": "-",       # non-breaking hyphen
    "\u2010": "-",       # hyphen
    "\u2012": "-",       # figure dash
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    "\u2015": "-",       # horizontal bar
    # Spaces
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    "\u2009": " ",       # thin space
    "\u200a": " ",       # hair space
    # Quotes
    "\u2018": "'",       # left single quote
    "\u2019": "'",       # right single quote
    "\u201c": '"',       # left double quote
    "\u201d": '"',       # right double quote
    # Misc punctuation
    "\u2026": "...",     # ellipsis
    "\u2022": "*",       # bullet
}


def sanitize_text(text: str) -> str:
    """Replace characters the standard fonts cannot render."""
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text
