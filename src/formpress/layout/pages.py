"""In-memory document model and the page allocator.

A ``Document`` is an arena of pages addressed by index. Nothing outside
the allocator appends pages, and nothing holds a page reference across a
page break; the composer always resolves its target page through the
cursor's index.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from formpress.core.config import LayoutConfig
from formpress.exceptions import PageAllocationError
from formpress.layout.metrics import TextRole

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawInstruction:
    """One line of text at an absolute position (PDF coordinates, y up)."""

    text: str
    x: float
    y: float
    font_size: float
    color: str
    role: TextRole


@dataclass
class Page:
    """A fixed-size page holding draw instructions in emission order."""

    index: int
    width: float
    height: float
    instructions: list[DrawInstruction] = field(default_factory=list)

    def draw(self, instruction: DrawInstruction) -> None:
        self.instructions.append(instruction)

    def texts(self) -> list[str]:
        return [ins.text for ins in self.instructions]


@dataclass
class Document:
    """Ordered sequence of pages under construction."""

    title: str = ""
    font_family: str = "Helvetica"
    pages: list[Page] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page(self, index: int) -> Page:
        return self.pages[index]

    def iter_instructions(self) -> Iterator[tuple[int, DrawInstruction]]:
        """Yield ``(page_index, instruction)`` in reading order."""
        for page in self.pages:
            for ins in page.instructions:
                yield page.index, ins

    def texts(self) -> list[str]:
        return [ins.text for _, ins in self.iter_instructions()]


class PageAllocator:
    """Creates letter-size pages and appends them to a document."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self._config = config or LayoutConfig()

    def new_page(self, document: Document) -> Page:
        """Append a fresh page to *document* and return it.

        Raises:
            PageAllocationError: the page ceiling is reached or memory is
                exhausted. The document is left without the new page.
        """
        if len(document.pages) >= self._config.max_pages:
            raise PageAllocationError(
                f"document exceeds the {self._config.max_pages}-page limit"
            )
        try:
            page = Page(
                index=len(document.pages),
                width=self._config.page_width,
                height=self._config.page_height,
            )
            document.pages.append(page)
        except MemoryError as exc:
            raise PageAllocationError("out of memory allocating a page") from exc
        log.debug("Allocated page %d", page.index + 1)
        return page
