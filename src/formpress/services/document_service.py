"""Document assembly: one synchronous call from template + answers to bytes."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union

from formpress.core.config import AppSettings
from formpress.core.types import FieldValue, FormData
from formpress.exceptions import DocumentGenerationError, FormPressError
from formpress.formatters.protocols import IDocumentRenderer
from formpress.layout.composer import PageComposer
from formpress.layout.metrics import FontMetrics
from formpress.layout.pages import Document, PageAllocator
from formpress.models import ExtractedSummaryItem, FormTemplate, LayoutHint, Styling

log = logging.getLogger(__name__)

SummaryInput = Optional[Iterable[Union[ExtractedSummaryItem, Mapping[str, Any]]]]


@dataclass(frozen=True)
class GenerationResult:
    """Rendered document plus what an HTTP responder needs to serve it."""

    content: bytes
    page_count: int
    content_type: str
    filename: str


def format_value(value: FieldValue) -> str:
    """Coerce a raw answer to display text; missing answers render empty."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def default_styling(settings: AppSettings) -> Styling:
    return Styling(**settings.style.model_dump())


def _normalize_summary(summary: SummaryInput) -> list[ExtractedSummaryItem]:
    if not summary:
        return []
    return [
        item if isinstance(item, ExtractedSummaryItem) else ExtractedSummaryItem.model_validate(item)
        for item in summary
    ]


class DocumentAssembler:
    """Builds a paginated document from a template, answers and an optional summary.

    Holds only immutable settings; every call builds its own document,
    composer and cursor, so one assembler can serve concurrent callers.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        renderer: Optional[IDocumentRenderer] = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._renderer = renderer
        self._metrics = FontMetrics(self._settings.fonts, self._settings.layout)
        self._default_styling = default_styling(self._settings)

    @property
    def renderer(self) -> IDocumentRenderer:
        if self._renderer is None:
            from formpress.formatters.pdf_renderer import PDFRenderer

            self._renderer = PDFRenderer(self._settings.pdf)
        return self._renderer

    # ── Layout ───────────────────────────────────────────────────────

    def compose(
        self,
        template: FormTemplate,
        form_data: FormData,
        summary: SummaryInput = None,
        *,
        generated_at: Optional[datetime] = None,
        styling: Optional[Styling] = None,
    ) -> Document:
        """Lay out the full document without serializing it.

        *styling* overrides the template's own styling for this call only;
        with neither set, the ``FORMPRESS_STYLE_*`` defaults apply.

        Raises:
            pydantic.ValidationError: a summary mapping is malformed.
            PageAllocationError: the layout needed more pages than allowed.
        """
        items = _normalize_summary(summary)
        styling = styling or template.styling or self._default_styling
        document = Document(title=template.name, font_family=styling.font_family)
        allocator = PageAllocator(self._settings.layout)
        composer = PageComposer(document, allocator, self._settings.layout, self._metrics, styling)

        composer.place_title(template.name)
        for section in template.sections:
            if section.layout is not LayoutHint.SINGLE:
                log.debug("Section %r requests %s layout; composing single column", section.title, section.layout.value)
            composer.place_section_header(section.title)
            for mapping in section.fields:
                composer.place_field(mapping, format_value(form_data.get(mapping.field_id)))
            composer.end_section()

        if items:
            composer.begin_summary()
            for item in items:
                composer.place_summary_item(item)

        stamp = (generated_at or datetime.now()).strftime(self._settings.pdf.timestamp_format)
        composer.place_footer(stamp)
        log.info(
            "Composed %r: %d sections, %d summary items, %d pages",
            template.name,
            len(template.sections),
            len(items),
            document.page_count,
        )
        return document

    # ── Generation ───────────────────────────────────────────────────

    def generate(
        self,
        template: FormTemplate,
        form_data: FormData,
        summary: SummaryInput = None,
        *,
        generated_at: Optional[datetime] = None,
        styling: Optional[Styling] = None,
    ) -> bytes:
        """Compose and serialize; returns the rendered bytes."""
        return self.generate_result(
            template, form_data, summary, generated_at=generated_at, styling=styling
        ).content

    def generate_result(
        self,
        template: FormTemplate,
        form_data: FormData,
        summary: SummaryInput = None,
        *,
        generated_at: Optional[datetime] = None,
        filename: Optional[str] = None,
        styling: Optional[Styling] = None,
    ) -> GenerationResult:
        """Compose, serialize and bundle the bytes with page count and filename.

        Raises:
            pydantic.ValidationError: a summary mapping is malformed
                (confidence outside [0, 1], missing name); not wrapped.
            PageAllocationError: the layout needed more pages than allowed.
            DocumentGenerationError: serialization failed; the cause is
                logged and chained but not part of the message.
        """
        document = self.compose(template, form_data, summary, generated_at=generated_at, styling=styling)
        renderer = self.renderer
        try:
            content = renderer.render(document)
        except FormPressError:
            raise
        except Exception as exc:
            log.exception("Rendering %r failed", template.name)
            raise DocumentGenerationError() from exc
        return GenerationResult(
            content=content,
            page_count=document.page_count,
            content_type=renderer.content_type,
            filename=filename or self._settings.pdf.default_filename,
        )


def generate_form_pdf(
    form_data: FormData,
    template: FormTemplate,
    extracted_data_summary: SummaryInput = None,
    *,
    settings: Optional[AppSettings] = None,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Render *template* filled with *form_data* to PDF bytes."""
    return DocumentAssembler(settings).generate(
        template, form_data, extracted_data_summary, generated_at=generated_at
    )
