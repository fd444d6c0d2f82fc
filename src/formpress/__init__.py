"""formpress: schema-driven layout and pagination of filled forms into PDF.

Usage::

    from formpress import DocumentAssembler, compile_template

    template = compile_template(schema, name="DS-160 Application")
    result = DocumentAssembler().generate_result(template, form_data, extracted_items)
    result.content      # PDF bytes
    result.page_count
"""

from __future__ import annotations

from formpress.core.config import AppSettings, FontConfig, LayoutConfig, PDFRenderConfig, StyleConfig
from formpress.exceptions import (
    ConfigurationError,
    DocumentGenerationError,
    FormPressError,
    PageAllocationError,
)
from formpress.layout import Cursor, Document, DrawInstruction, FontMetrics, Page, PageAllocator, PageComposer, wrap
from formpress.models import (
    ExtractedSummaryItem,
    FieldMapping,
    FieldType,
    FormTemplate,
    LayoutHint,
    Section,
    Styling,
)
from formpress.services.document_service import DocumentAssembler, GenerationResult, generate_form_pdf
from formpress.templates.compiler import compile_template

__all__ = [
    # Configuration
    "AppSettings",
    "FontConfig",
    "LayoutConfig",
    "PDFRenderConfig",
    "StyleConfig",
    # Models
    "ExtractedSummaryItem",
    "FieldMapping",
    "FieldType",
    "FormTemplate",
    "LayoutHint",
    "Section",
    "Styling",
    # Layout
    "Cursor",
    "Document",
    "DrawInstruction",
    "FontMetrics",
    "Page",
    "PageAllocator",
    "PageComposer",
    "wrap",
    # Generation
    "DocumentAssembler",
    "GenerationResult",
    "compile_template",
    "generate_form_pdf",
    # Errors
    "FormPressError",
    "ConfigurationError",
    "PageAllocationError",
    "DocumentGenerationError",
]
