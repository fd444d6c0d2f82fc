"""Document generation services."""

from __future__ import annotations

from formpress.services.document_service import (
    DocumentAssembler,
    GenerationResult,
    format_value,
    generate_form_pdf,
)

__all__ = ["DocumentAssembler", "GenerationResult", "format_value", "generate_form_pdf"]
