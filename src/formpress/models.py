"""Pydantic data models for formpress.

Template records are frozen once built: a ``FormTemplate`` is compiled once
per generation request and shared read-only by every layout step.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ── Enums ────────────────────────────────────────────────────────────


class FieldType(str, Enum):
    """Input widget kind declared by the form schema."""

    TEXT = "text"
    CHECKBOX = "checkbox"
    DATE = "date"
    SELECT = "select"


class LayoutHint(str, Enum):
    """Declared column layout of a section.

    Only ``SINGLE`` is composed; the multi-column hints are accepted and
    rendered as a single column.
    """

    SINGLE = "single"
    TWO_COLUMN = "two-column"
    THREE_COLUMN = "three-column"


# ── Template models ──────────────────────────────────────────────────


class Styling(BaseModel):
    """Fonts and colors shared by reference across one generation call."""

    model_config = ConfigDict(frozen=True)

    font_size: float = 12.0
    font_family: str = "Helvetica"
    primary_color: str = "#000000"
    secondary_color: str = "#808080"


class FieldMapping(BaseModel):
    """Schema-level description of one answer slot."""

    model_config = ConfigDict(frozen=True)

    field_id: str
    pdf_field_name: str
    field_type: FieldType = FieldType.TEXT
    required: bool = False
    max_length: Optional[int] = Field(default=None, ge=0)
    validation: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.pdf_field_name


class Section(BaseModel):
    """An ordered, titled group of field mappings."""

    model_config = ConfigDict(frozen=True)

    title: str
    fields: tuple[FieldMapping, ...] = ()
    layout: LayoutHint = LayoutHint.SINGLE


class FormTemplate(BaseModel):
    """Normalized, immutable form template.

    ``styling`` left as ``None`` renders with the assembler's configured default.
    """

    model_config = ConfigDict(frozen=True)

    id: str = "generated-template"
    name: str = "Immigration Form"
    sections: tuple[Section, ...] = ()
    styling: Optional[Styling] = None

    @property
    def fields(self) -> list[FieldMapping]:
        """All field mappings flattened in section order."""
        return [f for section in self.sections for f in section.fields]


# ── Extraction summary ───────────────────────────────────────────────


class ExtractedSummaryItem(BaseModel):
    """One externally extracted value annotated with its confidence."""

    model_config = ConfigDict(frozen=True)

    field_name: str
    field_value: str = ""
    confidence_score: float = Field(ge=0.0, le=1.0)

    @field_validator("field_value", mode="before")
    @classmethod
    def _stringify_value(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @property
    def confidence_percent(self) -> int:
        """Confidence as a whole percentage, rounding halves up."""
        return int(self.confidence_score * 100 + 0.5)
