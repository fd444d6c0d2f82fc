"""Nested pydantic-settings configuration for the layout engine.

Each group reads its own ``FORMPRESS_<GROUP>_*`` env vars::

    export FORMPRESS_LAYOUT_FIELD_SAFETY_MARGIN=160
    export FORMPRESS_STYLE_FONT_FAMILY=Times-Roman
    export FORMPRESS_OBSERVABILITY_LOG_LEVEL=DEBUG

All values are layout units (PDF points, 72 per inch) unless noted.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from formpress.exceptions import ConfigurationError


class LayoutConfig(BaseSettings):
    """Page geometry, spacing and page-break thresholds.

    The two safety margins are intentionally independent: field rows
    reserve more room at the page bottom than the shorter summary rows.

    Env vars use ``FORMPRESS_LAYOUT_`` prefix.
    """

    model_config = {"env_prefix": "FORMPRESS_LAYOUT_", "frozen": True}

    page_width: float = 612.0
    page_height: float = 792.0
    max_pages: int = Field(default=500, ge=1)

    title_offset: float = 50.0
    content_top: float = 700.0
    left_margin: float = 50.0
    right_margin: float = 50.0
    value_indent: float = 150.0
    value_max_width: float = Field(default=300.0, gt=0.0)
    label_max_width: float = Field(default=140.0, gt=0.0)
    avg_char_width: float = Field(default=6.0, gt=0.0)

    line_height: float = Field(default=15.0, gt=0.0)
    field_tail: float = 5.0
    field_spacing: float = 35.0
    section_header_advance: float = 25.0
    section_spacing: float = 30.0

    field_safety_margin: float = Field(default=150.0, ge=0.0)
    summary_safety_margin: float = Field(default=100.0, ge=0.0)

    summary_separator_width: int = Field(default=80, ge=0)
    summary_header_gap: float = 10.0
    summary_header_advance: float = 25.0
    continuation_header_advance: float = 20.0
    summary_name_x: float = 70.0
    summary_value_x: float = 90.0
    summary_name_advance: float = 15.0
    summary_item_spacing: float = 20.0

    footer_y: float = 50.0

    @model_validator(mode="after")
    def _check_geometry(self) -> LayoutConfig:
        highest_margin = max(self.field_safety_margin, self.summary_safety_margin)
        if self.content_top <= highest_margin:
            raise ConfigurationError(
                f"content_top ({self.content_top}) must be above both safety margins "
                f"({self.field_safety_margin}, {self.summary_safety_margin})"
            )
        if self.content_top >= self.page_height:
            raise ConfigurationError(
                f"content_top ({self.content_top}) must be below page_height ({self.page_height})"
            )
        if self.footer_y < 0:
            raise ConfigurationError("footer_y must not be negative")
        return self

    @property
    def value_x(self) -> float:
        return self.left_margin + self.value_indent

    @property
    def content_right(self) -> float:
        return self.page_width - self.right_margin


class FontConfig(BaseSettings):
    """Fixed font sizes per text role.

    Env vars use ``FORMPRESS_FONT_`` prefix.
    """

    model_config = {"env_prefix": "FORMPRESS_FONT_", "frozen": True}

    title_size: float = 18.0
    section_header_size: float = 14.0
    summary_header_size: float = 14.0
    continuation_header_size: float = 12.0
    separator_size: float = 12.0
    label_size: float = 10.0
    value_size: float = 11.0
    summary_name_size: float = 10.0
    summary_value_size: float = 9.0
    footer_size: float = 8.0


class StyleConfig(BaseSettings):
    """Default document styling.

    Env vars use ``FORMPRESS_STYLE_`` prefix.
    """

    model_config = {"env_prefix": "FORMPRESS_STYLE_", "frozen": True}

    font_size: float = Field(default=12.0, ge=4.0, le=72.0)
    font_family: str = "Helvetica"
    primary_color: str = "#000000"
    secondary_color: str = "#808080"


class PDFRenderConfig(BaseSettings):
    """PDF serialization options.

    Env vars use ``FORMPRESS_PDF_`` prefix::

        export FORMPRESS_PDF_COMPRESS=true
    """

    model_config = {"env_prefix": "FORMPRESS_PDF_", "frozen": True}

    compress: bool = False
    author: str = ""
    default_filename: str = "immigration-form.pdf"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``FORMPRESS_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "FORMPRESS_OBSERVABILITY_"}

    log_level: str = "INFO"
    log_format: Literal["auto", "console", "json"] = "auto"


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs.

    Each sub-config reads its own ``FORMPRESS_<GROUP>_*`` env vars.
    """

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    fonts: FontConfig = Field(default_factory=FontConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)
    pdf: PDFRenderConfig = Field(default_factory=PDFRenderConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
