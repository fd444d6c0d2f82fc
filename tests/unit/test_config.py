"""Tests for layout settings defaults, env overrides and validation."""

from __future__ import annotations

import pytest

from formpress.core.config import (
    AppSettings,
    FontConfig,
    LayoutConfig,
    ObservabilityConfig,
    PDFRenderConfig,
    StyleConfig,
)
from formpress.exceptions import ConfigurationError


class TestLayoutConfigDefaults:
    def test_letter_page(self) -> None:
        cfg = LayoutConfig()
        assert (cfg.page_width, cfg.page_height) == (612.0, 792.0)

    def test_safety_margins_are_distinct(self) -> None:
        cfg = LayoutConfig()
        assert cfg.field_safety_margin == 150.0
        assert cfg.summary_safety_margin == 100.0

    def test_content_geometry(self) -> None:
        cfg = LayoutConfig()
        assert cfg.content_top == 700.0
        assert cfg.value_x == 200.0
        assert cfg.content_right == 562.0
        assert cfg.value_max_width == 300.0
        assert cfg.avg_char_width == 6.0

    def test_spacing(self) -> None:
        cfg = LayoutConfig()
        assert cfg.line_height == 15.0
        assert cfg.field_spacing == 35.0
        assert cfg.section_spacing == 30.0


class TestLayoutConfigEnvOverrides:
    def test_field_margin_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("FORMPRESS_LAYOUT_FIELD_SAFETY_MARGIN", "160")
        assert LayoutConfig().field_safety_margin == 160.0

    def test_max_pages_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("FORMPRESS_LAYOUT_MAX_PAGES", "3")
        assert LayoutConfig().max_pages == 3


class TestLayoutConfigValidation:
    def test_content_top_below_margin(self) -> None:
        with pytest.raises(ConfigurationError, match="safety margins"):
            LayoutConfig(content_top=120)

    def test_content_top_above_page(self) -> None:
        with pytest.raises(ConfigurationError, match="page_height"):
            LayoutConfig(content_top=800)

    def test_negative_footer(self) -> None:
        with pytest.raises(ConfigurationError):
            LayoutConfig(footer_y=-5)

    def test_frozen(self) -> None:
        cfg = LayoutConfig()
        with pytest.raises(Exception):
            cfg.content_top = 600  # type: ignore[misc]


class TestOtherGroups:
    def test_font_defaults(self) -> None:
        fonts = FontConfig()
        assert (fonts.title_size, fonts.section_header_size, fonts.footer_size) == (18.0, 14.0, 8.0)

    def test_style_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("FORMPRESS_STYLE_FONT_FAMILY", "Times-Roman")
        assert StyleConfig().font_family == "Times-Roman"

    def test_pdf_defaults(self) -> None:
        pdf = PDFRenderConfig()
        assert pdf.compress is False
        assert pdf.default_filename == "immigration-form.pdf"

    def test_observability_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("FORMPRESS_OBSERVABILITY_LOG_LEVEL", "DEBUG")
        assert ObservabilityConfig().log_level == "DEBUG"


class TestAppSettings:
    def test_has_all_groups(self) -> None:
        settings = AppSettings()
        assert isinstance(settings.layout, LayoutConfig)
        assert isinstance(settings.fonts, FontConfig)
        assert isinstance(settings.style, StyleConfig)
        assert isinstance(settings.pdf, PDFRenderConfig)
        assert isinstance(settings.observability, ObservabilityConfig)

    def test_sub_config_reads_env(self, monkeypatch) -> None:
        monkeypatch.setenv("FORMPRESS_LAYOUT_SUMMARY_SAFETY_MARGIN", "90")
        assert AppSettings().layout.summary_safety_margin == 90.0
