"""Shared fixtures for formpress tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from formpress.core.config import AppSettings, FontConfig, LayoutConfig
from formpress.layout.composer import PageComposer
from formpress.layout.metrics import FontMetrics
from formpress.layout.pages import Document, PageAllocator
from formpress.models import Styling
from formpress.services.document_service import DocumentAssembler
from tests.fakes.fake_renderer import FakeRenderer


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def layout_config() -> LayoutConfig:
    return LayoutConfig()


@pytest.fixture
def metrics(layout_config: LayoutConfig) -> FontMetrics:
    return FontMetrics(FontConfig(), layout_config)


@pytest.fixture
def composer(layout_config: LayoutConfig, metrics: FontMetrics) -> PageComposer:
    """Composer over a fresh single-page document."""
    return PageComposer(Document(), PageAllocator(layout_config), layout_config, metrics, Styling())


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def assembler(settings: AppSettings, fake_renderer: FakeRenderer) -> DocumentAssembler:
    return DocumentAssembler(settings, renderer=fake_renderer)


@pytest.fixture
def visa_schema() -> dict:
    """Cut-down DS-160 style schema: three sections, declaration order matters."""
    return {
        "personal_information": {
            "full_name": {"type": "text", "required": True, "maxLength": 100},
            "date_of_birth": {"type": "date", "required": True},
            "gender": {"type": "select"},
        },
        "passport_details": {
            "passport_number": {"type": "text", "required": True, "maxLength": 9},
            "issuing_country": {},
        },
        "travel_plans": {
            "purpose_of_trip": {"type": "select", "required": True},
            "has_prior_visa": {"type": "checkbox"},
        },
    }


@pytest.fixture
def visa_form_data() -> dict:
    return {
        "personal_information.full_name": "Maria Garcia Rodriguez",
        "personal_information.date_of_birth": "1985-03-15",
        "personal_information.gender": "Female",
        "passport_details.passport_number": "A12345678",
        "travel_plans.purpose_of_trip": "Tourism",
        "travel_plans.has_prior_visa": False,
        "unrelated.key": "ignored",
    }


@pytest.fixture
def extracted_items() -> list[dict]:
    return [
        {"field_name": "full_name", "field_value": "Maria Garcia Rodriguez", "confidence_score": 0.97},
        {"field_name": "passport_number", "field_value": "A12345678", "confidence_score": 0.825},
    ]

