"""Builders for synthetic templates and summaries with predictable layout."""

from __future__ import annotations

from formpress.models import FieldMapping, FormTemplate, Section


def make_template(field_count: int, *, sections: int = 1, name: str = "Test Form") -> FormTemplate:
    """Template with *sections* sections of *field_count* short single-line fields each."""
    built = []
    for s in range(sections):
        fields = tuple(
            FieldMapping(field_id=f"s{s}.field_{i}", pdf_field_name=f"FIELD {i}") for i in range(field_count)
        )
        built.append(Section(title=f"SECTION {s}", fields=fields))
    return FormTemplate(name=name, sections=tuple(built))


def make_summary(count: int) -> list[dict]:
    return [
        {"field_name": f"item_{i}", "field_value": f"value {i}", "confidence_score": 0.9} for i in range(count)
    ]
