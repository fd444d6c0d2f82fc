"""Compile a loosely-typed form schema into a ``FormTemplate``.

The schema is a two-level mapping, section name -> field name -> field
config::

    {
        "personal": {
            "full_name": {"type": "text", "required": True, "maxLength": 80},
            "gender": {"type": "select"},
        },
        "travel": {...},
    }

Compilation is best-effort presentation, not validation: values that are
not mappings are skipped, and config members that fail to parse fall back
to their defaults. Declaration order of sections and fields is preserved.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from formpress.core.types import RawSchema
from formpress.models import FieldMapping, FieldType, FormTemplate, LayoutHint, Section, Styling

log = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ID = "generated-template"
DEFAULT_TEMPLATE_NAME = "Immigration Form"
_MAX_LENGTH_KEYS = {"maxLength", "max_length"}


class FieldConfig(BaseModel):
    """Typed view of one field's schema entry. Unknown members are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: FieldType = FieldType.TEXT
    required: bool = False
    max_length: Optional[int] = Field(default=None, ge=0, alias="maxLength")
    validation: Optional[str] = None


def _label(key: str) -> str:
    return key.replace("_", " ").upper()


def parse_field_config(raw: Mapping[str, Any]) -> FieldConfig:
    """Parse *raw*, replacing members that fail validation with defaults."""
    data = {str(k): v for k, v in raw.items()}
    try:
        return FieldConfig.model_validate(data)
    except ValidationError as exc:
        invalid = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        if invalid & _MAX_LENGTH_KEYS:
            invalid |= _MAX_LENGTH_KEYS
        log.debug("Coercing field config, dropping invalid members %s", sorted(invalid))
        return FieldConfig.model_validate({k: v for k, v in data.items() if k not in invalid})


def _compile_section(section_key: str, fields: Mapping[str, Any]) -> Section:
    mappings: list[FieldMapping] = []
    for field_key, raw_config in fields.items():
        field_key = str(field_key)
        if not isinstance(raw_config, Mapping):
            log.debug("Skipping field %s.%s: config is %s", section_key, field_key, type(raw_config).__name__)
            continue
        config = parse_field_config(raw_config)
        mappings.append(
            FieldMapping(
                field_id=f"{section_key}.{field_key}",
                pdf_field_name=_label(field_key),
                field_type=config.type,
                required=config.required,
                max_length=config.max_length,
                validation=config.validation,
            )
        )
    return Section(title=_label(section_key), fields=tuple(mappings), layout=LayoutHint.SINGLE)


def compile_template(
    schema: Optional[RawSchema],
    *,
    name: Optional[str] = None,
    template_id: Optional[str] = None,
    styling: Optional[Styling] = None,
) -> FormTemplate:
    """Build a ``FormTemplate`` from *schema*. Never raises on malformed input."""
    sections: list[Section] = []
    if isinstance(schema, Mapping):
        for section_key, fields in schema.items():
            section_key = str(section_key)
            if not isinstance(fields, Mapping):
                log.debug("Skipping section %s: value is %s", section_key, type(fields).__name__)
                continue
            sections.append(_compile_section(section_key, fields))
    elif schema is not None:
        log.debug("Schema is %s, not a mapping; compiling empty template", type(schema).__name__)

    template = FormTemplate(
        id=template_id or DEFAULT_TEMPLATE_ID,
        name=name or DEFAULT_TEMPLATE_NAME,
        sections=tuple(sections),
        styling=styling,
    )
    log.info(
        "Compiled template %s: %d sections, %d fields",
        template.id,
        len(template.sections),
        len(template.fields),
    )
    return template
