"""Form-schema to ``FormTemplate`` compilation."""

from __future__ import annotations

from formpress.templates.compiler import FieldConfig, compile_template

__all__ = ["FieldConfig", "compile_template"]
