"""Shared type aliases for the layout engine."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

# Raw answer value supplied by the form-submission store
FieldValue = Union[str, bool, int, float, None]

# fieldId -> answer
FormData = Mapping[str, FieldValue]

# Loosely-typed two-level schema: section -> field -> field config
RawSchema = Mapping[str, Any]
