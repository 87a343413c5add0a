"""Diffing primitives: sequence alignment and tracked-field comparison."""

from __future__ import annotations

from .align import align, align_indices, union_keys
from .fields import (
    TRACKED_FIELDS,
    ElementChange,
    extract_diff,
    list_changes,
    mapping_changes,
    modification_changes,
)

__all__ = [
    "TRACKED_FIELDS",
    "ElementChange",
    "align",
    "align_indices",
    "extract_diff",
    "list_changes",
    "mapping_changes",
    "modification_changes",
    "union_keys",
]
