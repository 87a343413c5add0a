"""Change classification for adjacent player snapshots."""

from __future__ import annotations

from .classifier import (
    NO_DETECTED_CHANGE,
    RESIDUAL_RULES,
    DifferenceSet,
    Rule,
    classify,
    display_name,
)

__all__ = [
    "NO_DETECTED_CHANGE",
    "RESIDUAL_RULES",
    "DifferenceSet",
    "Rule",
    "classify",
    "display_name",
]
