"""Typed contracts for player versions, events, and annotated histories."""

from __future__ import annotations

from .annotated import AnnotatedSnapshot, ChangeDescriptor
from .events import AttributeAugment, Event, Party, Recomposition
from .history import PlayerHistory, load_history
from .snapshot import (
    Equipment,
    EquipmentEffect,
    Modification,
    Report,
    Snapshot,
    slot_abbreviation,
)

__all__ = [
    "AnnotatedSnapshot",
    "AttributeAugment",
    "ChangeDescriptor",
    "Equipment",
    "EquipmentEffect",
    "Event",
    "Modification",
    "Party",
    "PlayerHistory",
    "Recomposition",
    "Report",
    "Snapshot",
    "load_history",
    "slot_abbreviation",
]
