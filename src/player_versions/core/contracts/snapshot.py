"""Snapshot contracts: one time-bounded version of a player record.

This module defines the Pydantic v2 models for a player version as delivered
by the upstream version feed, plus its nested value types:

- `Modification`   : a named modifier (also used for greater/lesser boons).
- `EquipmentEffect`: one attribute bonus granted by a piece of equipment.
- `Equipment`      : an item occupying an equipment slot.
- `Report`         : a clubhouse report for one category.
- `Snapshot`       : the version itself, valid over `[valid_from, valid_until)`.

Notes
-----
- Models are frozen. A snapshot is never mutated after it is validated.
- Unknown keys from the feed are ignored so upstream additions don't break us.
- A `None` enum value means "unrecognized by the feed", not "missing".
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .events import Event

Handedness = Literal["Right", "Left", "Switch"]
DayType = Literal[
    "Preseason",
    "RegularDay",
    "SuperstarBreak",
    "SuperstarGame",
    "SuperstarDay",
    "PostseasonPreview",
    "PostseasonRound1",
    "PostseasonRound2",
    "PostseasonRound3",
    "Election",
    "Holiday",
    "Event",
    "SpecialEvent",
]
Slot = Literal[
    "Catcher",
    "FirstBase",
    "SecondBase",
    "ThirdBase",
    "Shortstop",
    "LeftField",
    "CenterField",
    "RightField",
    "DesignatedHitter",
    "StartingPitcher1",
    "StartingPitcher2",
    "StartingPitcher3",
    "StartingPitcher4",
    "StartingPitcher5",
    "ReliefPitcher1",
    "ReliefPitcher2",
    "ReliefPitcher3",
    "Closer",
    "StartingPitcher",
    "ReliefPitcher",
    "Pitcher",
]
EffectType = Literal["Flat", "Additive", "Multiplicative"]

SLOT_ABBREVIATIONS: dict[str, str] = {
    "Catcher": "C",
    "FirstBase": "1B",
    "SecondBase": "2B",
    "ThirdBase": "3B",
    "Shortstop": "SS",
    "LeftField": "LF",
    "CenterField": "CF",
    "RightField": "RF",
    "DesignatedHitter": "DH",
    "StartingPitcher1": "SP1",
    "StartingPitcher2": "SP2",
    "StartingPitcher3": "SP3",
    "StartingPitcher4": "SP4",
    "StartingPitcher5": "SP5",
    "ReliefPitcher1": "RP1",
    "ReliefPitcher2": "RP2",
    "ReliefPitcher3": "RP3",
    "Closer": "CL",
    "StartingPitcher": "SP",
    "ReliefPitcher": "RP",
    "Pitcher": "P",
}


def slot_abbreviation(slot: Any) -> str:
    """Return the short position code for ``slot`` (``""`` when unassigned)."""
    if slot is None:
        return ""
    if not isinstance(slot, str):
        return str(slot)
    return SLOT_ABBREVIATIONS.get(slot, slot)


class _FeedModel(BaseModel):
    """Shared config for every feed-facing model."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Modification(_FeedModel):
    """A named modifier attached to a player (also the shape of a boon)."""

    name: str
    emoji: str = ""
    description: str = ""


class EquipmentEffect(_FeedModel):
    """One attribute bonus granted by a piece of equipment."""

    attribute: str
    effect_type: EffectType
    value: float

    @property
    def display_value(self) -> str:
        """Human-readable bonus, e.g. ``+5``, ``+5%`` or ``x105%``."""
        scaled = f"{self.value * 100:g}"
        if self.effect_type == "Flat":
            return f"+{scaled}"
        if self.effect_type == "Additive":
            return f"+{scaled}%"
        return f"x{scaled}%"


class Equipment(_FeedModel):
    """An item occupying one equipment slot."""

    emoji: str = ""
    name: str
    special_type: str | None = None
    description: str | None = None
    rare_name: str | None = None
    cost: int | None = None
    prefixes: list[str | None] = Field(default_factory=list)
    suffixes: list[str | None] = Field(default_factory=list)
    rarity: str | None = None
    effects: list[EquipmentEffect | None] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        """Full item name including affixes and rarity."""
        rarity = f" ({self.rarity})" if self.rarity else ""
        if self.rare_name:
            return f"{self.emoji} {self.rare_name}{rarity}".strip()
        words = [p for p in self.prefixes if p] + [self.name] + [s for s in self.suffixes if s]
        return f"{self.emoji} {' '.join(words)}{rarity}".strip()


class Report(_FeedModel):
    """A clubhouse report for one category (batting, pitching, ...)."""

    season: int | None = None
    day_type: DayType | None = None
    day: int | None = None
    superstar_day: int | None = None
    quote: str = ""
    stars: dict[str, float] = Field(default_factory=dict)


class Snapshot(_FeedModel):
    """One version of a player record, valid over ``[valid_from, valid_until)``.

    ``valid_until is None`` means the version is the current one. ``events``
    lists what happened during the transition *into* this version.
    """

    id: str
    valid_from: datetime
    valid_until: datetime | None = None

    first_name: str
    last_name: str
    batting_handedness: Handedness | None = None
    pitching_handedness: Handedness | None = None
    home: str = ""
    birthseason: int = 0
    birthday_type: DayType | None = None
    birthday_day: int | None = None
    birthday_superstar_day: int | None = None
    likes: str = ""
    dislikes: str = ""
    number: int = 0
    mmolb_team_id: str | None = None
    slot: Slot | None = None
    durability: float | None = None

    greater_boon: Modification | None = None
    lesser_boon: Modification | None = None
    modifications: list[Modification | None] = Field(default_factory=list)
    equipment: dict[str, Equipment | None] = Field(default_factory=dict)
    reports: dict[str, Report | None] = Field(default_factory=dict)

    events: list[Event] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"

    @property
    def is_current(self) -> bool:
        """Return True if this version has not been superseded."""
        return self.valid_until is None


def display_day(
    day_type: str | None, day: int | None, superstar_day: int | None
) -> tuple[str, bool]:
    """Return ``(text, is_error)`` for a birthday descriptor."""
    if day_type is None:
        return "Unknown day", True
    if day_type == "RegularDay":
        if day is None:
            return "Unknown regular day", True
        return f"Day {day}", False
    if day_type == "SuperstarDay":
        if superstar_day is None:
            return "Unknown superstar day", True
        return f"Superstar Day {superstar_day}", False
    return day_type, False


def display_season_day(
    season: int, day_type: str | None, day: int | None, superstar_day: int | None
) -> tuple[str, bool]:
    """Like :func:`display_day`, prefixed with the season number."""
    text, is_error = display_day(day_type, day, superstar_day)
    return f"Season {season} {text}", is_error


__all__ = [
    "DayType",
    "EffectType",
    "Equipment",
    "EquipmentEffect",
    "Handedness",
    "Modification",
    "Report",
    "SLOT_ABBREVIATIONS",
    "Slot",
    "Snapshot",
    "display_day",
    "display_season_day",
    "slot_abbreviation",
]
