"""Contract tests: feed payloads validate into the expected typed shapes."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from player_versions.core.contracts.events import AttributeAugment, Party, Recomposition
from player_versions.core.contracts.history import PlayerHistory, load_history
from player_versions.core.contracts.snapshot import (
    Equipment,
    EquipmentEffect,
    display_season_day,
    slot_abbreviation,
)


def test_events_validate_by_tag(make_snapshot: Any) -> None:
    snap = make_snapshot(
        0,
        events=[
            {"type": "Recomposition", "time": "2025-06-02T00:00:00Z", "new_display_name": "Max"},
            {
                "type": "AttributeAugment",
                "time": "2025-06-02T00:00:00Z",
                "attribute": "Speed",
                "value": 2,
            },
            {"type": "Party", "attribute": "Power", "value": 1},
        ],
    )
    assert [type(e) for e in snap.events] == [Recomposition, AttributeAugment, Party]
    recomposition = snap.events[0]
    assert isinstance(recomposition, Recomposition)
    assert recomposition.reverts_prior_recomposition is False


def test_unknown_event_tag_is_rejected(make_snapshot: Any) -> None:
    with pytest.raises(ValidationError):
        make_snapshot(0, events=[{"type": "Mystery"}])


def test_snapshot_is_frozen_and_ignores_extra_keys(make_snapshot: Any) -> None:
    snap = make_snapshot(0, upstream_only_field="whatever")
    assert not hasattr(snap, "upstream_only_field")
    with pytest.raises(ValidationError):
        snap.first_name = "Max"


def test_snapshot_helpers(make_snapshot: Any) -> None:
    snap = make_snapshot(0)
    assert snap.full_name == "Sam Jones"
    assert snap.is_current


def test_slot_abbreviation() -> None:
    assert slot_abbreviation("Catcher") == "C"
    assert slot_abbreviation("ReliefPitcher3") == "RP3"
    assert slot_abbreviation(None) == ""
    assert slot_abbreviation(["x"]) == "['x']"


def test_display_season_day_variants() -> None:
    assert display_season_day(3, "RegularDay", 40, None) == ("Season 3 Day 40", False)
    assert display_season_day(3, "SuperstarDay", None, 2) == ("Season 3 Superstar Day 2", False)
    assert display_season_day(3, "RegularDay", None, None) == (
        "Season 3 Unknown regular day",
        True,
    )
    assert display_season_day(3, None, None, None) == ("Season 3 Unknown day", True)
    assert display_season_day(3, "Holiday", None, None) == ("Season 3 Holiday", False)


def test_equipment_display() -> None:
    item = Equipment(
        emoji="🧢", name="Cap", prefixes=["Sturdy", None], suffixes=["of Luck"], rarity="Rare"
    )
    assert item.display_name == "🧢 Sturdy Cap of Luck (Rare)"
    assert Equipment(emoji="🧢", name="Cap", rare_name="The Lid").display_name == "🧢 The Lid"

    flat = EquipmentEffect(attribute="Contact", effect_type="Flat", value=0.05)
    assert flat.display_value == "+5"
    assert (
        EquipmentEffect(attribute="Speed", effect_type="Additive", value=0.1).display_value
        == "+10%"
    )


def test_load_history_round_trip(tmp_path: Path, make_snapshot: Any) -> None:
    path = tmp_path / "history.json"
    payload = {
        "player_id": "p1",
        "versions": [make_snapshot(0).model_dump(mode="json")],
    }
    path.write_text(json.dumps(payload), encoding="utf-8")

    history = load_history(path)
    assert isinstance(history, PlayerHistory)
    assert history.player_id == "p1"
    assert history.versions[0].full_name == "Sam Jones"
