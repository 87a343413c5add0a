"""Tests for the field-diff extractor and per-element change rows."""

from __future__ import annotations

from typing import Any

from player_versions.core.contracts.snapshot import Equipment, Modification
from player_versions.core.diff.fields import (
    TRACKED_FIELDS,
    extract_diff,
    mapping_changes,
    modification_changes,
)

CAP: dict[str, Any] = {"emoji": "🧢", "name": "Cap", "effects": []}
GLOVE: dict[str, Any] = {"emoji": "🧤", "name": "Glove", "effects": []}


def test_identical_snapshots_have_no_diff(make_snapshot: Any) -> None:
    assert extract_diff(make_snapshot(0), make_snapshot(1)) == ()


def test_untracked_fields_are_ignored(make_snapshot: Any) -> None:
    prev = make_snapshot(0, durability=0.9)
    cur = make_snapshot(1, durability=0.1)
    assert extract_diff(prev, cur) == ()


def test_diff_follows_tracked_field_order(make_snapshot: Any) -> None:
    prev = make_snapshot(0)
    cur = make_snapshot(1, slot="FirstBase", first_name="Max")
    assert extract_diff(prev, cur) == ("first_name", "slot")


def test_empty_equipment_slot_equals_absent_slot(make_snapshot: Any) -> None:
    prev = make_snapshot(0, equipment={"Head": None})
    cur = make_snapshot(1, equipment={})
    assert extract_diff(prev, cur) == ()


def test_nested_values_compare_structurally(make_snapshot: Any) -> None:
    mods = [{"name": "Fast", "emoji": "💨", "description": "Runs fast"}]
    prev = make_snapshot(0, modifications=mods, equipment={"Head": CAP})
    cur = make_snapshot(1, modifications=[dict(m) for m in mods], equipment={"Head": dict(CAP)})
    assert extract_diff(prev, cur) == ()

    changed = make_snapshot(2, modifications=[], equipment={"Head": GLOVE})
    assert extract_diff(prev, changed) == ("modifications", "equipment")


def test_missing_tracked_field_always_differs(make_snapshot: Any) -> None:
    snap = make_snapshot(0)
    raw = snap.model_dump()
    del raw["home"]
    assert extract_diff(raw, snap) == ("home",)
    assert extract_diff(raw, raw) == ("home",)


def test_raw_mapping_and_model_compare_equal(make_snapshot: Any) -> None:
    snap = make_snapshot(0, equipment={"Head": CAP}, greater_boon={"name": "Giant"})
    assert extract_diff(snap.model_dump(), snap) == ()


def test_custom_field_list(make_snapshot: Any) -> None:
    prev = make_snapshot(0)
    cur = make_snapshot(1, number=8, home="Reno")
    assert extract_diff(prev, cur, fields=("number",)) == ("number",)
    assert "number" in TRACKED_FIELDS


def test_modification_changes_label_rows(make_snapshot: Any) -> None:
    a, b, c = ({"name": n} for n in ("A", "B", "C"))
    prev = make_snapshot(0, modifications=[a, b])
    cur = make_snapshot(1, modifications=[b, c])
    rows = modification_changes(prev, cur)
    assert [r.status for r in rows] == ["removed", "kept", "added"]
    assert rows[0].previous == Modification(name="A")
    assert rows[2].current == Modification(name="C")


def test_mapping_changes_sorted_by_key() -> None:
    cap, glove = Equipment(name="Cap"), Equipment(name="Glove")
    prev = {"Hands": glove, "Head": cap, "Feet": None}
    cur = {"Head": Equipment(name="Helmet"), "Body": cap, "Hands": glove}
    rows = mapping_changes(prev, cur)
    assert [(r.key, r.status) for r in rows] == [
        ("Body", "added"),
        ("Hands", "kept"),
        ("Head", "changed"),
    ]


def test_mapping_changes_reports_removal() -> None:
    rows = mapping_changes({"Head": Equipment(name="Cap")}, {"Head": None})
    assert [(r.key, r.status) for r in rows] == [("Head", "removed")]
