"""Shared fixtures: a factory for small, valid player snapshots."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from player_versions.core.contracts.snapshot import Snapshot

# Well before the default live-report cutover, so that marker stays out of
# the way unless a test asks for it.
BASE_TIME = datetime(2025, 6, 1, tzinfo=UTC)

SnapshotFactory = Callable[..., Snapshot]


def snapshot_payload(index: int = 0, **overrides: Any) -> dict[str, Any]:
    """Return a raw feed payload for version ``index`` with ``overrides`` applied."""
    payload: dict[str, Any] = {
        "id": f"v{index}",
        "valid_from": (BASE_TIME + timedelta(days=index)).isoformat(),
        "valid_until": None,
        "first_name": "Sam",
        "last_name": "Jones",
        "batting_handedness": "Right",
        "pitching_handedness": "Left",
        "home": "Tacoma",
        "birthseason": 1,
        "birthday_type": "RegularDay",
        "birthday_day": 12,
        "birthday_superstar_day": None,
        "likes": "Cats",
        "dislikes": "Rain",
        "number": 7,
        "mmolb_team_id": "team-1",
        "slot": "Catcher",
        "durability": 0.9,
        "greater_boon": None,
        "lesser_boon": None,
        "modifications": [],
        "equipment": {},
        "reports": {},
        "events": [],
    }
    payload.update(overrides)
    return payload


@pytest.fixture  # type: ignore[misc]
def make_snapshot() -> SnapshotFactory:
    """Factory fixture: ``make_snapshot(index, **overrides) -> Snapshot``."""

    def _make(index: int = 0, **overrides: Any) -> Snapshot:
        return Snapshot.model_validate(snapshot_payload(index, **overrides))

    return _make
