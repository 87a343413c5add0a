"""
Field-level diffing between two player snapshots.

`extract_diff` returns the tracked field names whose values differ, in the
fixed order of :data:`TRACKED_FIELDS`. Equality is structural:

- models compare by their dumped values, never by identity;
- inside mappings, a key holding ``None`` is equivalent to an absent key
  (an empty equipment slot and a missing one are the same thing);
- list positions are significant, so ``None`` entries in lists are kept.

Snapshots may be validated :class:`Snapshot` models or raw feed mappings.
A tracked field missing from either side is reported as differing.

The module also builds per-element change rows for list and mapping fields
(modifiers, equipment, reports), which the classifier and the detail view
use to tell additions, removals and unchanged members apart.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, Literal

from pydantic import BaseModel

from player_versions.core.contracts.snapshot import Snapshot

from .align import align_indices, union_keys

TRACKED_FIELDS: Final[tuple[str, ...]] = (
    "first_name",
    "last_name",
    "batting_handedness",
    "pitching_handedness",
    "home",
    "birthseason",
    "birthday_type",
    "birthday_day",
    "birthday_superstar_day",
    "likes",
    "dislikes",
    "number",
    "mmolb_team_id",
    "slot",
    "greater_boon",
    "lesser_boon",
    "modifications",
    "equipment",
    "reports",
)

ChangeStatus = Literal["kept", "added", "removed", "changed"]


class _Missing:
    """Marker for a tracked field that a snapshot does not carry at all."""

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        return "<missing>"


MISSING: Final = _Missing()


@dataclass(frozen=True, slots=True)
class ElementChange:
    """One row of a per-element comparison of a list or mapping field.

    Attributes
    ----------
    status : ChangeStatus
        ``kept`` and ``changed`` have both sides; ``added`` has only
        ``current``; ``removed`` has only ``previous``.
    previous, current : Any
        The element on each side (``None`` when absent).
    key : str | None
        Mapping key (equipment slot, report category); ``None`` for lists.
    """

    status: ChangeStatus
    previous: Any = None
    current: Any = None
    key: str | None = None


def field_value(snapshot: Any, name: str) -> Any:
    """Return ``snapshot``'s value for ``name``, or :data:`MISSING`."""
    if isinstance(snapshot, Mapping):
        return snapshot.get(name, MISSING)
    return getattr(snapshot, name, MISSING)


def comparable(value: Any) -> Any:
    """Return a plain-data form of ``value`` suitable for ``==``.

    Models are dumped to JSON-compatible data and ``None``-valued mapping
    entries are dropped, recursively.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    if isinstance(value, Mapping):
        return {str(k): comparable(v) for k, v in value.items() if v is not None}
    if isinstance(value, list | tuple):
        return [comparable(v) for v in value]
    return value


def values_equal(a: Any, b: Any) -> bool:
    """Structural equality; a missing value never equals anything."""
    if a is MISSING or b is MISSING:
        return False
    return bool(comparable(a) == comparable(b))


def extract_diff(
    prev: Snapshot | Mapping[str, Any],
    cur: Snapshot | Mapping[str, Any],
    fields: Sequence[str] = TRACKED_FIELDS,
) -> tuple[str, ...]:
    """Return the names in ``fields`` whose values differ between two snapshots."""
    return tuple(
        name
        for name in fields
        if not values_equal(field_value(prev, name), field_value(cur, name))
    )


def list_changes(previous: Sequence[Any], current: Sequence[Any]) -> list[ElementChange]:
    """Align two lists and label each row ``kept``, ``added`` or ``removed``."""
    prev_cmp = [comparable(v) for v in previous]
    cur_cmp = [comparable(v) for v in current]
    rows: list[ElementChange] = []
    for i, j in align_indices(prev_cmp, cur_cmp):
        if i is not None and j is not None:
            rows.append(ElementChange("kept", previous[i], current[j]))
        elif i is not None:
            rows.append(ElementChange("removed", previous=previous[i]))
        elif j is not None:
            rows.append(ElementChange("added", current=current[j]))
    return rows


def mapping_changes(
    previous: Mapping[str, Any] | None, current: Mapping[str, Any] | None
) -> list[ElementChange]:
    """Compare two mappings key by key, in sorted key order.

    Keys whose value is ``None`` count as absent, so an emptied equipment
    slot shows up as ``removed``.
    """
    prev_present = {k: v for k, v in (previous or {}).items() if v is not None}
    cur_present = {k: v for k, v in (current or {}).items() if v is not None}
    rows: list[ElementChange] = []
    for key in union_keys(prev_present, cur_present):
        old, new = prev_present.get(key), cur_present.get(key)
        if old is None:
            rows.append(ElementChange("added", current=new, key=key))
        elif new is None:
            rows.append(ElementChange("removed", previous=old, key=key))
        elif values_equal(old, new):
            rows.append(ElementChange("kept", old, new, key=key))
        else:
            rows.append(ElementChange("changed", old, new, key=key))
    return rows


def modification_changes(prev: Any, cur: Any) -> list[ElementChange]:
    """Per-modifier rows between two snapshots."""
    return list_changes(
        _as_list(field_value(prev, "modifications")),
        _as_list(field_value(cur, "modifications")),
    )


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list | tuple) else []


__all__ = [
    "MISSING",
    "TRACKED_FIELDS",
    "ChangeStatus",
    "ElementChange",
    "comparable",
    "extract_diff",
    "field_value",
    "list_changes",
    "mapping_changes",
    "modification_changes",
    "values_equal",
]
