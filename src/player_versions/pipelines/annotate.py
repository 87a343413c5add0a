"""
History annotator: label every distinct version of a player.

Walks an ordered snapshot history once and produces one
:class:`AnnotatedSnapshot` per *retained* snapshot:

- the first snapshot is always retained, with no predecessor ("Born");
- every later snapshot is diffed against the last retained snapshot, not
  the raw previous one;
- snapshots with no tracked-field difference are dropped entirely, so
  "previous" always means "last observed distinct state".

The function is pure and idempotent: the input is never mutated and the
same history always yields an equal annotation list.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from player_versions.core.classify.classifier import classify
from player_versions.core.contracts.annotated import AnnotatedSnapshot
from player_versions.core.contracts.history import PlayerHistory
from player_versions.core.contracts.snapshot import Snapshot
from player_versions.core.diff.fields import TRACKED_FIELDS, extract_diff
from player_versions.core.settings import get_logger

_log = get_logger(__name__)


def annotate(
    history: PlayerHistory | Sequence[Snapshot | Mapping[str, Any]],
    *,
    fields: Sequence[str] = TRACKED_FIELDS,
    live_reports_cutover: datetime | None = None,
) -> list[AnnotatedSnapshot]:
    """
    Annotate a version history, compacting versions with no visible change.

    Parameters
    ----------
    history : PlayerHistory | Sequence[Snapshot | Mapping]
        Versions ordered by ``valid_from`` (gap-free; assumed, not checked).
        Raw feed mappings are validated into :class:`Snapshot` first; an
        invalid payload raises ``pydantic.ValidationError``.
    fields : Sequence[str]
        Tracked field names to compare.
    live_reports_cutover : datetime | None
        Forwarded to :func:`classify`.

    Returns
    -------
    list[AnnotatedSnapshot]
        At most one entry per input snapshot, in input order.
    """
    raw = history.versions if isinstance(history, PlayerHistory) else history
    versions = [Snapshot.model_validate(v) if isinstance(v, Mapping) else v for v in raw]
    out: list[AnnotatedSnapshot] = []

    for snapshot in versions:
        if not out:
            out.append(
                AnnotatedSnapshot(
                    snapshot=snapshot,
                    changes=classify(None, snapshot, (), snapshot.events),
                )
            )
            continue

        previous = out[-1].snapshot
        differences = extract_diff(previous, snapshot, fields)
        if not differences:
            continue

        out.append(
            AnnotatedSnapshot(
                snapshot=snapshot,
                previous=previous,
                differences=differences,
                changes=classify(
                    previous,
                    snapshot,
                    differences,
                    snapshot.events,
                    live_reports_cutover=live_reports_cutover,
                ),
            )
        )

    _log.debug("Annotated %d of %d versions", len(out), len(versions))
    return out


__all__ = ["annotate"]
