"""
Change classifier: turn a field-diff set into human-readable descriptors.

Given two snapshots, the tracked fields that differ between them and the
events recorded for the transition, :func:`classify` explains the change as
an ordered list of short strings ("Recomposed into Max Power",
"Lost greater boon", "Swapped from C to 1B", ...).

Algorithm
---------
A :class:`DifferenceSet` holds the field names still unexplained. Rules claim
names from it atomically through :meth:`DifferenceSet.consume`, the only
mutator of the set. Processing order:

1. Live-report cutover pre-pass: a one-off marker that claims ``reports``
   when the transition crosses the cutover and the reports differ.
2. Event pass: each event, in order, claims the fields it explains.
3. Residual pass: the first rule of :data:`RESIDUAL_RULES` that fires
   claims its fields; if none fires, all remaining names are drained into
   the output verbatim. Every iteration shrinks the set, so the loop ends.

Special cases: a transition without a predecessor is a single "Born as ..."
descriptor, and a retained transition that explains nothing still yields a
"No detected change" placeholder so callers never see an empty list.

The classifier is display logic: it never raises on malformed or
inconsistent input. Events are evidence, so an event naming fields that did
not change is accepted silently.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Final

from pydantic import TypeAdapter, ValidationError

from player_versions.core.contracts.annotated import ChangeDescriptor
from player_versions.core.contracts.events import AttributeAugment, Event, Party, Recomposition
from player_versions.core.contracts.snapshot import slot_abbreviation
from player_versions.core.diff.fields import MISSING, field_value, mapping_changes
from player_versions.core.settings import get_logger, load_settings

_log = get_logger(__name__)

IDENTITY_FIELDS: Final[tuple[str, ...]] = ("first_name", "last_name")
IDENTITY_COMPANIONS: Final[tuple[str, ...]] = (
    "batting_handedness",
    "pitching_handedness",
    "likes",
    "dislikes",
    "home",
    "birthseason",
    "birthday_type",
    "birthday_day",
    "birthday_superstar_day",
    "reports",
)

BORN_TEMPLATE: Final = "Born as {name}"
NO_DETECTED_CHANGE: Final = "No detected change"
REPORTS_LIVE: Final = "Reports begin updating live"

_DATETIME = TypeAdapter(datetime)
_EVENT: TypeAdapter[Any] = TypeAdapter(Event)


class DifferenceSet:
    """Ordered set of tracked field names that are still unexplained.

    Iteration follows the order the names were supplied in, which is the
    order unrecognized names are reported in by the fallback drain.
    """

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: list[str] = list(dict.fromkeys(names))

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __bool__(self) -> bool:
        return bool(self._names)

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        return f"DifferenceSet({self._names!r})"

    def consume(self, required: Sequence[str], optional: Sequence[str] = ()) -> bool:
        """Claim ``required`` (all or nothing) plus whichever ``optional`` are present.

        Returns
        -------
        bool
            ``True`` if every required name was present and the claim was
            made; ``False`` (set unchanged) otherwise. An empty ``required``
            always succeeds.
        """
        if not all(name in self._names for name in required):
            return False
        claimed = set(required) | set(optional)
        self._names = [name for name in self._names if name not in claimed]
        return True

    def drain(self) -> list[str]:
        """Claim every remaining name and return them in order."""
        remaining = list(self._names)
        self.consume((), remaining)
        return remaining


# --------------------------------------------------------------------------- #
# Snapshot access helpers (models or raw mappings)
# --------------------------------------------------------------------------- #


def _get(snapshot: Any, name: str) -> Any:
    """Field value with missing fields read as ``None``."""
    value = field_value(snapshot, name)
    return None if value is MISSING else value


def display_name(snapshot: Any) -> str:
    """``"First Last"`` for a snapshot model or mapping."""
    first = _get(snapshot, "first_name") or ""
    last = _get(snapshot, "last_name") or ""
    return f"{first} {last}".strip()


def _name_of(modifier: Any) -> str:
    if isinstance(modifier, Mapping):
        return str(modifier.get("name", "?"))
    return str(getattr(modifier, "name", "?"))


def _as_utc(value: Any) -> datetime | None:
    """Parse ``value`` into an aware datetime; ``None`` if it isn't one."""
    if value is None:
        return None
    try:
        parsed = _DATETIME.validate_python(value)
    except ValidationError:
        return None
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)


# --------------------------------------------------------------------------- #
# Residual rules
# --------------------------------------------------------------------------- #


Describe = Callable[[Any, Any], list[str]]


@dataclass(frozen=True)
class Rule:
    """A residual pattern: claims ``required`` (+ ``optional``) and describes it."""

    name: str
    required: tuple[str, ...]
    describe: Describe
    optional: tuple[str, ...] = field(default=())


def _describe_position(prev: Any, cur: Any) -> list[str]:
    old = slot_abbreviation(_get(prev, "slot"))
    new = slot_abbreviation(_get(cur, "slot"))
    return [f"Swapped from {old or 'no position'} to {new or 'no position'}"]


def _describe_inferred_recompose(prev: Any, cur: Any) -> list[str]:
    return [f"Recomposed into {display_name(cur)} (inferred)"]


def _boon_describer(kind: str) -> Describe:
    attr = f"{kind}_boon"

    def describe(prev: Any, cur: Any) -> list[str]:
        old, new = _get(prev, attr), _get(cur, attr)
        if old is None and new is not None:
            return [f"Gained {kind} boon {_name_of(new)}"]
        if old is not None and new is None:
            return [f"Lost {kind} boon"]
        if old is not None and new is not None:
            return [f"Replaced {kind} boon {_name_of(old)} with {_name_of(new)}"]
        return [f"Changed {kind} boon"]

    return describe


def _describe_reports(prev: Any, cur: Any) -> list[str]:
    old, new = _get(prev, "reports"), _get(cur, "reports")
    verbs = {"added": "generated", "changed": "changed", "removed": "deleted"}
    out = [
        f"{row.key} report {verbs[row.status]}"
        for row in mapping_changes(
            old if isinstance(old, Mapping) else None,
            new if isinstance(new, Mapping) else None,
        )
        if row.status in verbs
    ]
    return out or ["Reports changed"]


RESIDUAL_RULES: Final[tuple[Rule, ...]] = (
    Rule("position", ("slot",), _describe_position),
    Rule("identity", IDENTITY_FIELDS, _describe_inferred_recompose, IDENTITY_COMPANIONS),
    Rule("greater_boon", ("greater_boon",), _boon_describer("greater")),
    Rule("lesser_boon", ("lesser_boon",), _boon_describer("lesser")),
    Rule("modifications", ("modifications",), lambda p, c: ["Modifications changed"]),
    Rule("equipment", ("equipment",), lambda p, c: ["Equipment changed"]),
    Rule("reports", ("reports",), _describe_reports),
    Rule("team", ("mmolb_team_id",), lambda p, c: ["Team changed"]),
)


# --------------------------------------------------------------------------- #
# Passes
# --------------------------------------------------------------------------- #


def _crosses_cutover(prev: Any, cur: Any, cutover: datetime) -> bool:
    before = _as_utc(_get(prev, "valid_from"))
    after = _as_utc(_get(cur, "valid_from"))
    if before is None or after is None:
        return False
    return before < cutover <= after


def _describe_event(event: Any, prev: Any, differences: DifferenceSet) -> list[str]:
    """Claim the fields ``event`` explains and describe it."""
    if isinstance(event, Mapping):
        try:
            event = _EVENT.validate_python(event)
        except ValidationError:
            _log.debug("Ignoring malformed event %r", event)
            return []
    if isinstance(event, Recomposition):
        differences.consume((), IDENTITY_FIELDS + IDENTITY_COMPANIONS)
        if not event.reverts_prior_recomposition:
            return [f"Recomposed into {event.new_display_name}"]
        if event.new_display_name == display_name(prev):
            return ["Recomposed attributes reverted"]
        return [f"Unrecomposed back to {event.new_display_name}"]
    if isinstance(event, AttributeAugment):
        differences.consume((), ("reports",))
        return [f"Augment: {event.value:+} {event.attribute}"]
    if isinstance(event, Party):
        differences.consume((), ("reports",))
        return [f"Party: {event.value:+} {event.attribute}"]
    _log.debug("Ignoring unrecognized event %r", event)
    return []


def classify(
    prev: Any | None,
    cur: Any,
    diff: Iterable[str],
    events: Sequence[Any] | None = None,
    *,
    live_reports_cutover: datetime | None = None,
) -> ChangeDescriptor:
    """
    Explain the transition from ``prev`` to ``cur``.

    Parameters
    ----------
    prev : Snapshot | Mapping | None
        The last retained snapshot, or ``None`` if ``cur`` is the first.
    cur : Snapshot | Mapping
        The snapshot being explained.
    diff : Iterable[str]
        Differing tracked field names (see ``extract_diff``).
    events : Sequence[Event] | None
        Events for the transition; defaults to ``cur.events``.
    live_reports_cutover : datetime | None
        Overrides the configured cutover for the live-report marker.

    Returns
    -------
    ChangeDescriptor
        Never empty.
    """
    if prev is None:
        return [BORN_TEMPLATE.format(name=display_name(cur))]

    if events is None:
        events = _get(cur, "events")
    if not isinstance(events, list | tuple):
        events = []
    cutover = _as_utc(live_reports_cutover) or load_settings().live_reports_cutover

    differences = DifferenceSet(diff)
    changes: ChangeDescriptor = []

    if _crosses_cutover(prev, cur, cutover) and differences.consume(("reports",)):
        changes.append(REPORTS_LIVE)

    for event in events:
        changes.extend(_describe_event(event, prev, differences))

    while differences:
        for rule in RESIDUAL_RULES:
            if differences.consume(rule.required, rule.optional):
                _log.debug("Rule %s fired", rule.name)
                changes.extend(rule.describe(prev, cur))
                break
        else:
            remaining = differences.drain()
            _log.debug("No rule matched; reporting raw fields %s", remaining)
            changes.extend(remaining)

    if not changes:
        _log.debug("Retained transition with nothing to report")
        return [NO_DETECTED_CHANGE]
    return changes


__all__ = [
    "BORN_TEMPLATE",
    "IDENTITY_COMPANIONS",
    "IDENTITY_FIELDS",
    "NO_DETECTED_CHANGE",
    "REPORTS_LIVE",
    "RESIDUAL_RULES",
    "DifferenceSet",
    "Rule",
    "classify",
    "display_name",
]
