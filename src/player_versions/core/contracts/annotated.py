"""Annotated history contracts produced for the presentation layer.

- `ChangeDescriptor` : ordered, human-readable change strings for one
  transition. Order follows the classifier's rule order, not causality.
- `AnnotatedSnapshot`: a retained snapshot, a back-reference to the last
  retained snapshot before it, the differing tracked fields, and the
  descriptor explaining them, stored as a tuple so the record is read-only
  all the way down.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .snapshot import Snapshot

ChangeDescriptor = list[str]


class AnnotatedSnapshot(BaseModel):
    """A retained snapshot with its explanation.

    ``previous`` and ``differences`` are both ``None`` for the first snapshot
    of a history (the player was born). Instances are read-only.
    """

    model_config = ConfigDict(frozen=True)

    snapshot: Snapshot
    previous: Snapshot | None = None
    differences: tuple[str, ...] | None = None
    changes: tuple[str, ...] = ()

    @property
    def is_born(self) -> bool:
        """Return True for the first snapshot of a history."""
        return self.previous is None

    def changed(self, field: str) -> bool:
        """Return True if ``field`` differs from the previous retained snapshot."""
        return self.differences is not None and field in self.differences

    @property
    def label(self) -> str:
        """Comma-joined descriptor, as shown in a version list."""
        return ", ".join(self.changes)


__all__ = ["AnnotatedSnapshot", "ChangeDescriptor"]
