"""PlayerHistory: the version feed envelope for one player.

The upstream feed returns ``{"player_id": ..., "versions": [...]}`` with
versions ordered by ``valid_from``. Fetching it is someone else's job; this
module only validates an already-fetched payload.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .snapshot import Snapshot


class PlayerHistory(BaseModel):
    """All known versions of one player, oldest first."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    player_id: str
    versions: list[Snapshot] = Field(default_factory=list)


def load_history(path: Path) -> PlayerHistory:
    """Read and validate a version-history JSON file.

    Raises
    ------
    OSError
        If the file cannot be read.
    json.JSONDecodeError
        If the file is not valid JSON.
    pydantic.ValidationError
        If the payload does not match :class:`PlayerHistory`.
    """
    with path.open("r", encoding="utf-8") as f:
        payload: Any = json.load(f)
    return PlayerHistory.model_validate(payload)


__all__ = ["PlayerHistory", "load_history"]
