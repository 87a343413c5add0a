"""Pipeline entry points for player_versions.

Currently exposed:

- :func:`annotate`: compact and label a player's version history,
  implemented in ``annotate.py``.
"""

from __future__ import annotations

from .annotate import annotate

__all__ = ["annotate"]
