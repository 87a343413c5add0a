"""player_versions: explain how a player record changed between versions.

The package ingests an already-fetched, ordered history of player versions
and labels every retained version with human-readable change descriptors.

Entry points:
    from player_versions import extract_diff, classify, annotate
"""

from __future__ import annotations

__all__ = ["__version__", "annotate", "classify", "extract_diff"]
__version__ = "0.1.0"

from player_versions.core.classify.classifier import classify  # noqa: E402
from player_versions.core.diff.fields import extract_diff  # noqa: E402
from player_versions.pipelines.annotate import annotate  # noqa: E402
