"""Core package initializer for player_versions.

Downstream code imports from the submodules directly:
    from player_versions.core.settings import settings, load_settings, Settings, get_logger
    from player_versions.core.diff import align, extract_diff
    from player_versions.core.classify import classify
"""

from __future__ import annotations

__all__ = ["__doc__"]
