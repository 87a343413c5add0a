"""
Smoke tests for package structure and availability.

Scope
-----
These tests verify that the package is installed correctly and that the
top-level entry points are importable.
"""

from __future__ import annotations

import importlib

from player_versions import __version__


def test_package_importable() -> None:
    """Ensure the top-level package can be imported."""
    mod = importlib.import_module("player_versions")
    assert mod is not None


def test_version_is_set() -> None:
    """Ensure the package exposes a valid version string."""
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_entry_points_are_exported() -> None:
    """`extract_diff`, `classify` and `annotate` are the public engine API."""
    mod = importlib.import_module("player_versions")
    for name in ("extract_diff", "classify", "annotate"):
        assert callable(getattr(mod, name))


def test_cli_module_exposes_app() -> None:
    """
    Ensure the CLI module exposes the Typer 'app' object.

    The entry point in pyproject.toml is `player_versions.cli:app`.
    """
    cli = importlib.import_module("player_versions.cli")
    assert hasattr(cli, "app"), "player_versions.cli must expose an 'app' Typer object."
