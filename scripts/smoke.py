# scripts/smoke.py
"""
Smoke Test Script for the player_versions engine.

Usage
-----
1. Run against a small built-in history:
    $ python scripts/smoke.py

2. Run against an already-fetched version-history JSON file:
    $ python scripts/smoke.py --file samples/player.json
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path

from dotenv import load_dotenv

from player_versions.core.contracts.history import PlayerHistory, load_history
from player_versions.pipelines.annotate import annotate

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
_BASE = {
    "first_name": "Sam",
    "last_name": "Jones",
    "home": "Tacoma",
    "birthseason": 1,
    "birthday_type": "RegularDay",
    "birthday_day": 12,
    "likes": "Cats",
    "dislikes": "Rain",
    "number": 7,
    "mmolb_team_id": "team-1",
    "slot": "Catcher",
}

DEFAULT_HISTORY = {
    "player_id": "smoke-player",
    "versions": [
        {**_BASE, "id": "v0", "valid_from": "2025-06-01T00:00:00Z"},
        {**_BASE, "id": "v1", "valid_from": "2025-06-02T00:00:00Z", "durability": 0.5},
        {**_BASE, "id": "v2", "valid_from": "2025-06-03T00:00:00Z", "slot": "FirstBase"},
        {
            **_BASE,
            "id": "v3",
            "valid_from": "2025-06-04T00:00:00Z",
            "slot": "FirstBase",
            "first_name": "Max",
            "last_name": "Power",
            "likes": "Dogs",
            "events": [
                {
                    "type": "Recomposition",
                    "time": "2025-06-04T00:00:00Z",
                    "new_display_name": "Max Power",
                }
            ],
        },
    ],
}


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run player_versions Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to a version-history JSON file")
    args = parser.parse_args()

    try:
        if args.file:
            history = load_history(Path(args.file))
        else:
            history = PlayerHistory.model_validate(DEFAULT_HISTORY)

        versions = annotate(history)
        print(f"\nPlayer {history.player_id}: {len(versions)} of {len(history.versions)} kept")
        for idx, version in enumerate(versions):
            print(f"  {idx:03d} {version.snapshot.valid_from:%Y-%m-%d} {version.label}")
    except Exception:
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
