"""Bulk-import employees from a CSV/semicolon file into the local snapshot.

Usage: python scripts/import_roster.py roster.csv
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.roster_manager.roster_manager.container import build_container
from src.roster_manager.roster_manager.persistence.gateway import inline_dispatcher


def main() -> None:
    if len(sys.argv) != 2:
        raise SystemExit("Usage: python scripts/import_roster.py <file.csv>")

    source = Path(sys.argv[1])
    if not source.exists():
        raise SystemExit(f"File not found: {source}")

    settings = importlib.import_module(get_settings_module())
    # Inline sync so the remote push finishes before the process exits.
    container = build_container(settings=settings, dispatcher=inline_dispatcher)

    imported = container.roster_service.import_rows(source.read_text(encoding="utf-8-sig"))
    print(f"OK: Imported {len(imported)} employees -> {Path(settings.DATA_DIR) / settings.SNAPSHOT_FILE}")


if __name__ == "__main__":
    main()
