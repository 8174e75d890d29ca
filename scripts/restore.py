"""Restore a JSON backup produced by scripts/backup.py."""

from __future__ import annotations

import argparse
import importlib
import json
from pathlib import Path

from school_attendance.config import get_settings_module
from school_attendance.container import build_container
from school_attendance.database.snapshot import import_snapshot


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("backup", type=Path, help="path to a school_attendance_*.json backup")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)

    data = json.loads(args.backup.read_text(encoding="utf-8"))
    summary = import_snapshot(container, data)
    print(f"OK: Restored {args.backup.name}: {summary}")


if __name__ == "__main__":
    main()
