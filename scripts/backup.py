"""Backup the whole store (school, classes, roster, attendance log) as JSON."""

from __future__ import annotations

import importlib
import json
from datetime import datetime
from pathlib import Path

from school_attendance.config import get_settings_module
from school_attendance.container import build_container
from school_attendance.database.snapshot import export_snapshot


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"school_attendance_{ts}.json"

    snapshot = export_snapshot(container)
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} (events={len(snapshot['attendance'])})")


if __name__ == "__main__":
    main()
