"""Backup the student store.

Note: Copies the JSON file next to the repo under `backups/` with a timestamp.
The copy is taken as-is, so run it when nobody is submitting attendance.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = Path(settings.STUDENTS_FILE)
    if not store.exists():
        raise SystemExit(f"Student store not found: {store}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{store.stem}_{ts}{store.suffix}"

    shutil.copy2(store, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
