from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container

DEMO_STUDENTS = ["Alice", "Bob", "Chandra"]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(students_file=settings.STUDENTS_FILE, subjects=settings.SUBJECTS)

    existing = {s.name for s in container.student_service.list_students()}
    for name in DEMO_STUDENTS:
        if name not in existing:
            container.student_service.add_student(name)

    print(f"OK: Seeded store -> {settings.STUDENTS_FILE} (students={len(container.student_service.list_students())})")


if __name__ == "__main__":
    main()
