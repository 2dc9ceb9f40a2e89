"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in the engine and services.
"""

import importlib

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(students_file=settings.STUDENTS_FILE, subjects=settings.SUBJECTS)
    print(container.report_service.build_attendance_report().summary)


if __name__ == "__main__":
    main()
