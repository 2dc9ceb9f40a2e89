from __future__ import annotations

import pytest

from tests.support import SUBJECTS, InMemoryStudents, make_student


@pytest.fixture
def students_repo():
    return InMemoryStudents(
        [
            make_student(1, "Alice", DS=[("2024-01-01", "Present")], LINUX=[], AJVA=[]),
            make_student(2, "Bob", DS=[], LINUX=[], AJVA=[]),
        ]
    )


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "students.json"


@pytest.fixture
def app(monkeypatch, store_path):
    from src.class_attendance.class_attendance.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(
        {
            "STUDENTS_FILE": str(store_path),
            "SUBJECTS": SUBJECTS,
            "LOG_LEVEL": "WARNING",
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()
