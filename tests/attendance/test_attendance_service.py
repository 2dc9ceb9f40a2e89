from __future__ import annotations

import pytest

from src.class_attendance.class_attendance.attendance import service as service_module
from src.class_attendance.class_attendance.attendance.service import AttendanceService
from src.class_attendance.class_attendance.core.exceptions import (
    MissingInputError,
    NotFoundError,
    ValidationError,
)


def test_mark_upserts_and_persists(students_repo):
    svc = AttendanceService(students_repo)

    svc.mark(1, subject="DS", date="2024-01-01", status="Absent")

    assert students_repo.snapshot[0]["attendance"]["DS"] == [{"date": "2024-01-01", "status": "Absent"}]
    assert students_repo.saves == 1


def test_mark_requires_subject(students_repo):
    svc = AttendanceService(students_repo)
    with pytest.raises(MissingInputError):
        svc.mark(1, subject="", date="2024-01-01", status="Present")
    assert students_repo.saves == 0


def test_mark_rejects_malformed_date(students_repo):
    svc = AttendanceService(students_repo)
    with pytest.raises(ValidationError):
        svc.mark(1, subject="DS", date="01/02/2024", status="Present")


def test_mark_unknown_student_is_not_saved(students_repo):
    svc = AttendanceService(students_repo)
    with pytest.raises(NotFoundError):
        svc.mark(9, subject="DS", date="2024-01-01", status="Present")
    assert students_repo.saves == 0


def test_mark_bulk_defaults_to_today(students_repo, monkeypatch):
    monkeypatch.setattr(service_module, "today_iso", lambda: "2024-03-05")
    svc = AttendanceService(students_repo)

    marked = svc.mark_bulk(subject="LINUX", submissions={2: "Present"})

    assert marked == 1
    assert students_repo.snapshot[1]["attendance"]["LINUX"] == [{"date": "2024-03-05", "status": "Present"}]
    assert students_repo.snapshot[0]["attendance"]["LINUX"] == []


def test_edit_out_of_range_leaves_store_untouched(students_repo):
    svc = AttendanceService(students_repo)
    before = students_repo.snapshot

    with pytest.raises(NotFoundError):
        svc.edit(1, subject="DS", index=5, status="Absent")
    with pytest.raises(NotFoundError):
        svc.edit(2, subject="PHYSICS", index=0, status="Absent")

    assert students_repo.snapshot == before
    assert students_repo.saves == 0


def test_edit_changes_status_at_index(students_repo):
    svc = AttendanceService(students_repo)

    svc.edit(1, subject="DS", index=0, status="Absent")

    assert students_repo.snapshot[0]["attendance"]["DS"] == [{"date": "2024-01-01", "status": "Absent"}]


def test_records_ui_all_subjects(students_repo):
    svc = AttendanceService(students_repo)

    student, sections = svc.records_ui(1)

    assert student.name == "Alice"
    assert [s.subject for s in sections] == ["DS", "LINUX", "AJVA"]
    assert sections[0].rows == [{"index": 0, "date": "2024-01-01", "status": "Present"}]
    assert sections[0].percentage == "100.00"
    assert sections[1].percentage == "0"


def test_get_record_missing_index(students_repo):
    svc = AttendanceService(students_repo)
    assert svc.get_record(1, subject="DS", index=0).status == "Present"
    with pytest.raises(NotFoundError):
        svc.get_record(1, subject="DS", index=1)
