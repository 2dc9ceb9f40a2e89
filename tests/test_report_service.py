from __future__ import annotations

from src.class_attendance.class_attendance.reports.service import ReportService
from src.class_attendance.class_attendance.students.model import AttendanceRecord, Student

from tests.support import SUBJECTS, InMemoryStudents, make_student


def test_report_percentages_per_student_and_subject():
    repo = InMemoryStudents(
        [
            make_student(1, "A", DS=[("2024-01-01", "Present"), ("2024-01-02", "Present"), ("2024-01-03", "Absent")]),
            make_student(2, "B", DS=[("2024-01-01", "Absent")], LINUX=[]),
        ]
    )

    report = ReportService(repo, SUBJECTS).build_attendance_report()

    assert report.subjects == ["DS", "LINUX", "AJVA"]
    assert report.rows[0] == {"id": 1, "name": "A", "percentages": {"DS": "66.67", "LINUX": "0", "AJVA": "0"}}
    assert report.rows[1]["percentages"]["DS"] == "0.00"
    assert report.summary[0] == {"subject": "DS", "present": 2, "total": 4, "percentage": "50.00"}
    assert report.summary[1]["percentage"] == "0"


def test_report_includes_subjects_outside_configuration():
    repo = InMemoryStudents([make_student(1, "A", dsa=[("2024-01-01", "Present")])])

    report = ReportService(repo, SUBJECTS).build_attendance_report()

    assert report.subjects == ["DS", "LINUX", "AJVA", "dsa"]
    assert report.rows[0]["percentages"]["dsa"] == "100.00"


def test_subject_keys_named_like_row_fields_do_not_overwrite_them():
    repo = InMemoryStudents(
        [Student(1, "Alice", attendance={"name": [AttendanceRecord("2024-01-01", "Present")], "id": []})]
    )

    report = ReportService(repo, ("DS",)).build_attendance_report()

    assert report.subjects == ["DS", "name", "id"]
    assert report.rows[0] == {
        "id": 1,
        "name": "Alice",
        "percentages": {"DS": "0", "name": "100.00", "id": "0"},
    }
    assert report.summary[1] == {"subject": "name", "present": 1, "total": 1, "percentage": "100.00"}
