"""Pure operations over an in-memory student list.

Every function takes the full list as loaded from the store and either returns
a value or mutates the list in place. Nothing here touches the filesystem; the
caller decides whether to save afterwards.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from ..core.constants import PRESENT
from ..core.exceptions import NotFoundError
from ..students.model import AttendanceRecord, Student


def add_student(students: list[Student], name: str, subjects: Iterable[str]) -> Student:
    # id = count + 1, so an id freed by a delete can be handed out again.
    student = Student(
        student_id=len(students) + 1,
        name=name,
        attendance={subject: [] for subject in subjects},
    )
    students.append(student)
    return student


def find_student(students: Sequence[Student], student_id: int) -> Student:
    for student in students:
        if student.student_id == student_id:
            return student
    raise NotFoundError(f"Student {student_id} not found")


def rename_student(students: Sequence[Student], student_id: int, name: str) -> Student:
    student = find_student(students, student_id)
    student.name = name
    return student


def delete_student(students: list[Student], student_id: int) -> int:
    """Remove every student with `student_id`; remaining ids are not renumbered."""
    before = len(students)
    students[:] = [s for s in students if s.student_id != student_id]
    return before - len(students)


def _subject_records(student: Student, subject: str) -> list[AttendanceRecord]:
    records = student.attendance.get(subject)
    if not isinstance(records, list):
        records = []
        student.attendance[subject] = records
    return records


def mark_attendance(
    students: Sequence[Student],
    student_id: int,
    subject: str,
    date: str,
    status: str,
) -> AttendanceRecord:
    """Upsert by date: overwrite the status of an existing same-date record, else append.

    Dates compare as exact strings. The previous status for that date is lost.
    """
    student = find_student(students, student_id)
    records = _subject_records(student, subject)

    for record in records:
        if record.date == date:
            record.status = status
            return record

    record = AttendanceRecord(date=date, status=status)
    records.append(record)
    return record


def mark_bulk_attendance(
    students: Sequence[Student],
    subject: str,
    date: str,
    submissions: Mapping[int, Optional[str]],
) -> int:
    """Append one record per submitted student; returns how many were written.

    Append-only: marking the same date twice leaves two records. Students with
    no (or an empty) submission are skipped, not recorded as absent.
    """
    marked = 0
    for student in students:
        status = submissions.get(student.student_id)
        if not status:
            continue
        _subject_records(student, subject).append(AttendanceRecord(date=date, status=status))
        marked += 1
    return marked


def list_records(students: Sequence[Student], student_id: int, subject: str) -> list[tuple[int, AttendanceRecord]]:
    student = find_student(students, student_id)
    records = student.attendance.get(subject)
    if not isinstance(records, list):
        return []
    return list(enumerate(records))


def edit_attendance(
    students: Sequence[Student],
    student_id: int,
    subject: str,
    index: int,
    status: str,
) -> AttendanceRecord:
    student = find_student(students, student_id)
    records = student.attendance.get(subject)
    if not isinstance(records, list):
        raise NotFoundError(f"Student {student_id} has no records for {subject}")
    if index < 0 or index >= len(records):
        raise NotFoundError(f"No attendance record at index {index} for {subject}")

    record = records[index]
    record.status = status
    return record


def count_present(records: Optional[Sequence[AttendanceRecord]]) -> int:
    return sum(1 for r in records or () if r.status == PRESENT)


def percentage_of(present: int, total: int) -> str:
    """`present / total` as a two-decimal percentage string, or "0" when total is 0."""
    if not total:
        return "0"
    return f"{100 * present / total:.2f}"


def attendance_percentage(records: Optional[Sequence[AttendanceRecord]]) -> str:
    """Share of Present records as a two-decimal string, or "0" when there are none."""
    records = records or []
    return percentage_of(count_present(records), len(records))
