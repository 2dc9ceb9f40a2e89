from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from ..common.datetime_utils import today_iso
from ..common.validators import require_input, require_iso_date
from ..core.exceptions import NotFoundError
from ..students.model import Student
from ..students.repository import StudentRepository
from . import engine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubjectRecordsUI:
    subject: str
    rows: list[dict]
    percentage: str


class AttendanceService:
    """Use case: record and correct attendance.

    Each call is one load -> mutate -> save cycle; the store is only written
    after the engine call succeeded, so a failed lookup leaves the file untouched.
    """

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_students(self) -> list[Student]:
        return self._students.load()

    def mark(self, student_id: int, *, subject: str, date: str, status: str):
        subject = require_input(subject, "subject")
        date = require_iso_date(date)
        status = require_input(status, "status")

        students = self._students.load()
        record = engine.mark_attendance(students, student_id, subject, date, status)
        self._students.save(students)

        logger.info("Marked student %d %s on %s as %s", student_id, subject, date, status)
        return record

    def mark_bulk(self, *, subject: str, submissions: Mapping[int, Optional[str]], date: Optional[str] = None) -> int:
        subject = require_input(subject, "subject")
        date = require_iso_date(date) if date else today_iso()

        students = self._students.load()
        marked = engine.mark_bulk_attendance(students, subject, date, submissions)
        self._students.save(students)

        logger.info("Bulk attendance for %s on %s: %d of %d students marked", subject, date, marked, len(students))
        return marked

    def edit(self, student_id: int, *, subject: str, index: int, status: str):
        subject = require_input(subject, "subject")
        status = require_input(status, "status")

        students = self._students.load()
        record = engine.edit_attendance(students, student_id, subject, index, status)
        self._students.save(students)

        logger.info("Edited student %d %s record #%d to %s", student_id, subject, index, status)
        return record

    def get_record(self, student_id: int, *, subject: str, index: int):
        """Look up one record for the edit form without changing it."""
        subject = require_input(subject, "subject")
        for i, record in engine.list_records(self._students.load(), student_id, subject):
            if i == index:
                return record
        raise NotFoundError(f"No attendance record at index {index} for {subject}")

    def records_ui(self, student_id: int, *, subject: Optional[str] = None) -> tuple[Student, list[SubjectRecordsUI]]:
        students = self._students.load()
        student = engine.find_student(students, student_id)

        subjects = [subject] if subject else list(student.attendance)
        out = []
        for s in subjects:
            pairs = engine.list_records(students, student_id, s)
            out.append(
                SubjectRecordsUI(
                    subject=s,
                    rows=[{"index": i, "date": r.date, "status": r.status} for i, r in pairs],
                    percentage=engine.attendance_percentage([r for _, r in pairs]),
                )
            )
        return student, out
