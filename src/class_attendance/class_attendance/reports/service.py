from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..attendance.engine import count_present, percentage_of
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class ReportData:
    """Rows are `{"id", "name", "percentages": {subject: pct}}`, one per student."""

    subjects: list[str]
    rows: list[dict]
    summary: list[dict]


class ReportService:
    def __init__(self, students: StudentRepository, subjects: Iterable[str]):
        self._students = students
        self._subjects = tuple(subjects)

    def build_attendance_report(self) -> ReportData:
        students = self._students.load()

        # Configured subjects first, then any extra keys found in the file.
        subjects = list(self._subjects)
        for s in students:
            for subject in s.attendance:
                if subject not in subjects:
                    subjects.append(subject)

        rows: list[dict] = []
        totals = {subject: {"present": 0, "total": 0} for subject in subjects}

        for s in students:
            percentages = {}
            for subject in subjects:
                records = s.attendance.get(subject) or []
                present = count_present(records)
                percentages[subject] = percentage_of(present, len(records))
                totals[subject]["present"] += present
                totals[subject]["total"] += len(records)
            rows.append({"id": s.student_id, "name": s.name, "percentages": percentages})

        summary = [
            {
                "subject": subject,
                "present": totals[subject]["present"],
                "total": totals[subject]["total"],
                "percentage": percentage_of(totals[subject]["present"], totals[subject]["total"]),
            }
            for subject in subjects
        ]

        return ReportData(subjects=subjects, rows=rows, summary=summary)
