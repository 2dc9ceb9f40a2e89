from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from .attendance.service import AttendanceService
from .core.constants import DEFAULT_SUBJECTS
from .reports.service import ReportService
from .students.json_student_repository import JsonStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository
    subjects: tuple[str, ...]

    student_service: StudentService
    attendance_service: AttendanceService
    report_service: ReportService


def build_container(
    *,
    students_file: Union[str, Path, None] = None,
    subjects: Iterable[str] = DEFAULT_SUBJECTS,
    missing_ok: bool = True,
    students_repo: Optional[StudentRepository] = None,
) -> Container:
    if students_repo is None:
        if students_file is None:
            raise ValueError("students_file or students_repo is required")
        students_repo = JsonStudentRepository(students_file, missing_ok=missing_ok)

    subjects = tuple(subjects)

    return Container(
        students_repo=students_repo,
        subjects=subjects,
        student_service=StudentService(students_repo, subjects),
        attendance_service=AttendanceService(students_repo),
        report_service=ReportService(students_repo, subjects),
    )
