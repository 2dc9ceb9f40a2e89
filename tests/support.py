from __future__ import annotations

import copy

from src.class_attendance.class_attendance.students.model import AttendanceRecord, Student

SUBJECTS = ("DS", "LINUX", "AJVA")


class InMemoryStudents:
    """Stands in for the JSON file: load hands out copies, save replaces the whole list."""

    def __init__(self, students=None):
        self._students = list(students or [])
        self.saves = 0

    def load(self):
        return copy.deepcopy(self._students)

    def save(self, students):
        self._students = copy.deepcopy(list(students))
        self.saves += 1

    @property
    def snapshot(self):
        return [s.to_dict() for s in self._students]


def make_student(student_id: int, name: str, **attendance) -> Student:
    return Student(
        student_id=student_id,
        name=name,
        attendance={
            subject: [AttendanceRecord(date=d, status=st) for d, st in records]
            for subject, records in attendance.items()
        },
    )
