from __future__ import annotations

import logging
from typing import Iterable

from ..attendance import engine
from ..common.validators import require_input
from ..core.exceptions import NotFoundError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

class StudentService:
    """Use case: manage the student list (add / rename / delete)."""

    def __init__(self, students: StudentRepository, subjects: Iterable[str]):
        self._students = students
        self._subjects = tuple(subjects)

    def list_students(self) -> list[Student]:
        return self._students.load()

    def get_student(self, student_id: int) -> Student:
        return engine.find_student(self._students.load(), student_id)

    def add_student(self, name: str) -> Student:
        name = require_input(name, "name")

        students = self._students.load()
        student = engine.add_student(students, name, self._subjects)
        self._students.save(students)

        logger.info("Added student %d (%s)", student.student_id, student.name)
        return student

    def rename_student(self, student_id: int, name: str) -> Student:
        name = require_input(name, "name")

        students = self._students.load()
        student = engine.rename_student(students, student_id, name)
        self._students.save(students)

        logger.info("Renamed student %d to %s", student_id, name)
        return student

    def delete_student(self, student_id: int) -> int:
        students = self._students.load()
        removed = engine.delete_student(students, student_id)
        if not removed:
            raise NotFoundError(f"Student {student_id} not found")
        self._students.save(students)

        logger.info("Deleted %d student(s) with id %d", removed, student_id)
        return removed
