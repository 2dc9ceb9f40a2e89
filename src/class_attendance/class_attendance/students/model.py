from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.exceptions import MalformedDataError


@dataclass
class AttendanceRecord:
    """One dated attendance entry inside a subject list."""

    date: str
    status: str
    extra: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, raw: Any) -> "AttendanceRecord":
        if not isinstance(raw, dict):
            raise MalformedDataError(f"Attendance record must be an object, got {type(raw).__name__}")
        date = raw.get("date")
        status = raw.get("status")
        if not isinstance(date, str) or not isinstance(status, str):
            raise MalformedDataError(f"Attendance record needs string date and status: {raw!r}")
        extra = {k: v for k, v in raw.items() if k not in ("date", "status")}
        return cls(date=date, status=status, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "status": self.status, **self.extra}


@dataclass
class Student:
    """A student and their attendance, keyed by subject name.

    `student_id` is assigned as count+1 at creation and is never renumbered,
    so ids can repeat after a deletion.
    """

    student_id: int
    name: str
    attendance: dict[str, list[AttendanceRecord]] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, raw: Any) -> "Student":
        if not isinstance(raw, dict):
            raise MalformedDataError(f"Student must be an object, got {type(raw).__name__}")

        student_id = raw.get("id")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(student_id, int) or isinstance(student_id, bool):
            raise MalformedDataError(f"Student id must be an integer: {raw!r}")

        name = raw.get("name")
        if not isinstance(name, str):
            raise MalformedDataError(f"Student {student_id} has no string name")

        raw_attendance = raw.get("attendance", {})
        if not isinstance(raw_attendance, dict):
            raise MalformedDataError(f"Student {student_id} attendance must be an object")

        attendance: dict[str, list[AttendanceRecord]] = {}
        for subject, records in raw_attendance.items():
            if not isinstance(records, list):
                raise MalformedDataError(f"Student {student_id} subject {subject!r} must be a list")
            attendance[subject] = [AttendanceRecord.from_dict(r) for r in records]

        extra = {k: v for k, v in raw.items() if k not in ("id", "name", "attendance")}
        return cls(student_id=student_id, name=name, attendance=attendance, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.student_id,
            "name": self.name,
            "attendance": {subject: [r.to_dict() for r in records] for subject, records in self.attendance.items()},
            **self.extra,
        }
