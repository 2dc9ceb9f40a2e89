from __future__ import annotations

from enum import Enum

from .constants import ABSENT, PRESENT


class AttendanceStatus(str, Enum):
    """Conventional statuses offered by the forms (not enforced on stored data)."""

    PRESENT = PRESENT
    ABSENT = ABSENT
