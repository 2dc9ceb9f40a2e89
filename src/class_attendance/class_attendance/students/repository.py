from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Whole-store persistence: every read returns the full list, every write replaces it."""

    def load(self) -> list[Student]:
        raise NotImplementedError

    def save(self, students: Sequence[Student]) -> None:
        raise NotImplementedError
