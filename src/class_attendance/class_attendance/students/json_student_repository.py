from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence, Union

from ..core.exceptions import MalformedDataError, StoreNotFoundError
from .model import Student

logger = logging.getLogger(__name__)

class JsonStudentRepository:
    """Student store backed by a single JSON array on disk.

    Note: There is no locking. Two requests that load before either saves will
    race and the later save wins (lost update).
    """

    def __init__(self, path: Union[str, Path], *, missing_ok: bool = True):
        self._path = Path(path)
        self._missing_ok = bool(missing_ok)

    def load(self) -> list[Student]:
        try:
            with self._path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            if self._missing_ok:
                logger.debug("Store %s does not exist yet, starting empty", self._path)
                return []
            raise StoreNotFoundError(f"Student store not found: {self._path}")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedDataError(f"Student store {self._path} is not valid UTF-8 JSON: {e}")

        if not isinstance(raw, list):
            raise MalformedDataError(f"Student store {self._path} must contain a JSON array")

        students = [Student.from_dict(item) for item in raw]
        logger.debug("Loaded %d students from %s", len(students), self._path)
        return students

    def save(self, students: Sequence[Student]) -> None:
        payload = [s.to_dict() for s in students]
        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)

        # Write next to the target and swap it in so readers never see a truncated file.
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Saved %d students to %s", len(payload), self._path)
