from __future__ import annotations

import json
import logging
from typing import Iterable, List, Optional

from intern_tracker.core.exceptions import DataLoadingError
from intern_tracker.core.internship import Internship
from intern_tracker.core.user_prefs import UserPrefs
from intern_tracker.services.storage import StorageBackend
from intern_tracker.validation.book_validation import validate_internship_book_dict
from intern_tracker.validation.errors import ValidationError

logger = logging.getLogger(__name__)


def _read_json(storage: StorageBackend, path: str):
    try:
        return json.loads(storage.read_bytes(path))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DataLoadingError(f"Could not read {path}: {exc}") from exc


def _write_json(storage: StorageBackend, path: str, data: dict) -> None:
    storage.write_bytes(path, json.dumps(data, indent=2).encode("utf-8"))


class JsonInternshipBookStorage:
    """
    Reads and writes the internship book as JSON through a StorageBackend.

    File layout:

        {"internships": [{"company_name": ..., "role": ..., "status": ..., "date": "YYYY-MM-DD", "comment": ...}]}
    """

    def __init__(self, storage: StorageBackend, path: str = "data/internshipbook.json"):
        self.storage = storage
        self.path = path

    def read_internship_book(self) -> Optional[List[Internship]]:
        """
        Load the book. Returns None if the file does not exist yet.

        :raises DataLoadingError: if the file is unreadable or fails validation
        """
        if not self.storage.exists(self.path):
            logger.info("Internship book file not found", extra={"path": self.path})
            return None

        raw = _read_json(self.storage, self.path)
        try:
            validate_internship_book_dict(raw)
        except ValidationError as exc:
            logger.warning(
                "Internship book failed validation",
                extra={"path": self.path, "issues": exc.codes, "entries": exc.entry_indices},
            )
            raise DataLoadingError(str(exc)) from exc

        internships = [Internship.from_dict(entry) for entry in raw.get("internships") or []]
        logger.info("Internship book loaded", extra={"path": self.path, "n_internships": len(internships)})
        return internships

    def save_internship_book(self, internships: Iterable[Internship]) -> None:
        data = {"internships": [i.to_dict() for i in internships]}
        _write_json(self.storage, self.path, data)
        logger.info("Internship book saved", extra={"path": self.path, "n_internships": len(data["internships"])})


class JsonUserPrefsStorage:
    """Reads and writes UserPrefs as JSON through a StorageBackend."""

    def __init__(self, storage: StorageBackend, path: str = "preferences.json"):
        self.storage = storage
        self.path = path

    def read_user_prefs(self) -> Optional[UserPrefs]:
        if not self.storage.exists(self.path):
            return None
        raw = _read_json(self.storage, self.path)
        if not isinstance(raw, dict):
            raise DataLoadingError(f"{self.path} must contain a JSON object")
        try:
            return UserPrefs.from_dict(raw)
        except (TypeError, ValueError) as exc:
            raise DataLoadingError(f"Invalid preferences in {self.path}: {exc}") from exc

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        _write_json(self.storage, self.path, user_prefs.to_dict())
