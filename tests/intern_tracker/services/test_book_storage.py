from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from intern_tracker.core.exceptions import DataLoadingError
from intern_tracker.core.internship import Internship
from intern_tracker.core.user_prefs import GuiSettings, UserPrefs
from intern_tracker.services.book_storage import JsonInternshipBookStorage, JsonUserPrefsStorage
from intern_tracker.services.storage import LocalFileSystemStorage


def _internship(company, status="Applied"):
    return Internship(company_name=company, role="Intern", status=status, date=date(2024, 6, 1))


def test_missing_book_returns_none(tmp_path):
    storage = JsonInternshipBookStorage(LocalFileSystemStorage(tmp_path))

    assert storage.read_internship_book() is None


def test_save_then_read_book(tmp_path):
    storage = JsonInternshipBookStorage(LocalFileSystemStorage(tmp_path), "book.json")
    records = [_internship("Acme", status="Offered"), _internship("Globex")]

    storage.save_internship_book(records)

    raw = json.loads((tmp_path / "book.json").read_text())
    assert [e["company_name"] for e in raw["internships"]] == ["Acme", "Globex"]
    assert storage.read_internship_book() == records


def test_corrupt_json_raises_data_loading_error(tmp_path):
    (tmp_path / "book.json").write_text("{not json")
    storage = JsonInternshipBookStorage(LocalFileSystemStorage(tmp_path), "book.json")

    with pytest.raises(DataLoadingError):
        storage.read_internship_book()


def test_invalid_book_raises_data_loading_error(tmp_path):
    payload = {
        "internships": [
            {"company_name": "Acme", "role": "Intern", "status": "Applied", "date": "2024-01-01"},
            {"company_name": "acme", "role": "intern", "status": "Offered", "date": "2024-01-02"},
        ]
    }
    (tmp_path / "book.json").write_text(json.dumps(payload))
    storage = JsonInternshipBookStorage(LocalFileSystemStorage(tmp_path), "book.json")

    with pytest.raises(DataLoadingError) as exc_info:
        storage.read_internship_book()

    assert "ENTRY_DUPLICATE" in str(exc_info.value)


def test_user_prefs_roundtrip(tmp_path):
    storage = JsonUserPrefsStorage(LocalFileSystemStorage(tmp_path))
    prefs = UserPrefs(
        gui_settings=GuiSettings(window_width=800.0, window_height=500.0, window_x=5, window_y=6),
        internship_file_path=Path("books") / "mine.json",
    )

    assert storage.read_user_prefs() is None

    storage.save_user_prefs(prefs)

    assert storage.read_user_prefs() == prefs


def test_user_prefs_must_be_object(tmp_path):
    (tmp_path / "preferences.json").write_text("[1, 2]")
    storage = JsonUserPrefsStorage(LocalFileSystemStorage(tmp_path))

    with pytest.raises(DataLoadingError):
        storage.read_user_prefs()


def test_user_prefs_with_non_object_gui_settings_raises_data_loading_error(tmp_path):
    (tmp_path / "preferences.json").write_text(json.dumps({"gui_settings": [1, 2]}))
    storage = JsonUserPrefsStorage(LocalFileSystemStorage(tmp_path))

    with pytest.raises(DataLoadingError) as exc_info:
        storage.read_user_prefs()

    assert "gui_settings" in str(exc_info.value)
