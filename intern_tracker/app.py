from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from intern_tracker.config import AppConfig, load_config
from intern_tracker.core.exceptions import DataLoadingError
from intern_tracker.core.model_manager import CollectionViewManager
from intern_tracker.core.user_prefs import UserPrefs
from intern_tracker.logging_config import configure_logging
from intern_tracker.services.book_storage import JsonInternshipBookStorage, JsonUserPrefsStorage
from intern_tracker.services.storage import LocalFileSystemStorage

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """
    Everything the presentation layer needs: the loaded config, the model manager and the storages used to
    save it back. Passed around instead of module-level globals.
    """
    config: AppConfig
    model: CollectionViewManager
    book_storage: JsonInternshipBookStorage
    prefs_storage: JsonUserPrefsStorage


def create_app(config_path: str | Path = "config.json") -> AppContext:
    """
    Load config, configure logging, read preferences and the internship book, and build the model.

    A missing or invalid book starts the app with an empty book rather than refusing to start.
    """
    config_path = Path(config_path)
    config = load_config(config_path)
    configure_logging(level=config.log_level, force_format=config.log_format)

    prefs_path = config.user_prefs_path
    prefs_storage = JsonUserPrefsStorage(LocalFileSystemStorage(prefs_path.parent), prefs_path.name)
    try:
        user_prefs = prefs_storage.read_user_prefs() or UserPrefs()
    except DataLoadingError:
        logger.warning("Preferences unreadable, using defaults", extra={"path": str(prefs_path)})
        user_prefs = UserPrefs()

    book_path = user_prefs.internship_file_path
    if not book_path.is_absolute():
        book_path = prefs_path.parent / book_path
    book_storage = JsonInternshipBookStorage(LocalFileSystemStorage(book_path.parent), book_path.name)
    try:
        internships = book_storage.read_internship_book() or []
    except DataLoadingError:
        logger.warning("Internship book unreadable, starting with an empty book", extra={"path": str(book_path)})
        internships = []

    model = CollectionViewManager(internships, user_prefs)
    logger.info("App ready", extra={"n_internships": len(model.get_internship_book())})
    return AppContext(config=config, model=model, book_storage=book_storage, prefs_storage=prefs_storage)


def save_app(context: AppContext) -> None:
    """Write the internship book and preferences back to storage."""
    context.book_storage.save_internship_book(context.model.get_internship_book())
    context.prefs_storage.save_user_prefs(context.model.get_user_prefs())
