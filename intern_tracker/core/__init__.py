"""
Core domain layer: internship record, internship book, view state, the live filtered view
and the model manager that keeps them consistent
"""

from .internship import Internship
from .record_store import RecordStore
from .view_state import ViewState
from .filtered_view import FilteredSortedView
from .user_prefs import GuiSettings, UserPrefs
from .model_manager import CollectionViewManager

__all__ = [
    "Internship",
    "RecordStore",
    "ViewState",
    "FilteredSortedView",
    "GuiSettings",
    "UserPrefs",
    "CollectionViewManager",
]
