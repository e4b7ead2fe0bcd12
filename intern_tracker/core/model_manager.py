from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from intern_tracker.core.comparators import Comparator, SortOrder
from intern_tracker.core.exceptions import (
    DuplicateRecordError,
    InvalidArgumentError,
    RecordNotFoundError,
)
from intern_tracker.core.filtered_view import FilteredSortedView
from intern_tracker.core.internship import Internship
from intern_tracker.core.predicates import Predicate
from intern_tracker.core.record_store import RecordStore
from intern_tracker.core.user_prefs import GuiSettings, UserPrefs
from intern_tracker.core.view_state import ViewState

logger = logging.getLogger(__name__)


class CollectionViewManager:
    """
    In-memory model of the internship book.

    Purpose:
    - Single entry point for every mutation of the book, so the filtered view exposed to the UI is re-derived
      consistently before any call returns
    - Holds the active filter/sort (ViewState) and the user preferences

    Design Notes:
    - Setting sort/filter *metadata* and *applying* a sort/filter are separate calls. The command layer records
      what the user asked for (for status display) and triggers the re-derivation itself.
    - create/replace/reset re-sort with whatever comparator is active, whether or not the metadata matches it.
    - View listeners are notified once per call, after the whole call has been applied.
    """

    def __init__(
        self,
        internships: Optional[Union[RecordStore, Iterable[Internship]]] = None,
        user_prefs: Optional[UserPrefs] = None,
    ) -> None:
        logger.debug(
            "Initialising model manager",
            extra={"has_internships": internships is not None, "has_user_prefs": user_prefs is not None},
        )

        self._store = RecordStore(internships if internships is not None else [])
        self._user_prefs = user_prefs.copy() if user_prefs is not None else UserPrefs()
        self._state = ViewState()

        self._store.sort_by(self._state.comparator)
        self._view = FilteredSortedView(self._store, self._state.predicate)

    # =========== UserPrefs =================================================================================

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        if user_prefs is None:
            raise InvalidArgumentError("user prefs must not be None")
        self._user_prefs.reset_data(user_prefs)

    def get_user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def get_gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        self._user_prefs.set_gui_settings(gui_settings)

    def get_internship_book_file_path(self) -> Path:
        return self._user_prefs.internship_file_path

    def set_internship_book_file_path(self, path: Path) -> None:
        self._user_prefs.set_internship_file_path(path)

    # =========== Internship book ===========================================================================

    @contextmanager
    def _atomic(self) -> Iterator[None]:
        """
        Run one public operation: listeners hear about it once at the end, and if any step raises the book
        is restored to what it was before the call (and listeners hear nothing).
        """
        before = self._store.records
        with self._view.deferred_notifications():
            try:
                yield
            except Exception:
                if self._store.records != before:
                    logger.warning("Operation failed part-way, restoring internship book",
                                   extra={"n_internships": len(before)})
                    self._store.reset(before)
                self._view.discard_pending_notification()
                raise

    def set_internship_book(self, internships: Iterable[Internship]) -> None:
        """Replace the whole book; the active filter keeps applying to the new contents."""
        if internships is None:
            raise InvalidArgumentError("internships must not be None")
        with self._atomic():
            self._store.reset(internships)
            self.sort_internships(self._state.comparator)
        logger.info("Internship book replaced", extra={"n_internships": len(self._store)})

    def get_internship_book(self) -> Tuple[Internship, ...]:
        return self._store.records

    def has_internship(self, internship: Internship) -> bool:
        if internship is None:
            raise InvalidArgumentError("internship must not be None")
        return self._store.contains(internship)

    def delete_internship(self, target: Internship) -> None:
        with self._atomic():
            try:
                self._store.delete(target)
            except RecordNotFoundError:
                logger.warning("Delete rejected, internship not found", extra={"company": target.company_name})
                raise
        logger.info("Internship deleted", extra={"company": target.company_name, "role": target.role})

    def create_internship(self, internship: Internship) -> None:
        if internship is None:
            raise InvalidArgumentError("internship must not be None")
        with self._atomic():
            try:
                self._store.create(internship)
            except DuplicateRecordError:
                logger.warning("Create rejected, duplicate internship", extra={"company": internship.company_name})
                raise
            self.update_filtered_internship_list(self._state.predicate)
            self.sort_internships(self._state.comparator)
        logger.info("Internship created", extra={"company": internship.company_name, "role": internship.role})

    def set_internship(self, target: Internship, edited_internship: Internship) -> None:
        if target is None or edited_internship is None:
            raise InvalidArgumentError("target and edited internship must not be None")
        with self._atomic():
            try:
                self._store.replace(target, edited_internship)
            except (RecordNotFoundError, DuplicateRecordError) as exc:
                logger.warning("Edit rejected", extra={"company": target.company_name, "reason": str(exc)})
                raise
            self.sort_internships(self._state.comparator)
        logger.info("Internship edited", extra={"company": edited_internship.company_name})

    # =========== Sorting ===================================================================================

    def sort_internships(self, comparator: Comparator) -> None:
        """Apply a sort to the book now. Does not change the active comparator."""
        with self._atomic():
            self._store.sort_by(comparator)

    def update_sort_comparator(self, comparator: Comparator) -> None:
        self._state.comparator = comparator

    def get_sort_comparator(self) -> Comparator:
        return self._state.comparator

    def set_comparator_prefix(self, prefix: str) -> None:
        self._state.comparator_prefix = prefix

    def get_comparator_prefix(self) -> str:
        return self._state.comparator_prefix

    def set_comparator_order(self, order: SortOrder) -> None:
        self._state.comparator_order = order

    def get_comparator_order(self) -> SortOrder:
        return self._state.comparator_order

    # =========== Filtering =================================================================================

    def set_filter_parameter(self, filter_parameter: str) -> None:
        self._state.filter_parameter = filter_parameter

    def get_filter_parameter(self) -> str:
        return self._state.filter_parameter

    def set_filter_value(self, filter_value: str) -> None:
        self._state.filter_value = filter_value

    def get_filter_value(self) -> str:
        return self._state.filter_value

    def get_view_state(self) -> ViewState:
        return self._state

    def get_filtered_internship_list(self) -> FilteredSortedView:
        """Live, read-only view of the book through the active filter, in stored order."""
        return self._view

    def update_filtered_internship_list(self, predicate: Predicate) -> None:
        if predicate is None:
            raise InvalidArgumentError("predicate must not be None")
        self._view.set_predicate(predicate)
        self.update_predicate(predicate)

    def update_predicate(self, predicate: Predicate) -> None:
        """Record the active predicate without re-deriving the view."""
        self._state.predicate = predicate

    # =========== Equality ==================================================================================

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, CollectionViewManager):
            return NotImplemented
        return (
            self._store == other._store
            and self._user_prefs == other._user_prefs
            and self._view == other._view
        )

    __hash__ = None  # type: ignore[assignment]
