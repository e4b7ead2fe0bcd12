from __future__ import annotations

from collections.abc import Sequence
from contextlib import contextmanager
from typing import Callable, Iterator, List, Tuple, overload

import pandas as pd

from intern_tracker.core.exceptions import InvalidArgumentError
from intern_tracker.core.internship import Internship
from intern_tracker.core.predicates import SHOW_ALL_INTERNSHIPS, Predicate
from intern_tracker.core.record_store import RecordStore

ViewListener = Callable[["FilteredSortedView"], None]

FRAME_COLUMNS = ["company_name", "role", "status", "date", "comment"]


class FilteredSortedView(Sequence):
    """
    Read-only, live projection of a RecordStore through a predicate.

    The view holds the store itself (not a copy) and re-derives whenever the store reports a change or the
    predicate is swapped. Order is always the store's stored order; the view never sorts on its own.

    Presentation code can either read the view directly (it is a Sequence of Internship) or
    {@link subscribe} to be told after every re-derivation.
    """

    def __init__(self, store: RecordStore, predicate: Predicate = SHOW_ALL_INTERNSHIPS) -> None:
        if store is None or predicate is None:
            raise InvalidArgumentError("store and predicate must not be None")
        self._store = store
        self._predicate = predicate
        self._items: Tuple[Internship, ...] = ()
        self._listeners: List[ViewListener] = []
        self._defer_depth = 0
        self._pending = False

        self._store.add_listener(self.refresh)
        self._derive()

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------
    @property
    def predicate(self) -> Predicate:
        return self._predicate

    def set_predicate(self, predicate: Predicate) -> None:
        if predicate is None:
            raise InvalidArgumentError("predicate must not be None")
        # Filter first so a failing predicate leaves the old one (and the old contents) in place
        items = self._apply(predicate)
        self._predicate = predicate
        self._items = items
        self._changed()

    def refresh(self) -> None:
        """Re-derive from the store now; listeners hear about it now or when the deferral ends."""
        self._derive()
        self._changed()

    def _apply(self, predicate: Predicate) -> Tuple[Internship, ...]:
        return tuple(r for r in self._store if predicate(r))

    def _derive(self) -> None:
        self._items = self._apply(self._predicate)

    def _changed(self) -> None:
        if self._defer_depth:
            self._pending = True
        else:
            self._notify()

    # -------------------------------------------------------------------------
    # Observation
    # -------------------------------------------------------------------------
    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """
        Register a listener called with this view after each re-derivation.

        :return: a callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @contextmanager
    def deferred_notifications(self) -> Iterator[None]:
        """
        Hold listener notifications until the outermost block exits, then send at most one.
        The view contents themselves are always up to date inside the block.
        """
        self._defer_depth += 1
        try:
            yield
        finally:
            self._defer_depth -= 1
            if self._defer_depth == 0 and self._pending:
                self._pending = False
                self._notify()

    def discard_pending_notification(self) -> None:
        """Drop a notification held by deferred_notifications, for when the changes were rolled back."""
        self._pending = False

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def detach(self) -> None:
        """Stop following the store. The view keeps its last contents."""
        self._store.remove_listener(self.refresh)

    # -------------------------------------------------------------------------
    # Presentation helpers
    # -------------------------------------------------------------------------
    def to_frame(self) -> pd.DataFrame:
        """Tabular copy of the current contents, one row per internship, in view order."""
        rows = [r.to_dict() for r in self._items]
        df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
        df["date"] = pd.to_datetime(df["date"])
        return df

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------
    @overload
    def __getitem__(self, index: int) -> Internship: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Internship, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Internship]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilteredSortedView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FilteredSortedView({list(self._items)!r})"
