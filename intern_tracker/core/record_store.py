from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from intern_tracker.core.comparators import Comparator
from intern_tracker.core.exceptions import (
    DuplicateRecordError,
    InvalidArgumentError,
    RecordNotFoundError,
)
from intern_tracker.core.internship import Internship

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class RecordStore:
    """
    Owns the master, ordered list of internships (the internship book).

    Invariants:
    - no two stored internships are the same internship (Internship.is_same_internship)
    - every failing operation leaves the list untouched

    Design Notes:
    - The list is never handed out; readers get the tuple from {@link records} or iterate the store.
    - Listeners registered with {@link add_listener} run after every successful mutation or sort. This is
      how FilteredSortedView stays live without copying the list.
    """

    def __init__(self, records: Optional[Iterable[Internship]] = None) -> None:
        self._records: List[Internship] = []
        self._listeners: List[ChangeListener] = []
        if records is not None:
            self.reset(records)

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------
    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        self._listeners.remove(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    @property
    def records(self) -> Tuple[Internship, ...]:
        """Read-only snapshot of the book, in stored order."""
        return tuple(self._records)

    def contains(self, record: Internship) -> bool:
        if record is None:
            raise InvalidArgumentError("record must not be None")
        return self._index_of(record) is not None

    def _index_of(self, record: Internship) -> Optional[int]:
        return next(
            (i for i, existing in enumerate(self._records) if existing.is_same_internship(record)),
            None,
        )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def reset(self, new_records: Iterable[Internship]) -> None:
        """
        Replace the whole book. The caller vouches for uniqueness of ``new_records``; any previous sort
        order is lost until the next {@link sort_by}.

        :raises InvalidArgumentError: if ``new_records`` or any entry in it is not an Internship
        """
        if new_records is None:
            raise InvalidArgumentError("new_records must not be None")
        records = list(new_records)
        bad = [i for i, r in enumerate(records) if not isinstance(r, Internship)]
        if bad:
            raise InvalidArgumentError(f"Entries at positions {bad} are not internships")
        self._records = records
        logger.debug("Internship book reset", extra={"n_internships": len(self._records)})
        self._changed()

    def create(self, record: Internship) -> None:
        """
        Append an internship to the end of the book.

        :raises DuplicateRecordError: if the same internship is already stored
        """
        if self.contains(record):
            raise DuplicateRecordError(
                f"Internship '{record.role}' at '{record.company_name}' already exists"
            )
        self._records.append(record)
        self._changed()

    def delete(self, record: Internship) -> None:
        """
        :raises RecordNotFoundError: if no matching internship is stored
        """
        if record is None:
            raise InvalidArgumentError("record must not be None")
        index = self._index_of(record)
        if index is None:
            raise RecordNotFoundError(
                f"Internship '{record.role}' at '{record.company_name}' not found"
            )
        del self._records[index]
        self._changed()

    def replace(self, target: Internship, replacement: Internship) -> None:
        """
        Swap ``target`` for ``replacement`` at the same position.

        :raises RecordNotFoundError: if ``target`` is not stored
        :raises DuplicateRecordError: if ``replacement`` matches a different stored internship
        """
        if target is None or replacement is None:
            raise InvalidArgumentError("target and replacement must not be None")

        index = self._index_of(target)
        if index is None:
            raise RecordNotFoundError(
                f"Internship '{target.role}' at '{target.company_name}' not found"
            )

        clash = any(
            i != index and existing.is_same_internship(replacement)
            for i, existing in enumerate(self._records)
        )
        if clash:
            raise DuplicateRecordError(
                f"Internship '{replacement.role}' at '{replacement.company_name}' already exists"
            )

        self._records[index] = replacement
        self._changed()

    def sort_by(self, comparator: Comparator) -> None:
        """Stable, in-place sort. Membership never changes."""
        if comparator is None:
            raise InvalidArgumentError("comparator must not be None")
        # list.sort is stable, so ties keep their prior relative order
        self._records.sort(key=cmp_to_key(comparator))
        self._changed()

    # -------------------------------------------------------------------------
    # Dunder
    # -------------------------------------------------------------------------
    def __contains__(self, record: object) -> bool:
        return isinstance(record, Internship) and self._index_of(record) is not None

    def __iter__(self) -> Iterator[Internship]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, RecordStore):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"RecordStore({self._records!r})"
