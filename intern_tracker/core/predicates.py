from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from intern_tracker.core.exceptions import InvalidArgumentError
from intern_tracker.core.internship import VALID_STATUSES, Internship

Predicate = Callable[[Internship], bool]


def SHOW_ALL_INTERNSHIPS(internship: Internship) -> bool:
    return True


def status_is(status: str) -> Predicate:
    if status not in VALID_STATUSES:
        raise InvalidArgumentError(f"Unknown status '{status}'")

    def predicate(internship: Internship) -> bool:
        return internship.status == status

    return predicate


def company_name_contains(keyword: str) -> Predicate:
    needle = (keyword or "").strip().casefold()
    if not needle:
        raise InvalidArgumentError("Keyword must not be blank")

    def predicate(internship: Internship) -> bool:
        return needle in internship.company_name.casefold()

    return predicate


def role_contains(keyword: str) -> Predicate:
    needle = (keyword or "").strip().casefold()
    if not needle:
        raise InvalidArgumentError("Keyword must not be blank")

    def predicate(internship: Internship) -> bool:
        return needle in internship.role.casefold()

    return predicate


def date_between(start: Optional[date] = None, end: Optional[date] = None) -> Predicate:
    """Inclusive on both ends; a missing bound is open."""
    if start is not None and end is not None and start > end:
        raise InvalidArgumentError(f"Start date {start} is after end date {end}")

    def predicate(internship: Internship) -> bool:
        if start is not None and internship.date < start:
            return False
        if end is not None and internship.date > end:
            return False
        return True

    return predicate
