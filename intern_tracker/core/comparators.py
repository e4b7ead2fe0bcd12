"""
Built-in orderings over internships.

A comparator here is a plain ``(a, b) -> int`` callable (negative, zero, positive), the shape
``functools.cmp_to_key`` expects.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict

from intern_tracker.core.exceptions import InvalidArgumentError
from intern_tracker.core.internship import VALID_STATUSES, Internship

Comparator = Callable[[Internship, Internship], int]

PREFIX_COMPANY_NAME = "c/"
PREFIX_ROLE = "r/"
PREFIX_STATUS = "s/"
PREFIX_DATE = "d/"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def arrow(self) -> str:
        return "↑" if self is SortOrder.ASC else "↓"


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def by_company_name(a: Internship, b: Internship) -> int:
    return _cmp(a.company_name.casefold(), b.company_name.casefold())


def by_role(a: Internship, b: Internship) -> int:
    return _cmp(a.role.casefold(), b.role.casefold())


def by_status(a: Internship, b: Internship) -> int:
    return _cmp(VALID_STATUSES.index(a.status), VALID_STATUSES.index(b.status))


def by_date(a: Internship, b: Internship) -> int:
    return _cmp(a.date, b.date)


BY_COMPANY_NAME: Comparator = by_company_name
BY_ROLE: Comparator = by_role
BY_STATUS: Comparator = by_status
BY_DATE: Comparator = by_date

COMPARATORS_BY_PREFIX: Dict[str, Comparator] = {
    PREFIX_COMPANY_NAME: BY_COMPANY_NAME,
    PREFIX_ROLE: BY_ROLE,
    PREFIX_STATUS: BY_STATUS,
    PREFIX_DATE: BY_DATE,
}


def reverse(comparator: Comparator) -> Comparator:
    """Flip a comparator. Ties still compare as 0, so a stable sort keeps their prior order."""

    def reversed_comparator(a: Internship, b: Internship) -> int:
        return comparator(b, a)

    return reversed_comparator


def with_order(comparator: Comparator, order: SortOrder) -> Comparator:
    return comparator if SortOrder(order) is SortOrder.ASC else reverse(comparator)


def comparator_for_prefix(prefix: str, order: SortOrder = SortOrder.ASC) -> Comparator:
    """
    Look up the built-in comparator for a sort prefix (e.g. "c/") and apply the direction.

    :raises InvalidArgumentError: if the prefix is unknown
    """
    try:
        base = COMPARATORS_BY_PREFIX[prefix]
    except KeyError:
        raise InvalidArgumentError(f"Unknown sort prefix '{prefix}'")
    return with_order(base, order)
