from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from intern_tracker.core.comparators import BY_COMPANY_NAME, PREFIX_COMPANY_NAME, Comparator, SortOrder
from intern_tracker.core.exceptions import InvalidArgumentError
from intern_tracker.core.predicates import SHOW_ALL_INTERNSHIPS, Predicate

DEFAULT_FILTER_PARAMETER = "default"
DEFAULT_FILTER_VALUE = "default"


def _require(name: str, value: Any) -> Any:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


@dataclass
class ViewState:
    """
    Represents the currently active filter and sort.

    Fields:

    - predicate: filter applied to the book, defaults to showing everything
    - filter_parameter / filter_value: what the user filtered on, for display only
    - comparator: ordering applied to the book, defaults to company name
    - comparator_prefix / comparator_order: what the user sorted on, for display only

    The description fields are never read by the filtering or sorting itself, so they can drift from the
    active predicate/comparator if a caller only updates one side.
    """

    predicate: Predicate = field(default=SHOW_ALL_INTERNSHIPS)
    filter_parameter: str = DEFAULT_FILTER_PARAMETER
    filter_value: str = DEFAULT_FILTER_VALUE

    comparator: Comparator = field(default=BY_COMPANY_NAME)
    comparator_prefix: str = PREFIX_COMPANY_NAME
    comparator_order: SortOrder = SortOrder.ASC

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "comparator_order" and value is not None:
            value = SortOrder(value)
        super().__setattr__(name, _require(name, value))

    def metadata(self) -> Dict[str, str]:
        return {
            "filter_parameter": self.filter_parameter,
            "filter_value": self.filter_value,
            "comparator_prefix": self.comparator_prefix,
            "comparator_order": self.comparator_order.value,
        }
