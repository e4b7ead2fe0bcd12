from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from intern_tracker.core.exceptions import InternTrackerError


@dataclass(frozen=True)
class ValidationIssue:
    """
    One problem found in a stored internship book.

    ``index`` is the position of the offending entry in ``internships``, or None when the problem is with
    the book as a whole.
    """
    code: str
    message: str
    index: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ValidationError(InternTrackerError):
    """Every issue found in one pass over a book, raised together."""

    def __init__(self, issues: Iterable[ValidationIssue]) -> None:
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__("\n".join(str(issue) for issue in self.issues))

    @property
    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]

    @property
    def entry_indices(self) -> List[int]:
        """Sorted positions of the entries that have at least one issue."""
        return sorted({issue.index for issue in self.issues if issue.index is not None})
