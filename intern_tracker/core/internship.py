from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict

from intern_tracker.core.exceptions import InvalidArgumentError

STATUS_APPLIED = "Applied"
STATUS_INTERVIEWING = "Interviewing"
STATUS_OFFERED = "Offered"
STATUS_ACCEPTED = "Accepted"
STATUS_REJECTED = "Rejected"

# Order matters: BY_STATUS sorts along the application pipeline, not alphabetically
VALID_STATUSES = (
    STATUS_APPLIED,
    STATUS_INTERVIEWING,
    STATUS_OFFERED,
    STATUS_ACCEPTED,
    STATUS_REJECTED,
)


def _normalise_key(value: str) -> str:
    return " ".join(value.split()).casefold()


@dataclass(frozen=True)
class Internship:
    """
    A single internship application.

    Fields:

    - company_name: company applied to
    - role: position applied for
    - status: one of VALID_STATUSES
    - date: date the application was made
    - comment: free-form note, may be empty

    Two internships are the *same internship* (see is_same_internship) when company and role match,
    ignoring case and whitespace. That weaker notion is what the book uses for uniqueness; ``==`` still
    compares every field.
    """

    company_name: str
    role: str
    status: str
    date: date
    comment: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.company_name, str) or not self.company_name.strip():
            raise InvalidArgumentError("Company name must not be blank")
        if not isinstance(self.role, str) or not self.role.strip():
            raise InvalidArgumentError("Role must not be blank")
        if self.status not in VALID_STATUSES:
            raise InvalidArgumentError(
                f"Unknown status '{self.status}', expected one of {', '.join(VALID_STATUSES)}"
            )
        if not isinstance(self.date, date):
            raise InvalidArgumentError("date must be a datetime.date")

    def is_same_internship(self, other: Internship) -> bool:
        if other is self:
            return True
        if other is None:
            return False
        return (
            _normalise_key(self.company_name) == _normalise_key(other.company_name)
            and _normalise_key(self.role) == _normalise_key(other.role)
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Internship:
        return cls(
            company_name=data.get("company_name"),
            role=data.get("role"),
            status=data.get("status"),
            date=date.fromisoformat(data["date"]),
            comment=data.get("comment") or "",
        )
