from __future__ import annotations

import pytest

from intern_tracker.validation.book_validation import validate_internship_book_dict
from intern_tracker.validation.errors import ValidationError


def _entry(**overrides):
    entry = {"company_name": "Acme", "role": "Intern", "status": "Applied", "date": "2024-01-01"}
    entry.update(overrides)
    return entry


def test_valid_book_passes():
    validate_internship_book_dict({"internships": [_entry(), _entry(company_name="Globex", comment="hi")]})
    validate_internship_book_dict({"internships": None})
    validate_internship_book_dict({})


def test_root_must_be_object():
    with pytest.raises(ValidationError) as exc_info:
        validate_internship_book_dict([])

    assert exc_info.value.codes == ["BOOK_TYPE"]


def test_internships_must_be_list():
    with pytest.raises(ValidationError) as exc_info:
        validate_internship_book_dict({"internships": {"a": 1}})

    assert exc_info.value.codes == ["BOOK_INTERNSHIPS_TYPE"]


def test_all_issues_collected():
    payload = {
        "internships": [
            "nope",
            _entry(company_name=" ", role=None),
            _entry(status="Ghosted", date="01/02/2024", comment=3),
        ]
    }

    with pytest.raises(ValidationError) as exc_info:
        validate_internship_book_dict(payload)

    assert exc_info.value.codes == [
        "ENTRY_TYPE",
        "ENTRY_COMPANY",
        "ENTRY_ROLE",
        "ENTRY_STATUS",
        "ENTRY_DATE",
        "ENTRY_COMMENT",
    ]
    assert [issue.index for issue in exc_info.value.issues] == [0, 1, 1, 2, 2, 2]
    assert exc_info.value.entry_indices == [0, 1, 2]


def test_duplicates_by_company_and_role_rejected():
    payload = {"internships": [_entry(), _entry(company_name="ACME ", status="Offered")]}

    with pytest.raises(ValidationError) as exc_info:
        validate_internship_book_dict(payload)

    assert exc_info.value.codes == ["ENTRY_DUPLICATE"]
    assert exc_info.value.issues[0].index == 1
    assert "internships[0]" in exc_info.value.issues[0].message


def test_book_level_issue_has_no_entry_index():
    with pytest.raises(ValidationError) as exc_info:
        validate_internship_book_dict("not a book")

    assert exc_info.value.issues[0].index is None
    assert exc_info.value.entry_indices == []
    assert str(exc_info.value) == "BOOK_TYPE: Internship book must be a JSON object."
