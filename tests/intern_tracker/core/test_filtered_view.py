from __future__ import annotations

from datetime import date

import pytest

from intern_tracker.core.comparators import BY_COMPANY_NAME
from intern_tracker.core.exceptions import InvalidArgumentError
from intern_tracker.core.filtered_view import FilteredSortedView
from intern_tracker.core.internship import Internship
from intern_tracker.core.predicates import SHOW_ALL_INTERNSHIPS, status_is
from intern_tracker.core.record_store import RecordStore


def _internship(company, status="Applied", day=1):
    return Internship(company_name=company, role="Intern", status=status, date=date(2024, 2, day))


def _make_store():
    return RecordStore(
        [
            _internship("Globex", status="Offered"),
            _internship("Acme"),
            _internship("Initech", status="Offered"),
        ]
    )


def test_view_follows_predicate_in_store_order():
    store = _make_store()
    view = FilteredSortedView(store, status_is("Offered"))

    assert [r.company_name for r in view] == ["Globex", "Initech"]
    assert len(view) == 2
    assert view[0].company_name == "Globex"


def test_view_is_live_over_store_mutations():
    store = _make_store()
    view = FilteredSortedView(store, status_is("Offered"))

    store.create(_internship("Hooli", status="Offered"))
    store.delete(_internship("Globex"))
    store.sort_by(BY_COMPANY_NAME)

    assert [r.company_name for r in view] == ["Hooli", "Initech"]


def test_set_predicate_rederives():
    store = _make_store()
    view = FilteredSortedView(store, status_is("Offered"))

    view.set_predicate(SHOW_ALL_INTERNSHIPS)

    assert view == list(store)
    assert view.predicate is SHOW_ALL_INTERNSHIPS


def test_none_predicate_rejected():
    view = FilteredSortedView(_make_store())

    with pytest.raises(InvalidArgumentError):
        view.set_predicate(None)
    with pytest.raises(InvalidArgumentError):
        FilteredSortedView(None)


def test_subscribe_and_unsubscribe():
    store = _make_store()
    view = FilteredSortedView(store)
    seen = []
    unsubscribe = view.subscribe(lambda v: seen.append(len(v)))

    store.create(_internship("Hooli"))
    unsubscribe()
    store.create(_internship("Umbrella"))

    assert seen == [4]


def test_deferred_notifications_send_one_update_with_final_contents():
    store = _make_store()
    view = FilteredSortedView(store)
    seen = []
    view.subscribe(lambda v: seen.append([r.company_name for r in v]))

    with view.deferred_notifications():
        store.create(_internship("Hooli"))
        with view.deferred_notifications():
            store.sort_by(BY_COMPANY_NAME)
        assert seen == []
        # contents are already current inside the block
        assert view[0].company_name == "Acme"

    assert seen == [["Acme", "Globex", "Hooli", "Initech"]]


def test_deferred_notifications_without_change_send_nothing():
    view = FilteredSortedView(_make_store())
    seen = []
    view.subscribe(seen.append)

    with view.deferred_notifications():
        pass

    assert seen == []


def test_detach_stops_following_store():
    store = _make_store()
    view = FilteredSortedView(store)

    view.detach()
    store.create(_internship("Hooli"))

    assert len(view) == 3


def test_view_is_read_only_sequence():
    view = FilteredSortedView(_make_store())

    assert not hasattr(view, "append")
    with pytest.raises(TypeError):
        view[0] = _internship("Hooli")


def test_to_frame():
    view = FilteredSortedView(_make_store(), status_is("Offered"))

    df = view.to_frame()

    assert list(df.columns) == ["company_name", "role", "status", "date", "comment"]
    assert df["company_name"].tolist() == ["Globex", "Initech"]
    assert str(df["date"].dtype).startswith("datetime64")


def test_to_frame_empty():
    view = FilteredSortedView(RecordStore())

    assert view.to_frame().empty


def test_set_predicate_that_raises_keeps_previous_predicate_and_contents():
    store = _make_store()
    offered = status_is("Offered")
    view = FilteredSortedView(store, offered)
    seen = []
    view.subscribe(seen.append)

    def fussy(record):
        if record.company_name == "Acme":
            raise RuntimeError("cannot evaluate Acme")
        return True

    with pytest.raises(RuntimeError):
        view.set_predicate(fussy)

    assert view.predicate is offered
    assert [r.company_name for r in view] == ["Globex", "Initech"]
    assert seen == []
