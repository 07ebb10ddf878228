"""Mini README: Tests covering the in-memory expense store.

Structure:
    * add/list ordering and snapshot behaviour.
    * idempotent removal and add-then-remove round trips.
    * identifier uniqueness and construction from existing records.
"""

from __future__ import annotations

from datetime import date, datetime
from itertools import count

import pytest

from expense_tracker.expenses import Expense, ExpenseStore, demo_expenses


def _sequential_ids():
    counter = count(1)
    return lambda: f"exp_{next(counter):04d}"


def test_add_prepends_and_returns_record() -> None:
    """New expenses appear first and carry the generated identifier."""

    store = ExpenseStore(id_factory=_sequential_ids())
    first = store.add(50.0, "Groceries", "food", "2024-01-15")
    second = store.add(20.0, "Bus", "transport", date(2024, 1, 20))

    assert first.id == "exp_0001"
    assert first.date == date(2024, 1, 15)
    assert [expense.id for expense in store.list()] == [second.id, first.id]


def test_add_accepts_datetime_and_keeps_trusted_values() -> None:
    """The store coerces the date but leaves amount and description untouched."""

    store = ExpenseStore()
    expense = store.add(0, "", "misc", datetime(2024, 3, 5, 14, 30))

    assert expense.date == date(2024, 3, 5)
    assert expense.amount == 0
    assert expense.description == ""
    assert expense.id in store


def test_list_returns_snapshot() -> None:
    """Later mutations must not leak into a previously returned list."""

    store = ExpenseStore()
    kept = store.add(10.0, "Coffee", "food", "2024-02-01")
    snapshot = store.list()

    store.add(5.0, "Snack", "food", "2024-02-02")
    store.remove(kept.id)

    assert [expense.id for expense in snapshot] == [kept.id]
    snapshot.clear()

    assert len(store) == 1
    assert store.list()[0].description == "Snack"


def test_remove_unknown_id_is_noop() -> None:
    """Removing a missing identifier leaves the store unchanged without errors."""

    store = ExpenseStore()
    store.add(12.5, "Lunch", "food", "2024-04-01")
    before = store.list()

    assert store.remove("does-not-exist") is False
    assert store.list() == before


def test_add_then_remove_round_trip() -> None:
    """Adding and immediately removing restores the previous contents."""

    store = ExpenseStore(demo_expenses())
    before = store.list()

    expense = store.add(99.0, "Concert", "entertainment", "2024-05-05")
    assert store.remove(expense.id) is True
    assert store.list() == before


def test_length_tracks_adds_minus_removes() -> None:
    """The collection size equals adds minus successful removes."""

    store = ExpenseStore()
    created = [store.add(float(index), f"Item {index}", "general", "2024-01-01") for index in range(5)]
    store.remove(created[1].id)
    store.remove(created[1].id)
    store.remove(created[3].id)

    assert len(store.list()) == 3


def test_identifier_collisions_draw_again() -> None:
    """A repeated identifier from the factory is replaced by a fresh one."""

    identifiers = iter(["same", "same", "other"])
    store = ExpenseStore(id_factory=lambda: next(identifiers))
    first = store.add(1.0, "One", "general", "2024-01-01")
    second = store.add(2.0, "Two", "general", "2024-01-02")

    assert (first.id, second.id) == ("same", "other")


def test_constructor_rejects_duplicate_ids() -> None:
    """Seeding the store with clashing identifiers raises a clear error."""

    record = Expense(id="dup", amount=1.0, description="A", category="food", date=date(2024, 1, 1))
    with pytest.raises(ValueError):
        ExpenseStore([record, record])


def test_get_raises_for_unknown_expense() -> None:
    store = ExpenseStore(demo_expenses())

    assert store.get("demo-0001").description == "Monthly bus pass"
    with pytest.raises(KeyError):
        store.get("missing")


def test_as_dict_serialises_date() -> None:
    expense = Expense(id="x", amount=3.5, description="Tea", category="food", date=date(2024, 6, 9))

    assert expense.as_dict() == {
        "id": "x",
        "amount": 3.5,
        "description": "Tea",
        "category": "food",
        "date": "2024-06-09",
    }
