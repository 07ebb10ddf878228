"""Mini README: Expense records and their in-memory store.

The ``store`` module holds the ``Expense`` record type and the
``ExpenseStore`` that owns the session's collection. Everything else in the
application reads expenses through ``ExpenseStore.list`` snapshots.
"""

from .store import Expense, ExpenseStore, demo_expenses, parse_date

__all__ = ["Expense", "ExpenseStore", "demo_expenses", "parse_date"]
