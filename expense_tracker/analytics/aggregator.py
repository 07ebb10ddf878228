"""Mini README: Pure aggregation helpers over expense snapshots.

Structure:
    * total_amount - grand total of the supplied expenses.
    * by_month - totals per short month name, first-encountered order.
    * by_category - totals per category with a capitalised label.

The helpers never mutate their input and accept any iterable of expenses,
normally an ``ExpenseStore.list`` snapshot. Month grouping ignores the year:
January 2023 and January 2024 share the ``Jan`` bucket.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..expenses import Expense
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def month_label(expense: Expense) -> str:
    """Return the English short month name of the expense date."""

    return MONTH_LABELS[expense.date.month - 1]


def category_label(category: str) -> str:
    """Upper-case the first character, leaving the remainder untouched."""

    return category[:1].upper() + category[1:]


def total_amount(expenses: Iterable[Expense]) -> float:
    """Sum the amounts of ``expenses``; empty input gives 0."""

    return sum((expense.amount for expense in expenses), 0)


def _group_totals(expenses: Iterable[Expense], key) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for expense in expenses:
        group = key(expense)
        totals[group] = totals.get(group, 0) + expense.amount
    return totals


def by_month(expenses: Iterable[Expense]) -> List[Dict[str, object]]:
    """Total spending per month name in first-encountered order."""

    totals = _group_totals(expenses, month_label)
    LOGGER.debug("Monthly totals computed for %s months", len(totals))
    return [{"month": month, "amount": amount} for month, amount in totals.items()]


def by_category(expenses: Iterable[Expense]) -> List[Dict[str, object]]:
    """Total spending per exact category string in first-encountered order."""

    totals = _group_totals(expenses, lambda expense: expense.category)
    LOGGER.debug("Category totals computed for %s categories", len(totals))
    return [
        {"name": category_label(category), "value": value}
        for category, value in totals.items()
    ]
