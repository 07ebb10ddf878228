"""Mini README: In-memory expense store.

Structure:
    * Expense - frozen dataclass holding a single recorded expense.
    * ExpenseStore - ordered collection supporting add, remove and list.
    * demo_expenses - deterministic sample records for previews.

The store keeps records most-recent-first and trusts its caller: amounts and
descriptions are validated at the submission boundary, never here. Removing an
unknown identifier is a no-op so deletes stay idempotent.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DateLike = Union[date, datetime, str]


@dataclass(frozen=True, slots=True)
class Expense:
    """A single spending event."""

    id: str
    amount: float
    description: str
    category: str
    date: date

    def as_dict(self) -> Dict[str, object]:
        """Export the expense with serialisable values."""

        return {
            "id": self.id,
            "amount": self.amount,
            "description": self.description,
            "category": self.category,
            "date": self.date.isoformat(),
        }


def parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


def _uuid_identifier() -> str:
    return str(uuid.uuid4())


class ExpenseStore:
    """Own the expense collection and expose its mutations."""

    def __init__(
        self,
        expenses: Optional[Iterable[Expense]] = None,
        *,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._expenses: List[Expense] = []
        self._id_factory = id_factory or _uuid_identifier
        for expense in expenses or []:
            if expense.id in self:
                raise ValueError(f"Expense {expense.id} already exists.")
            self._expenses.append(expense)
        LOGGER.debug("Expense store initialised with %s expenses", len(self._expenses))

    def __len__(self) -> int:
        return len(self._expenses)

    def __contains__(self, expense_id: object) -> bool:
        return any(expense.id == expense_id for expense in self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self.list())

    def _new_id(self) -> str:
        """Draw identifiers until one is unused by a live record."""

        expense_id = self._id_factory()
        while expense_id in self:
            LOGGER.warning("Identifier %s already in use; drawing another", expense_id)
            expense_id = self._id_factory()
        return expense_id

    def add(self, amount: float, description: str, category: str, date: DateLike) -> Expense:
        """Record a new expense at the front of the collection and return it."""

        expense = Expense(
            id=self._new_id(),
            amount=amount,
            description=description,
            category=category,
            date=parse_date(date),
        )
        self._expenses.insert(0, expense)
        LOGGER.info(
            "Added expense %s (%s, %.2f) dated %s",
            expense.id,
            expense.category,
            expense.amount,
            expense.date.isoformat(),
        )
        return expense

    def remove(self, expense_id: str) -> bool:
        """Remove the expense with ``expense_id``; unknown identifiers are ignored."""

        remaining = [expense for expense in self._expenses if expense.id != expense_id]
        removed = len(remaining) != len(self._expenses)
        self._expenses = remaining
        if removed:
            LOGGER.info("Removed expense %s", expense_id)
        else:
            LOGGER.debug("Ignoring removal of unknown expense %s", expense_id)
        return removed

    def list(self) -> List[Expense]:
        """Return a snapshot of the expenses, most recent first."""

        return list(self._expenses)

    def get(self, expense_id: str) -> Expense:
        """Retrieve an expense, raising informative errors when missing."""

        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        raise KeyError(f"Expense {expense_id} not found")


def demo_expenses() -> List[Expense]:
    """Return deterministic sample expenses, most recent first."""

    return [
        Expense(
            id="demo-0005",
            amount=64.9,
            description="Electricity bill",
            category="utilities",
            date=date(2024, 3, 2),
        ),
        Expense(
            id="demo-0004",
            amount=18.5,
            description="Cinema tickets",
            category="entertainment",
            date=date(2024, 2, 17),
        ),
        Expense(
            id="demo-0003",
            amount=42.0,
            description="Weekly groceries",
            category="food",
            date=date(2024, 2, 9),
        ),
        Expense(
            id="demo-0002",
            amount=25.0,
            description="Pharmacy",
            category="Health",
            date=date(2024, 1, 21),
        ),
        Expense(
            id="demo-0001",
            amount=30.0,
            description="Monthly bus pass",
            category="transport",
            date=date(2024, 1, 3),
        ),
    ]
