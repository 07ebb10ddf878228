"""Mini README: Validation of expense entry form values.

The store trusts its callers, so raw form fields are checked here before an
expense is recorded. Keeping the helper free of web framework imports lets
the CLI, tests and API share the same rules.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..expenses import Expense, ExpenseStore, parse_date


def _parse_amount(raw: Optional[str]) -> float:
    """Convert numeric text to a finite, non-negative amount."""

    text = (raw or "").strip()
    if not text:
        raise ValueError("Amount is required.")
    try:
        amount = float(text)
    except ValueError as error:
        raise ValueError(f"Amount '{text}' is not a number.") from error
    if not math.isfinite(amount):
        raise ValueError("Amount must be a finite number.")
    if amount < 0:
        raise ValueError("Amount cannot be negative.")
    return amount


@dataclass(frozen=True, slots=True)
class ExpenseSubmission:
    """Trusted values ready to hand to ``ExpenseStore.add``."""

    amount: float
    description: str
    category: str
    spent_on: date

    @classmethod
    def from_form(
        cls,
        amount: Optional[str],
        description: Optional[str],
        category: Optional[str],
        spent_on: Optional[str],
        *,
        categories: Iterable[str],
        default_category: str,
        today: Optional[date] = None,
    ) -> "ExpenseSubmission":
        """Validate raw form fields, raising ``ValueError`` on bad input."""

        cleaned_description = (description or "").strip()
        if not cleaned_description:
            raise ValueError("Description is required.")

        chosen_category = (category or "").strip() or default_category
        if chosen_category not in set(categories):
            raise ValueError(f"Unsupported category: {chosen_category}")

        date_text = (spent_on or "").strip()
        if date_text:
            try:
                parsed_date = parse_date(date_text)
            except ValueError as error:
                raise ValueError(f"Date '{date_text}' is not in YYYY-MM-DD format.") from error
        else:
            parsed_date = today or date.today()

        return cls(
            amount=_parse_amount(amount),
            description=cleaned_description,
            category=chosen_category,
            spent_on=parsed_date,
        )

    def apply(self, store: ExpenseStore) -> Expense:
        """Record the submission in ``store``."""

        return store.add(self.amount, self.description, self.category, self.spent_on)
