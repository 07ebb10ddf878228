"""Mini README: Core package initializer for the expense tracker.

The package records personal expenses in memory and serves them through a
small web interface with monthly and category analytics. Convenience imports
here expose the store and logging helpers without requiring callers to know
the module layout.
"""

from .expenses import Expense, ExpenseStore
from .logging_utils import get_logger

__all__ = ["Expense", "ExpenseStore", "get_logger"]
