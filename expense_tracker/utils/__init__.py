"""Mini README: Utility helpers for the expense tracker.

Currently exports the form submission validator shared by the HTML form and
the JSON API.
"""

from .submission import ExpenseSubmission

__all__ = ["ExpenseSubmission"]
