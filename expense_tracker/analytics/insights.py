"""Mini README: Spending insights for the analytics page.

Structure:
    * summarise_insights - headline figures derived from the aggregations.
    * category_recommendations - share of the total per category with advice.

Figures are derived from ``by_month`` and ``by_category`` so the page text
always agrees with the charts drawn from the same data.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional

from ..expenses import Expense
from ..logging_utils import get_logger
from .aggregator import by_category, by_month, total_amount

LOGGER = get_logger(__name__)

REDUCE_ABOVE_PERCENT = 30
CONTROLLED_BELOW_PERCENT = 10


def _share_percentage(value: float, total: float) -> int:
    """Whole-number share of ``total``, rounding halves upwards."""

    if not total:
        return 0
    return int(math.floor(value / total * 100 + 0.5))


def category_recommendations(
    categories: List[Dict[str, Any]], total: float
) -> List[Dict[str, Any]]:
    """Attach a percentage and optional advice to each category entry."""

    recommendations = []
    for entry in categories:
        percentage = _share_percentage(entry["value"], total)
        advice: Optional[str] = None
        if percentage > REDUCE_ABOVE_PERCENT:
            advice = "Consider reducing"
        elif percentage < CONTROLLED_BELOW_PERCENT:
            advice = "Well controlled"
        recommendations.append(
            {
                "name": entry["name"],
                "value": entry["value"],
                "percentage": percentage,
                "advice": advice,
            }
        )
    return recommendations


def summarise_insights(expenses: Iterable[Expense]) -> Dict[str, Any]:
    """Aggregate headline spending figures for the analytics view."""

    snapshot = list(expenses)
    monthly = by_month(snapshot)
    categories = by_category(snapshot)
    total = total_amount(snapshot)

    highest_month = None
    lowest_month = None
    for entry in monthly:
        # Strict comparisons keep the first month encountered on ties.
        if entry["amount"] > (highest_month["amount"] if highest_month else 0):
            highest_month = entry
        if lowest_month is None or entry["amount"] < lowest_month["amount"]:
            lowest_month = entry

    top_category = None
    for entry in categories:
        if entry["value"] > (top_category["value"] if top_category else 0):
            top_category = entry

    insights = {
        "total": total,
        "average_monthly": total / len(monthly) if monthly else 0.0,
        "highest_month": highest_month,
        "lowest_month": lowest_month,
        "top_category": top_category,
        "recommendations": category_recommendations(categories, total),
    }
    LOGGER.debug(
        "Insights computed -> months: %s categories: %s total: %.2f",
        len(monthly),
        len(categories),
        total,
    )
    return insights
