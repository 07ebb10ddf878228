"""Mini README: Analytics derived from expense snapshots.

``aggregator`` holds the pure grouping functions feeding the charts and
``insights`` turns their output into the headline figures and category
recommendations shown beside them.
"""

from .aggregator import by_category, by_month, category_label, month_label, total_amount
from .insights import category_recommendations, summarise_insights

__all__ = [
    "by_category",
    "by_month",
    "category_label",
    "category_recommendations",
    "month_label",
    "summarise_insights",
    "total_amount",
]
