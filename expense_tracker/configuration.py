"""Mini README: Centralised configuration for the expense tracker.

Structure:
    * DEFAULT_CATEGORIES - category choices offered by the entry form.
    * ExpenseTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``EXPENSE_TRACKER_*`` environment
    variables (or a local ``.env`` file). The settings are validated once
    per process and cached.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, validator
from pydantic_settings import BaseSettings

DEFAULT_CATEGORIES = [
    "Health",
    "general",
    "food",
    "transport",
    "entertainment",
    "utilities",
]


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the expense tracker."""

    environment: str = Field(
        "development",
        description="Environment label; anything but 'production' enables auto-reload.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI before the server starts.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web interface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web interface exposes.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts in rendered pages.",
    )
    categories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CATEGORIES),
        description="Categories offered by the entry form (JSON list in the environment).",
    )
    default_category: str = Field(
        "general",
        description="Category preselected in the form and used when none is submitted.",
    )
    seed_demo_data: bool = Field(
        False,
        description="Populate the store with sample expenses on start-up.",
    )

    class Config:
        env_prefix = "EXPENSE_TRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("categories")
    def _require_categories(cls, value: List[str]) -> List[str]:
        """Strip blanks and refuse an empty category list."""

        cleaned = [category.strip() for category in value if category.strip()]
        if not cleaned:
            raise ValueError("At least one expense category must be configured.")
        return cleaned

    @validator("default_category")
    def _default_is_known(cls, value: str, values: dict) -> str:
        """Ensure the default category is one of the configured choices."""

        categories = values.get("categories") or []
        if value not in categories:
            raise ValueError(
                f"Default category '{value}' is not one of the configured categories."
            )
        return value


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()
