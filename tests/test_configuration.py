"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from expense_tracker.configuration import DEFAULT_CATEGORIES, ExpenseTrackerSettings


def test_defaults_offer_the_standard_categories(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXPENSE_TRACKER_CATEGORIES", raising=False)
    monkeypatch.delenv("EXPENSE_TRACKER_DEFAULT_CATEGORY", raising=False)

    settings = ExpenseTrackerSettings(_env_file=None)

    assert settings.categories == DEFAULT_CATEGORIES
    assert settings.default_category == "general"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPENSE_TRACKER_INTERFACE_PORT", "9001")
    monkeypatch.setenv("EXPENSE_TRACKER_CATEGORIES", '["rent", "food"]')
    monkeypatch.setenv("EXPENSE_TRACKER_DEFAULT_CATEGORY", "rent")
    monkeypatch.setenv("EXPENSE_TRACKER_SEED_DEMO_DATA", "true")

    settings = ExpenseTrackerSettings(_env_file=None)

    assert settings.interface_port == 9001
    assert settings.categories == ["rent", "food"]
    assert settings.default_category == "rent"
    assert settings.seed_demo_data is True


def test_unknown_default_category_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ExpenseTrackerSettings(_env_file=None, categories=["food"], default_category="general")


def test_port_must_be_in_range() -> None:
    with pytest.raises(ValidationError):
        ExpenseTrackerSettings(_env_file=None, interface_port=70000)
