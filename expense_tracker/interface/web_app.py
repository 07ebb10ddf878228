"""Mini README: FastAPI-powered expense tracker interface.

Structure:
    * create_application - application factory wiring routes to a given store.
    * build_application - uvicorn factory creating a fresh store from settings.

Two pages mirror the tracker workflow: ``/`` lists expenses beside the entry
form and summary cards, ``/analytics`` draws the monthly and category charts
with insights. A small JSON API exposes the same operations for scripts.
The store is injected at construction, so every route shares one collection.
"""

from __future__ import annotations

from datetime import date as calendar_date
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..analytics import by_category, by_month, summarise_insights, total_amount
from ..configuration import ExpenseTrackerSettings, get_settings
from ..expenses import ExpenseStore, demo_expenses
from ..logging_utils import get_logger
from ..utils import ExpenseSubmission

LOGGER = get_logger(__name__)


def create_application(
    store: ExpenseStore, settings: Optional[ExpenseTrackerSettings] = None
) -> FastAPI:
    """Create the FastAPI application serving ``store``."""

    if store is None:
        raise ValueError("An ExpenseStore must be supplied to create the application.")
    settings = settings or get_settings()

    app = FastAPI(title="Expense Tracker", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    templates.env.filters["money"] = lambda value: f"{settings.currency_symbol}{value:.2f}"
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")
    app.state.store = store

    def submit(amount: str, description: str, category: str, date: str):
        submission = ExpenseSubmission.from_form(
            amount,
            description,
            category,
            date,
            categories=settings.categories,
            default_category=settings.default_category,
        )
        return submission.apply(store)

    def tracker_context(request: Request, error: Optional[str] = None) -> Dict[str, Any]:
        expenses = store.list()
        return {
            "request": request,
            "expenses": expenses,
            "total": total_amount(expenses),
            "category_totals": by_category(expenses),
            "categories": settings.categories,
            "default_category": settings.default_category,
            "today": calendar_date.today().isoformat(),
            "error": error,
        }

    @app.get("/", response_class=HTMLResponse)
    async def tracker(request: Request) -> HTMLResponse:
        """Render the expense list, summary cards and entry form."""

        LOGGER.debug("Rendering tracker with %s expenses", len(store))
        return templates.TemplateResponse(
            request, "expenses.html", tracker_context(request)
        )

    @app.get("/analytics", response_class=HTMLResponse)
    async def analytics(request: Request) -> HTMLResponse:
        """Render monthly and category charts with spending insights."""

        expenses = store.list()
        return templates.TemplateResponse(
            request,
            "analytics.html",
            {
                "request": request,
                "monthly": by_month(expenses),
                "categories": by_category(expenses),
                "insights": summarise_insights(expenses),
            },
        )

    @app.post("/expenses")
    async def add_expense_form(
        request: Request,
        amount: str = Form(""),
        description: str = Form(""),
        category: str = Form(""),
        date: str = Form(""),
    ) -> Response:
        """Record a submitted expense and return to the tracker page."""

        try:
            submit(amount, description, category, date)
        except ValueError as error:
            LOGGER.warning("Rejected expense submission: %s", error)
            return templates.TemplateResponse(
                request,
                "expenses.html",
                tracker_context(request, error=str(error)),
                status_code=400,
            )
        return RedirectResponse(url="/", status_code=303)

    @app.post("/expenses/{expense_id}/delete")
    async def delete_expense_form(expense_id: str) -> RedirectResponse:
        """Remove an expense; unknown identifiers are ignored."""

        store.remove(expense_id)
        return RedirectResponse(url="/", status_code=303)

    @app.get("/api/expenses")
    async def list_expenses() -> JSONResponse:
        """Return all expenses, most recent first."""

        return JSONResponse({"expenses": [expense.as_dict() for expense in store.list()]})

    @app.post("/api/expenses")
    async def add_expense(
        amount: str = Form(""),
        description: str = Form(""),
        category: str = Form(""),
        date: str = Form(""),
    ) -> JSONResponse:
        """Record an expense and return the stored record."""

        try:
            expense = submit(amount, description, category, date)
        except ValueError as error:
            LOGGER.warning("Rejected expense submission: %s", error)
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(expense.as_dict(), status_code=201)

    @app.delete("/api/expenses/{expense_id}")
    async def delete_expense(expense_id: str) -> Response:
        """Delete an expense; succeeds whether or not it existed."""

        store.remove(expense_id)
        return Response(status_code=204)

    @app.get("/api/analytics")
    async def analytics_data() -> JSONResponse:
        """Return chart series and insights for the current expenses."""

        expenses = store.list()
        return JSONResponse(
            {
                "total": total_amount(expenses),
                "monthly": by_month(expenses),
                "categories": by_category(expenses),
                "insights": summarise_insights(expenses),
            }
        )

    return app


def build_application() -> FastAPI:
    """Create the application with a fresh store configured from settings."""

    settings = get_settings()
    store = ExpenseStore(demo_expenses() if settings.seed_demo_data else None)
    LOGGER.info(
        "Starting expense tracker (%s) with %s seeded expenses",
        settings.environment,
        len(store),
    )
    return create_application(store, settings)
