"""Mini README: Web interface for the expense tracker.

Exports the FastAPI application factories. ``create_application`` takes the
store explicitly; ``build_application`` is the zero-argument factory used by
uvicorn.
"""

from .web_app import build_application, create_application

__all__ = ["build_application", "create_application"]
