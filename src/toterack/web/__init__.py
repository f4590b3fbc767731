"""REST API for tote rack quotes.

Run with:
    uvicorn toterack.web:app --reload
"""

from toterack.web.app import app, create_app

__all__ = ["app", "create_app"]
