"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from latestdoc.api import app

    uvicorn latestdoc.api:app --reload
"""

from latestdoc.api.app import app, create_app

__all__ = ["app", "create_app"]
