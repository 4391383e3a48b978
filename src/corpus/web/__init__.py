"""FastAPI REST API for corpus layout.

Endpoints are stateless: every request carries the full panel snapshot and
every response returns the updated snapshot with its layout.

Usage:
    uvicorn corpus.web:app --reload
"""

from corpus.web.app import app, create_app

__all__ = ["app", "create_app"]
