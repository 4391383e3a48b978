"""API routers for the REST API."""

from corpus.web.routers.corpus import router as corpus_router
from corpus.web.routers.validate import router as validate_router

__all__ = [
    "corpus_router",
    "validate_router",
]
