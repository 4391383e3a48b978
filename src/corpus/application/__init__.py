"""Application layer - use cases and DTOs."""

from .commands import BuildLayoutCommand, CorpusEditor
from .dtos import CorpusLayout, EditResult

__all__ = [
    "BuildLayoutCommand",
    "CorpusEditor",
    "CorpusLayout",
    "EditResult",
]
