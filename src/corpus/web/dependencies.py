"""FastAPI dependency injection for corpus services."""

from typing import Annotated

from fastapi import Depends

from corpus.application import BuildLayoutCommand, CorpusEditor
from corpus.application.config import (
    CURRENT_SCHEMA_VERSION,
    config_to_registry,
    load_config_from_dict,
)
from corpus.domain import PanelRegistry
from corpus.web.schemas.requests import CorpusRequest


def get_layout_command() -> BuildLayoutCommand:
    """Dependency for BuildLayoutCommand."""
    return BuildLayoutCommand()


def get_corpus_editor(
    layout_command: Annotated[BuildLayoutCommand, Depends(get_layout_command)],
) -> CorpusEditor:
    """Dependency for CorpusEditor."""
    return CorpusEditor(layout_command=layout_command)


def registry_from_request(request: CorpusRequest) -> PanelRegistry:
    """Turn the snapshot in a request into a reconciled registry.

    Goes through the corpus file loader so that cardinality and duplicate
    id checks match those applied to files.

    Raises:
        ConfigError: If the snapshot is not a valid corpus.
    """
    config = load_config_from_dict(
        {
            "schema_version": CURRENT_SCHEMA_VERSION,
            "panels": [
                panel.model_dump(mode="json", exclude_none=True)
                for panel in request.panels
            ],
        }
    )
    return config_to_registry(config)


# Type aliases for cleaner endpoint signatures
LayoutCommandDep = Annotated[BuildLayoutCommand, Depends(get_layout_command)]
CorpusEditorDep = Annotated[CorpusEditor, Depends(get_corpus_editor)]
