"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from corpus.application.config import PanelConfig


class CorpusRequest(BaseModel):
    """Request carrying the current panel snapshot."""

    panels: list[PanelConfig] = Field(
        default_factory=list, description="Panels in registry order"
    )


class PanelCandidateSchema(BaseModel):
    """Panel entry-form values.

    Sizes may be numbers or the raw text typed by the user. Omitted sizes
    take the defaults for the panel type.
    """

    type: str | None = Field(default=None, description="Panel type")
    width: float | str | None = Field(default=None, description="Width in mm")
    height: float | str | None = Field(default=None, description="Height in mm")
    depth: float | str | None = Field(default=None, description="Depth in mm")
    thickness: float | str | None = Field(default=None, description="Thickness in mm")


class AddPanelRequest(CorpusRequest):
    """Request for adding a panel."""

    panel: PanelCandidateSchema = Field(..., description="Panel to add")


class RemovePanelRequest(CorpusRequest):
    """Request for removing a panel."""

    panel_id: str = Field(..., min_length=1, description="Id of the panel to remove")


class MovePanelRequest(CorpusRequest):
    """Request for moving a shelf."""

    panel_id: str = Field(..., min_length=1, description="Id of the shelf to move")
    y_position: float | str = Field(..., description="New shelf center in mm")


class ConfigValidateRequest(BaseModel):
    """Request for validating a corpus file."""

    config: dict[str, Any] = Field(..., description="Corpus file JSON")
