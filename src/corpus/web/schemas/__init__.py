"""Pydantic schemas for the REST API."""

from corpus.web.schemas.common import PanelSchema, Vector3Schema
from corpus.web.schemas.requests import (
    AddPanelRequest,
    ConfigValidateRequest,
    CorpusRequest,
    MovePanelRequest,
    PanelCandidateSchema,
    RemovePanelRequest,
)
from corpus.web.schemas.responses import (
    AvailableTypesSchema,
    DimensionLineSchema,
    EditResponseSchema,
    EnvelopeSchema,
    ErrorResponseSchema,
    LayoutResponseSchema,
    OverlapPairSchema,
    OverlapResponseSchema,
    PanelDefaultsSchema,
    PanelTypeOptionSchema,
    PlacementSchema,
    SpacingSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "PanelSchema",
    "Vector3Schema",
    # Requests
    "AddPanelRequest",
    "ConfigValidateRequest",
    "CorpusRequest",
    "MovePanelRequest",
    "PanelCandidateSchema",
    "RemovePanelRequest",
    # Responses
    "AvailableTypesSchema",
    "DimensionLineSchema",
    "EditResponseSchema",
    "EnvelopeSchema",
    "ErrorResponseSchema",
    "LayoutResponseSchema",
    "OverlapPairSchema",
    "OverlapResponseSchema",
    "PanelDefaultsSchema",
    "PanelTypeOptionSchema",
    "PlacementSchema",
    "SpacingSchema",
    "ValidationResultSchema",
]
