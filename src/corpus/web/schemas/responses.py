"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from corpus.web.schemas.common import PanelSchema, Vector3Schema


class EnvelopeSchema(BaseModel):
    """Overall corpus dimensions in mm."""

    width: float
    height: float
    depth: float
    thickness: float
    top_offset: float = 0
    bottom_offset: float = 0


class PlacementSchema(BaseModel):
    """A panel box in scene units."""

    panel_id: str
    type: str
    size: Vector3Schema
    position: Vector3Schema


class SpacingSchema(BaseModel):
    """Clearance between two consecutive horizontal panels."""

    y_start: float = Field(..., description="Top edge of the lower panel in mm")
    y_end: float = Field(..., description="Bottom edge of the upper panel in mm")
    distance_mm: int = Field(..., description="Rounded clearance in mm")


class DimensionLineSchema(BaseModel):
    """Dimension annotation geometry in scene units."""

    kind: str
    value_mm: float
    start: Vector3Schema
    end: Vector3Schema
    extension_lines: list[tuple[Vector3Schema, Vector3Schema]]
    label_position: Vector3Schema


class LayoutResponseSchema(BaseModel):
    """Response for layout computation."""

    panels: list[PanelSchema] = Field(default_factory=list)
    envelope: EnvelopeSchema
    placements: list[PlacementSchema] = Field(default_factory=list)
    spacings: list[SpacingSchema] = Field(default_factory=list)
    dimension_lines: list[DimensionLineSchema] = Field(default_factory=list)
    closed_frame: bool = Field(..., description="Left, right, top and bottom present")
    has_overlap: bool = Field(..., description="Adjacent horizontal panels overlap")
    warnings: list[str] = Field(default_factory=list, description="Overlap warnings")


class EditResponseSchema(LayoutResponseSchema):
    """Response for an applied panel edit."""

    panel_id: str | None = Field(default=None, description="Id of the edited panel")


class PanelTypeOptionSchema(BaseModel):
    """A panel type that can be added."""

    type: str
    label: str


class AvailableTypesSchema(BaseModel):
    """Response listing the panel types that can still be added."""

    types: list[PanelTypeOptionSchema] = Field(default_factory=list)


class PanelDefaultsSchema(BaseModel):
    """Suggested entry-form values for a panel type."""

    type: str
    width: float
    height: float
    depth: float
    thickness: float


class OverlapPairSchema(BaseModel):
    """Two adjacent horizontal panels whose spans intersect."""

    lower_id: str
    upper_id: str
    amount_mm: float
    message: str


class OverlapResponseSchema(BaseModel):
    """Response for the overlap check."""

    has_overlap: bool
    overlaps: list[OverlapPairSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for corpus file validation."""

    is_valid: bool = Field(..., description="Whether the file has no errors")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
