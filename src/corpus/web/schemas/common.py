"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from corpus.domain import PanelType


class Vector3Schema(BaseModel):
    """Point or size in scene units (metres)."""

    x: float
    y: float
    z: float


class PanelSchema(BaseModel):
    """A panel as stored in the registry."""

    id: str = Field(..., description="Panel id")
    type: PanelType = Field(..., description="Panel type")
    width: float = Field(..., description="Width in mm")
    height: float = Field(..., description="Height in mm")
    depth: float = Field(..., description="Depth in mm")
    thickness: float = Field(..., description="Thickness in mm")
    y_position: float | None = Field(
        default=None, description="Vertical position in mm (horizontal panels)"
    )
