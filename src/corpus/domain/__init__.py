"""Domain layer - panel model and layout engine."""

from .entities import (
    BottomPanel,
    HorizontalPanel,
    Panel,
    ShelfPanel,
    SidePanel,
    TopPanel,
    panel_from_fields,
)
from .registry import (
    AddPanelResult,
    MoveShelfResult,
    PanelCandidate,
    PanelRegistry,
    add_panel,
    available_types_to_add,
    default_candidate,
    move_shelf,
    reconcile,
    remove_panel,
)
from .services import (
    DimensionLineBuilder,
    EnvelopeCalculator,
    OverlapPair,
    OverlapValidator,
    PlacementCalculator,
    SpacingAnnotator,
    VerticalLayoutSolver,
    has_closed_frame,
)
from .units import clamp_dimension, to_scene_units
from .value_objects import (
    DEFAULT_ENVELOPE,
    DimensionKind,
    DimensionLine,
    Envelope,
    PanelType,
    Placement,
    Spacing,
    Vector3,
)

__all__ = [
    "AddPanelResult",
    "BottomPanel",
    "DEFAULT_ENVELOPE",
    "DimensionKind",
    "DimensionLine",
    "DimensionLineBuilder",
    "Envelope",
    "EnvelopeCalculator",
    "HorizontalPanel",
    "MoveShelfResult",
    "OverlapPair",
    "OverlapValidator",
    "Panel",
    "PanelCandidate",
    "PanelRegistry",
    "PanelType",
    "Placement",
    "PlacementCalculator",
    "ShelfPanel",
    "SidePanel",
    "Spacing",
    "SpacingAnnotator",
    "TopPanel",
    "Vector3",
    "VerticalLayoutSolver",
    "add_panel",
    "available_types_to_add",
    "clamp_dimension",
    "default_candidate",
    "has_closed_frame",
    "move_shelf",
    "panel_from_fields",
    "reconcile",
    "remove_panel",
    "to_scene_units",
]
