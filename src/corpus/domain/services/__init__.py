"""Domain services for the corpus layout engine."""

from .dimensions import DimensionLineBuilder
from .envelope import EnvelopeCalculator, PlacementCalculator, has_closed_frame
from .overlap import OverlapPair, OverlapValidator, positioned_horizontal_panels
from .spacing import SpacingAnnotator
from .vertical_layout import VerticalLayoutSolver

__all__ = [
    "DimensionLineBuilder",
    "EnvelopeCalculator",
    "OverlapPair",
    "OverlapValidator",
    "PlacementCalculator",
    "SpacingAnnotator",
    "VerticalLayoutSolver",
    "has_closed_frame",
    "positioned_horizontal_panels",
]
