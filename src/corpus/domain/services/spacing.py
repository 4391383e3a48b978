"""Clearance annotations between consecutive horizontal panels."""

from __future__ import annotations

from typing import Sequence

from ..entities import Panel
from ..units import round_half_up
from ..value_objects import Spacing
from .overlap import positioned_horizontal_panels

__all__ = [
    "MIN_ANNOTATED_SPACING_MM",
    "SpacingAnnotator",
]

# Gaps at or below this are not annotated.
MIN_ANNOTATED_SPACING_MM = 10


class SpacingAnnotator:
    """Derives the vertical clearance between stacked horizontal panels.

    Panels are ordered by y_position. For each neighbouring pair the clear
    distance runs from the upper face of the lower panel to the lower face of
    the upper panel, using each panel type's own position convention (see
    ``corpus.domain.entities``).
    """

    def __init__(self, min_spacing_mm: float = MIN_ANNOTATED_SPACING_MM) -> None:
        self.min_spacing_mm = min_spacing_mm

    def compute_spacings(self, panels: Sequence[Panel]) -> list[Spacing]:
        ordered = positioned_horizontal_panels(panels)
        spacings: list[Spacing] = []
        for current, following in zip(ordered, ordered[1:]):
            y_start = current.top_edge()
            y_end = following.bottom_edge()
            distance = y_end - y_start
            if distance > self.min_spacing_mm:
                spacings.append(
                    Spacing(
                        y_start=y_start,
                        y_end=y_end,
                        distance_mm=round_half_up(distance),
                    )
                )
        return spacings
