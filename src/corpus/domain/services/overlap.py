"""Overlap detection between horizontal panels.

The check treats every horizontal panel's y_position as a center and tests
``y +/- thickness/2`` spans, including top and bottom panels whose positions
actually follow the edge convention. This approximation is long-standing
behaviour of the corpus builder's warning; switching top and bottom to their
real faces changes which layouts warn and needs its own review.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..entities import HorizontalPanel, Panel

__all__ = [
    "OverlapPair",
    "OverlapValidator",
    "positioned_horizontal_panels",
]

logger = logging.getLogger(__name__)


def positioned_horizontal_panels(panels: Sequence[Panel]) -> list[HorizontalPanel]:
    """Horizontal panels that have a y_position, sorted ascending by it.

    The sort is stable, so panels at the same height keep registry order.
    """
    horizontal = [
        p for p in panels if isinstance(p, HorizontalPanel) and p.y_position is not None
    ]
    return sorted(horizontal, key=lambda p: p.y_position)


@dataclass(frozen=True)
class OverlapPair:
    """Two vertically adjacent panels whose spans intersect.

    Attributes:
        lower: Panel with the smaller y_position.
        upper: Panel with the next y_position.
        amount_mm: How far the lower span reaches past the upper one.
    """

    lower: HorizontalPanel
    upper: HorizontalPanel
    amount_mm: float

    @property
    def message(self) -> str:
        return (
            f"{self.lower.panel_type.label} ({self.lower.id}) overlaps "
            f"{self.upper.panel_type.label} ({self.upper.id}) by {self.amount_mm:.1f} mm"
        )


class OverlapValidator:
    """Advisory overlap check for horizontal panels.

    Never raises and never blocks a mutation; callers turn the result into a
    user-facing warning.
    """

    def find_overlaps(self, panels: Sequence[Panel]) -> list[OverlapPair]:
        """Return every adjacent pair whose spans intersect."""
        ordered = positioned_horizontal_panels(panels)
        overlaps: list[OverlapPair] = []
        for current, following in zip(ordered, ordered[1:]):
            current_top = current.y_position + current.thickness / 2
            next_bottom = following.y_position - following.thickness / 2
            if current_top > next_bottom:
                overlaps.append(
                    OverlapPair(
                        lower=current,
                        upper=following,
                        amount_mm=current_top - next_bottom,
                    )
                )
        if overlaps:
            logger.warning(f"Detected {len(overlaps)} overlapping panel pair(s)")
        return overlaps

    def has_overlap(self, panels: Sequence[Panel]) -> bool:
        """True if any two adjacent horizontal panels intersect."""
        return bool(self.find_overlaps(panels))
