"""Vertical layout of horizontal panels.

Computes ``y_position`` for the top, bottom and shelf panels of a corpus:

- top sits at the corpus height (edge convention, top face),
- bottom sits at 0 (edge convention, bottom face),
- shelves are spread with equal gaps between neighbouring board faces
  (center convention), unless a shelf already has a position and the caller
  did not ask for a forced redistribution.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..entities import BottomPanel, Panel, ShelfPanel, TopPanel
from ..value_objects import PanelType

__all__ = [
    "DEFAULT_CORPUS_HEIGHT_MM",
    "VerticalLayoutSolver",
]

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_HEIGHT_MM = 720


def _find(panels: Sequence[Panel], panel_type: PanelType) -> Panel | None:
    return next((p for p in panels if p.panel_type == panel_type), None)


class VerticalLayoutSolver:
    """Solves the vertical positions of horizontal panels.

    The solver is stateless; every call works on the panel list it is given
    and returns a new list in the same order.

    Example:
        >>> solver = VerticalLayoutSolver()
        >>> positioned = solver.solve(panels, force_redistribute=True)
    """

    def corpus_height(self, panels: Sequence[Panel]) -> float:
        """Height of the left side, else the right side, else 720 mm."""
        side = _find(panels, PanelType.LEFT_SIDE) or _find(panels, PanelType.RIGHT_SIDE)
        if side is None:
            return DEFAULT_CORPUS_HEIGHT_MM
        return side.height

    def usable_span(self, panels: Sequence[Panel]) -> tuple[float, float]:
        """Return the vertical span available to shelves.

        Returns:
            Tuple of (bottom_top_edge, top_bottom_edge) in millimetres: the
            upper face of the bottom panel (0 without one) and the lower face
            of the top panel (the corpus height without one).
        """
        height = self.corpus_height(panels)
        bottom = _find(panels, PanelType.BOTTOM)
        top = _find(panels, PanelType.TOP)
        bottom_top_edge = bottom.thickness if bottom is not None else 0
        top_bottom_edge = height - top.thickness if top is not None else height
        return bottom_top_edge, top_bottom_edge

    def gap_size(self, panels: Sequence[Panel]) -> float:
        """Equal gap between shelves for a full redistribution.

        There are shelf_count + 1 gaps: below the first shelf, between each
        pair and above the last. The result is negative when the shelves do
        not fit; overlap checking reports that case.
        """
        shelves = [p for p in panels if p.panel_type == PanelType.SHELF]
        bottom_top_edge, top_bottom_edge = self.usable_span(panels)
        available_space = top_bottom_edge - bottom_top_edge
        total_shelf_thickness = sum(s.thickness for s in shelves)
        return (available_space - total_shelf_thickness) / (len(shelves) + 1)

    def solve(
        self, panels: Sequence[Panel], force_redistribute: bool = False
    ) -> list[Panel]:
        """Recompute y_position for every horizontal panel.

        Args:
            panels: Panels in registry order.
            force_redistribute: Re-spread every shelf even if it already has
                a position.

        Returns:
            New list of panels, same order, with positions refreshed. Side
            panels are passed through unchanged.
        """
        height = self.corpus_height(panels)
        shelves = [p for p in panels if isinstance(p, ShelfPanel)]
        centers = self._distributed_centers(panels, shelves) if shelves else []
        shelf_index = 0

        result: list[Panel] = []
        for panel in panels:
            if isinstance(panel, TopPanel):
                result.append(panel.with_y_position(height))
            elif isinstance(panel, BottomPanel):
                result.append(panel.with_y_position(0))
            elif isinstance(panel, ShelfPanel):
                if not force_redistribute and panel.y_position is not None:
                    result.append(panel)
                else:
                    result.append(panel.with_y_position(centers[shelf_index]))
                shelf_index += 1
            else:
                result.append(panel)

        logger.debug(
            f"Solved vertical layout: height={height}, shelves={len(shelves)}, "
            f"forced={force_redistribute}"
        )
        return result

    def _distributed_centers(
        self, panels: Sequence[Panel], shelves: list[ShelfPanel]
    ) -> list[float]:
        """Equal-gap center positions for all shelves, in list order."""
        bottom_top_edge, _ = self.usable_span(panels)
        gap = self.gap_size(panels)
        if gap < 0:
            logger.debug(f"Shelves do not fit: gap size {gap:.2f} mm")

        centers: list[float] = []
        cursor = bottom_top_edge + gap
        for shelf in shelves:
            centers.append(cursor + shelf.thickness / 2)
            cursor += shelf.thickness + gap
        return centers