"""Corpus envelope and 3D panel placement.

Placement coordinate system (scene units, metres):
- Origin: horizontal and depth center of the corpus, on the floor
- X: width (left to right)
- Y: height (floor up)
- Z: depth (back to front)
"""

from __future__ import annotations

from typing import Sequence

from ..entities import Panel
from ..units import to_scene_units
from ..value_objects import DEFAULT_ENVELOPE, Envelope, PanelType, Placement, Vector3
from .vertical_layout import DEFAULT_CORPUS_HEIGHT_MM

__all__ = [
    "BOTH_SIDES_INTERIOR_MM",
    "DEFAULT_DEPTH_MM",
    "DEFAULT_THICKNESS_MM",
    "DEFAULT_WIDTH_MM",
    "ONE_SIDE_INTERIOR_MM",
    "EnvelopeCalculator",
    "PlacementCalculator",
    "has_closed_frame",
]

DEFAULT_WIDTH_MM = 600
DEFAULT_DEPTH_MM = 560
DEFAULT_THICKNESS_MM = 18

# Default interior span between two sides.
BOTH_SIDES_INTERIOR_MM = 564
# Interior span plus the nominal thickness of the missing side.
ONE_SIDE_INTERIOR_MM = 582


def _find(panels: Sequence[Panel], panel_type: PanelType) -> Panel | None:
    return next((p for p in panels if p.panel_type == panel_type), None)


def _first_present(*candidates: Panel | None) -> Panel | None:
    return next((c for c in candidates if c is not None), None)


def has_closed_frame(panels: Sequence[Panel]) -> bool:
    """True when left, right, top and bottom are all present."""
    present = {p.panel_type for p in panels}
    return {
        PanelType.LEFT_SIDE,
        PanelType.RIGHT_SIDE,
        PanelType.TOP,
        PanelType.BOTTOM,
    } <= present


class EnvelopeCalculator:
    """Derives the overall corpus dimensions from the panels present."""

    def compute_envelope(self, panels: Sequence[Panel]) -> Envelope:
        """Compute the envelope in millimetres.

        Side panels are the reference for height and thickness; depth falls
        back to the top, then the bottom panel. Width is the sides' widths
        plus a fixed interior span.
        """
        if not panels:
            return DEFAULT_ENVELOPE

        left = _find(panels, PanelType.LEFT_SIDE)
        right = _find(panels, PanelType.RIGHT_SIDE)
        top = _find(panels, PanelType.TOP)
        bottom = _find(panels, PanelType.BOTTOM)

        side = _first_present(left, right)
        height = side.height if side is not None else DEFAULT_CORPUS_HEIGHT_MM
        thickness = side.thickness if side is not None else DEFAULT_THICKNESS_MM
        depth_ref = _first_present(left, right, top, bottom)
        depth = depth_ref.depth if depth_ref is not None else DEFAULT_DEPTH_MM

        if left is not None and right is not None:
            width = left.width + right.width + BOTH_SIDES_INTERIOR_MM
        elif side is not None:
            width = side.width + ONE_SIDE_INTERIOR_MM
        else:
            width = DEFAULT_WIDTH_MM

        return Envelope(
            width=width,
            height=height,
            depth=depth,
            thickness=thickness,
            top_offset=0,
            bottom_offset=0,
        )


class PlacementCalculator:
    """Maps panels to scene-space boxes.

    Side panels stand flush with the left and right edges of the envelope.
    Horizontal panels are centered in X and Z; the thin dimension goes into
    the vertical (second) size slot.
    """

    def compute_placements(
        self, panels: Sequence[Panel], envelope: Envelope
    ) -> list[Placement]:
        """Compute one placement per panel, in registry order."""
        return [self.place(panel, envelope) for panel in panels]

    def place(self, panel: Panel, envelope: Envelope) -> Placement:
        """Compute the placement of a single panel."""
        half_width = to_scene_units(envelope.width) / 2
        envelope_height = to_scene_units(envelope.height)
        thickness = to_scene_units(panel.thickness)
        depth = to_scene_units(panel.depth)

        match panel.panel_type:
            case PanelType.LEFT_SIDE | PanelType.RIGHT_SIDE:
                height = to_scene_units(panel.height)
                x = half_width - thickness / 2
                if panel.panel_type == PanelType.LEFT_SIDE:
                    x = -x
                size = Vector3(thickness, height, depth)
                position = Vector3(x, height / 2, 0)

            case PanelType.TOP:
                size = Vector3(to_scene_units(panel.width), thickness, depth)
                position = Vector3(0, envelope_height - thickness / 2, 0)

            case PanelType.BOTTOM:
                size = Vector3(to_scene_units(panel.width), thickness, depth)
                position = Vector3(0, thickness / 2, 0)

            case PanelType.SHELF:
                size = Vector3(to_scene_units(panel.width), thickness, depth)
                if panel.y_position is not None:
                    y = to_scene_units(panel.y_position)
                else:
                    y = envelope_height / 2
                position = Vector3(0, y, 0)

            case _:
                raise ValueError(f"Unknown panel type: {panel.panel_type}")

        return Placement(
            panel_id=panel.id,
            panel_type=panel.panel_type,
            size=size,
            position=position,
        )
