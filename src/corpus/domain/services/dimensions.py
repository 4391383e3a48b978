"""Technical-drawing dimension lines for the corpus.

Builds the geometry a renderer needs to draw overall width, height and depth
annotations plus one annotation per shelf spacing. All output points are in
scene units, in the placement coordinate system.
"""

from __future__ import annotations

import math
from typing import Sequence

from ..units import to_scene_units
from ..value_objects import DimensionKind, DimensionLine, Envelope, Spacing, Vector3

__all__ = [
    "DIMENSION_OFFSET",
    "EXTENSION_OVERHANG",
    "DimensionLineBuilder",
]

# Distance of dimension lines from the corpus, in scene units.
DIMENSION_OFFSET = 0.12
# How far witness lines run past the dimension line.
EXTENSION_OVERHANG = 0.02

_LABEL_GAP = 0.04
_SIDE_LABEL_GAP = 0.055
_SPACING_LABEL_GAP = 0.045


class DimensionLineBuilder:
    """Builds dimension annotations from an envelope and its spacings."""

    def __init__(
        self,
        offset: float = DIMENSION_OFFSET,
        overhang: float = EXTENSION_OVERHANG,
    ) -> None:
        self.offset = offset
        self.overhang = overhang

    def build(
        self, envelope: Envelope, spacings: Sequence[Spacing] = ()
    ) -> list[DimensionLine]:
        """Build all dimension lines.

        Returns an empty list when any envelope dimension is not a positive
        finite number; there is nothing sensible to annotate.
        """
        w = to_scene_units(envelope.width)
        h = to_scene_units(envelope.height)
        d = to_scene_units(envelope.depth)
        if not all(math.isfinite(v) and v > 0 for v in (w, h, d)):
            return []

        lines = [
            self._width_line(envelope, w, d),
            self._height_line(envelope, w, h, d),
            self._depth_line(envelope, w, d),
        ]
        lines.extend(self._spacing_line(spacing, w) for spacing in spacings)
        return lines

    def _width_line(self, envelope: Envelope, w: float, d: float) -> DimensionLine:
        off, over = self.offset, self.overhang
        front = d / 2 + off
        return DimensionLine(
            kind=DimensionKind.WIDTH,
            value_mm=envelope.width,
            start=Vector3(-w / 2, -off, front),
            end=Vector3(w / 2, -off, front),
            extension_lines=(
                (Vector3(-w / 2, 0, d / 2), Vector3(-w / 2, -off - over, front)),
                (Vector3(w / 2, 0, d / 2), Vector3(w / 2, -off - over, front)),
            ),
            label_position=Vector3(0, -off - _LABEL_GAP, front),
        )

    def _height_line(
        self, envelope: Envelope, w: float, h: float, d: float
    ) -> DimensionLine:
        off, over = self.offset, self.overhang
        front = d / 2 + off
        x = -w / 2 - off
        return DimensionLine(
            kind=DimensionKind.HEIGHT,
            value_mm=envelope.height,
            start=Vector3(x, 0, front),
            end=Vector3(x, h, front),
            extension_lines=(
                (Vector3(-w / 2, 0, d / 2), Vector3(x - over, 0, front)),
                (Vector3(-w / 2, h, d / 2), Vector3(x - over, h, front)),
            ),
            label_position=Vector3(x - _SIDE_LABEL_GAP, h / 2, front),
        )

    def _depth_line(self, envelope: Envelope, w: float, d: float) -> DimensionLine:
        off, over = self.offset, self.overhang
        x = w / 2 + off
        return DimensionLine(
            kind=DimensionKind.DEPTH,
            value_mm=envelope.depth,
            start=Vector3(x, -off, -d / 2),
            end=Vector3(x, -off, d / 2),
            extension_lines=(
                (Vector3(w / 2, 0, -d / 2), Vector3(x + over, -off, -d / 2)),
                (Vector3(w / 2, 0, d / 2), Vector3(x + over, -off, d / 2)),
            ),
            label_position=Vector3(x + _SIDE_LABEL_GAP, -off, 0),
        )

    def _spacing_line(self, spacing: Spacing, w: float) -> DimensionLine:
        # Sits between the corpus and the depth annotation.
        x = w / 2 + self.offset * 0.5
        y_start = to_scene_units(spacing.y_start)
        y_end = to_scene_units(spacing.y_end)
        return DimensionLine(
            kind=DimensionKind.SPACING,
            value_mm=spacing.distance_mm,
            start=Vector3(x, y_start, 0),
            end=Vector3(x, y_end, 0),
            extension_lines=(
                (Vector3(w / 2, y_start, 0), Vector3(x + self.overhang, y_start, 0)),
                (Vector3(w / 2, y_end, 0), Vector3(x + self.overhang, y_end, 0)),
            ),
            label_position=Vector3(x + _SPACING_LABEL_GAP, (y_start + y_end) / 2, 0),
        )
