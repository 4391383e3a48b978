"""Output formatters and exporters for corpus layouts."""

from __future__ import annotations

import json
from typing import Any

from corpus.application.dtos import CorpusLayout
from corpus.domain import (
    DimensionLine,
    HorizontalPanel,
    PanelRegistry,
    PanelType,
    Placement,
    Vector3,
    to_scene_units,
)


def _short_id(panel_id: str) -> str:
    return panel_id[:8]


class PanelTableFormatter:
    """Formats the panel registry as a table."""

    def format(self, registry: PanelRegistry) -> str:
        if not registry:
            return "No panels in corpus."

        lines = [
            "PANELS",
            "=" * 72,
            f"{'Id':<10} {'Type':<12} {'Width':>7} {'Height':>7} {'Depth':>7} "
            f"{'Thick':>6} {'Y (mm)':>9}",
            "-" * 72,
        ]
        for panel in registry:
            if isinstance(panel, HorizontalPanel) and panel.y_position is not None:
                y = f"{panel.y_position:>9.1f}"
            else:
                y = f"{'-':>9}"
            lines.append(
                f"{_short_id(panel.id):<10} {panel.panel_type.label:<12} "
                f"{panel.width:>7} {panel.height:>7} {panel.depth:>7} "
                f"{panel.thickness:>6} {y}"
            )
        lines.append("-" * 72)
        lines.append(f"Total panels: {len(registry)}")
        return "\n".join(lines)


class LayoutReportFormatter:
    """Formats the envelope, spacings and overlap warnings."""

    def format(self, layout: CorpusLayout) -> str:
        env = layout.envelope
        lines = [
            "CORPUS",
            "=" * 40,
            f"Dimensions: {env.width:g} W x {env.height:g} H x {env.depth:g} D (mm)",
            f"Board thickness: {env.thickness:g} mm",
            f"Closed frame: {'yes' if layout.closed_frame else 'no'}",
            "",
        ]

        if layout.spacings:
            lines.append("Spacings (bottom to top):")
            for spacing in layout.spacings:
                lines.append(
                    f"  {spacing.y_start:>7.1f} -> {spacing.y_end:>7.1f}  "
                    f"{spacing.distance_mm} mm"
                )
        else:
            lines.append("Spacings: none")

        if layout.has_overlap:
            lines.append("")
            lines.append("WARNING: horizontal panels overlap")
            for message in layout.warnings:
                lines.append(f"  - {message}")

        return "\n".join(lines)


class ElevationDiagramFormatter:
    """Formats an ASCII front elevation of the corpus.

    Placements are projected onto the X/Y plane and scaled to fit the grid.
    Side panels are drawn with '#', horizontal panels with '='.
    """

    _FILL = {
        PanelType.LEFT_SIDE: "#",
        PanelType.RIGHT_SIDE: "#",
        PanelType.TOP: "=",
        PanelType.BOTTOM: "=",
        PanelType.SHELF: "=",
    }

    def format(self, layout: CorpusLayout, width: int = 60, height: int = 20) -> str:
        """Generate the diagram."""
        if not layout.placements:
            return "No panels to display."

        lines = [
            "FRONT ELEVATION",
            "=" * width,
            "",
        ]

        grid = [[" " for _ in range(width)] for _ in range(height)]
        self._draw_box(grid, 0, 0, width - 1, height - 1)

        scene_width = to_scene_units(layout.envelope.width)
        scene_height = to_scene_units(layout.envelope.height)
        for placement in layout.placements:
            self._fill_placement(grid, placement, scene_width, scene_height)

        for row in grid:
            lines.append("".join(row))

        lines.append("")
        env = layout.envelope
        lines.append(f"Dimensions: {env.width:g} W x {env.height:g} H x {env.depth:g} D (mm)")
        return "\n".join(lines)

    def _fill_placement(
        self,
        grid: list[list[str]],
        placement: Placement,
        scene_width: float,
        scene_height: float,
    ) -> None:
        cols = len(grid[0])
        rows = len(grid)
        low, high = placement.min_corner, placement.max_corner

        def col(x: float) -> int:
            return int(round((x + scene_width / 2) / scene_width * (cols - 1)))

        def row(y: float) -> int:
            return (rows - 1) - int(round(y / scene_height * (rows - 1)))

        x1, x2 = col(low.x), col(high.x)
        y1, y2 = row(high.y), row(low.y)
        fill = self._FILL[placement.panel_type]
        for y in range(max(0, y1), min(rows - 1, y2) + 1):
            for x in range(max(0, x1), min(cols - 1, x2) + 1):
                grid[y][x] = fill

    def _draw_box(
        self, grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> None:
        """Draw a box on the grid."""
        grid[y1][x1] = "+"
        grid[y1][x2] = "+"
        grid[y2][x1] = "+"
        grid[y2][x2] = "+"

        for x in range(x1 + 1, x2):
            grid[y1][x] = "-"
            grid[y2][x] = "-"

        for y in range(y1 + 1, y2):
            grid[y][x1] = "|"
            grid[y][x2] = "|"


def _vector(v: Vector3) -> list[float]:
    return [v.x, v.y, v.z]


class JsonExporter:
    """Exports a corpus layout as JSON."""

    def to_dict(self, layout: CorpusLayout) -> dict[str, Any]:
        env = layout.envelope
        return {
            "envelope": {
                "width": env.width,
                "height": env.height,
                "depth": env.depth,
                "thickness": env.thickness,
                "top_offset": env.top_offset,
                "bottom_offset": env.bottom_offset,
            },
            "panels": [
                {
                    "id": panel.id,
                    "type": panel.panel_type.value,
                    "width": panel.width,
                    "height": panel.height,
                    "depth": panel.depth,
                    "thickness": panel.thickness,
                    "y_position": (
                        panel.y_position if isinstance(panel, HorizontalPanel) else None
                    ),
                }
                for panel in layout.registry
            ],
            "placements": [
                {
                    "panel_id": p.panel_id,
                    "type": p.panel_type.value,
                    "size": _vector(p.size),
                    "position": _vector(p.position),
                }
                for p in layout.placements
            ],
            "spacings": [
                {
                    "y_start": s.y_start,
                    "y_end": s.y_end,
                    "distance_mm": s.distance_mm,
                }
                for s in layout.spacings
            ],
            "dimension_lines": [
                self._format_dimension_line(line) for line in layout.dimension_lines
            ],
            "closed_frame": layout.closed_frame,
            "has_overlap": layout.has_overlap,
            "warnings": layout.warnings,
        }

    def export_string(self, layout: CorpusLayout) -> str:
        """Export the layout as a JSON string."""
        return json.dumps(self.to_dict(layout), indent=2)

    def _format_dimension_line(self, line: DimensionLine) -> dict[str, Any]:
        return {
            "kind": line.kind.value,
            "value_mm": line.value_mm,
            "start": _vector(line.start),
            "end": _vector(line.end),
            "extension_lines": [
                [_vector(a), _vector(b)] for a, b in line.extension_lines
            ],
            "label_position": _vector(line.label_position),
        }
