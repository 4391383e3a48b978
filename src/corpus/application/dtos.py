"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from corpus.domain import (
    DimensionLine,
    Envelope,
    OverlapPair,
    PanelRegistry,
    Placement,
    Spacing,
)


@dataclass
class CorpusLayout:
    """Everything a renderer needs to draw the corpus.

    Attributes:
        registry: The panel snapshot the layout was derived from.
        envelope: Overall corpus dimensions in millimetres.
        placements: One box per panel, in scene units.
        spacings: Clearances between consecutive horizontal panels.
        dimension_lines: Annotation geometry for width, height, depth and
            spacings.
        overlaps: Adjacent horizontal panels whose spans intersect.
        closed_frame: True when left, right, top and bottom are all present.
    """

    registry: PanelRegistry
    envelope: Envelope
    placements: list[Placement]
    spacings: list[Spacing]
    dimension_lines: list[DimensionLine] = field(default_factory=list)
    overlaps: list[OverlapPair] = field(default_factory=list)
    closed_frame: bool = False

    @property
    def has_overlap(self) -> bool:
        return len(self.overlaps) > 0

    @property
    def warnings(self) -> list[str]:
        """User-facing warning messages."""
        return [pair.message for pair in self.overlaps]


@dataclass
class EditResult:
    """Output DTO of a corpus edit (add, remove or move).

    Attributes:
        registry: Registry snapshot after the edit; unchanged if rejected.
        layout: Layout computed from ``registry``.
        errors: Why the edit was rejected; empty on success.
        panel_id: Id of the panel the edit touched, when there is one.
    """

    registry: PanelRegistry
    layout: CorpusLayout
    errors: list[str] = field(default_factory=list)
    panel_id: str | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the edit was applied."""
        return len(self.errors) == 0

    @property
    def warnings(self) -> list[str]:
        return self.layout.warnings
