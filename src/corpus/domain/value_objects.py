"""Value objects for the corpus layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "DEFAULT_ENVELOPE",
    "DimensionKind",
    "DimensionLine",
    "Envelope",
    "PanelType",
    "Placement",
    "Spacing",
    "Vector3",
]


class PanelType(str, Enum):
    """Types of structural panels in a corpus."""

    LEFT_SIDE = "left-side"
    RIGHT_SIDE = "right-side"
    TOP = "top"
    BOTTOM = "bottom"
    SHELF = "shelf"

    @property
    def is_side(self) -> bool:
        return self in (PanelType.LEFT_SIDE, PanelType.RIGHT_SIDE)

    @property
    def is_horizontal(self) -> bool:
        return self in (PanelType.TOP, PanelType.BOTTOM, PanelType.SHELF)

    @property
    def is_singleton(self) -> bool:
        """True for types that may appear at most once in a corpus."""
        return self is not PanelType.SHELF

    @property
    def label(self) -> str:
        """Human-readable label for tables and reports."""
        return _PANEL_LABELS[self]


_PANEL_LABELS: dict[PanelType, str] = {
    PanelType.LEFT_SIDE: "Left side",
    PanelType.RIGHT_SIDE: "Right side",
    PanelType.TOP: "Top",
    PanelType.BOTTOM: "Bottom",
    PanelType.SHELF: "Shelf",
}


@dataclass(frozen=True)
class Vector3:
    """A 3D vector in scene units (X right, Y up, Z towards the viewer)."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Envelope:
    """Overall bounding dimensions of the corpus, in millimetres.

    Derived from the current panels on every read; it has no lifecycle of
    its own. top_offset and bottom_offset are reserved for inset support
    and are always 0.
    """

    width: float
    height: float
    depth: float
    thickness: float
    top_offset: float = 0
    bottom_offset: float = 0


DEFAULT_ENVELOPE = Envelope(width=600, height=720, depth=560, thickness=18)


@dataclass(frozen=True)
class Placement:
    """A panel positioned in the scene.

    Attributes:
        panel_id: Id of the panel this placement belongs to.
        panel_type: Type of the panel.
        size: Box size (x, y, z) in scene units.
        position: Box center in scene units. The origin is at the
            horizontal and depth center of the corpus, with the floor at y=0.
    """

    panel_id: str
    panel_type: PanelType
    size: Vector3
    position: Vector3

    @property
    def min_corner(self) -> Vector3:
        return Vector3(
            self.position.x - self.size.x / 2,
            self.position.y - self.size.y / 2,
            self.position.z - self.size.z / 2,
        )

    @property
    def max_corner(self) -> Vector3:
        return Vector3(
            self.position.x + self.size.x / 2,
            self.position.y + self.size.y / 2,
            self.position.z + self.size.z / 2,
        )


@dataclass(frozen=True)
class Spacing:
    """Vertical clearance between two consecutive horizontal panels.

    Attributes:
        y_start: Top edge of the lower panel in millimetres.
        y_end: Bottom edge of the upper panel in millimetres.
        distance_mm: Rounded clearance in millimetres.
    """

    y_start: float
    y_end: float
    distance_mm: int


class DimensionKind(str, Enum):
    """What a dimension line measures."""

    WIDTH = "width"
    HEIGHT = "height"
    DEPTH = "depth"
    SPACING = "spacing"


@dataclass(frozen=True)
class DimensionLine:
    """Geometry of one technical-drawing dimension annotation.

    All points are in scene units.

    Attributes:
        kind: The measured quantity.
        value_mm: Value printed on the label.
        start: Start of the dimension line.
        end: End of the dimension line.
        extension_lines: Witness lines from the object to the dimension line.
        label_position: Anchor point of the label text.
    """

    kind: DimensionKind
    value_mm: float
    start: Vector3
    end: Vector3
    extension_lines: tuple[tuple[Vector3, Vector3], ...]
    label_position: Vector3
