"""Panel entities.

A panel is a tagged variant keyed by its type. Side panels carry no vertical
position. Horizontal panels carry an optional ``y_position`` in millimetres
whose meaning depends on the variant:

- TopPanel: y_position is the top face (edge convention).
- BottomPanel: y_position is the bottom face (edge convention).
- ShelfPanel: y_position is the middle of the board (center convention).

Sizes follow the entry-form convention: for side panels ``width`` is the thin
dimension and ``height`` the carcass height; for horizontal panels ``width``
is the carcass width and ``thickness`` the thin vertical dimension.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Union

from .value_objects import PanelType

__all__ = [
    "BottomPanel",
    "HorizontalPanel",
    "Panel",
    "ShelfPanel",
    "SidePanel",
    "TopPanel",
    "panel_from_fields",
]


@dataclass(frozen=True)
class _PanelBase:
    """Fields shared by every panel variant. Dimensions in millimetres."""

    id: str
    panel_type: PanelType
    width: int
    height: int
    depth: int
    thickness: int

    _allowed_types: ClassVar[tuple[PanelType, ...]] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Panel id must not be empty")
        if self._allowed_types and self.panel_type not in self._allowed_types:
            raise ValueError(
                f"{type(self).__name__} cannot have type '{self.panel_type.value}'"
            )


@dataclass(frozen=True)
class SidePanel(_PanelBase):
    """Left or right side of the corpus."""

    _allowed_types = (PanelType.LEFT_SIDE, PanelType.RIGHT_SIDE)


@dataclass(frozen=True)
class HorizontalPanel(_PanelBase):
    """Base for top, bottom and shelf panels."""

    y_position: float | None = None

    @property
    def is_positioned(self) -> bool:
        return self.y_position is not None

    def with_y_position(self, y_position: float | None) -> HorizontalPanel:
        """Return a copy of this panel at a new vertical position."""
        return replace(self, y_position=y_position)

    def top_edge(self) -> float:
        """Y of the upper face in millimetres."""
        raise NotImplementedError

    def bottom_edge(self) -> float:
        """Y of the lower face in millimetres."""
        raise NotImplementedError

    def _require_position(self) -> float:
        if self.y_position is None:
            raise ValueError(f"Panel {self.id} has no y_position")
        return self.y_position


@dataclass(frozen=True)
class TopPanel(HorizontalPanel):
    _allowed_types = (PanelType.TOP,)

    def top_edge(self) -> float:
        return self._require_position()

    def bottom_edge(self) -> float:
        return self._require_position() - self.thickness


@dataclass(frozen=True)
class BottomPanel(HorizontalPanel):
    _allowed_types = (PanelType.BOTTOM,)

    def top_edge(self) -> float:
        return self._require_position() + self.thickness

    def bottom_edge(self) -> float:
        return self._require_position()


@dataclass(frozen=True)
class ShelfPanel(HorizontalPanel):
    _allowed_types = (PanelType.SHELF,)

    def top_edge(self) -> float:
        return self._require_position() + self.thickness / 2

    def bottom_edge(self) -> float:
        return self._require_position() - self.thickness / 2


Panel = Union[SidePanel, TopPanel, BottomPanel, ShelfPanel]

_VARIANTS: dict[PanelType, type] = {
    PanelType.LEFT_SIDE: SidePanel,
    PanelType.RIGHT_SIDE: SidePanel,
    PanelType.TOP: TopPanel,
    PanelType.BOTTOM: BottomPanel,
    PanelType.SHELF: ShelfPanel,
}


def panel_from_fields(
    panel_id: str,
    panel_type: PanelType | str,
    width: int,
    height: int,
    depth: int,
    thickness: int,
    y_position: float | None = None,
) -> Panel:
    """Build the panel variant matching ``panel_type``.

    ``y_position`` is ignored for side panels.

    Raises:
        ValueError: If ``panel_type`` is not a known panel type.
    """
    panel_type = PanelType(panel_type)
    variant = _VARIANTS[panel_type]
    if variant is SidePanel:
        return SidePanel(
            id=panel_id,
            panel_type=panel_type,
            width=width,
            height=height,
            depth=depth,
            thickness=thickness,
        )
    return variant(
        id=panel_id,
        panel_type=panel_type,
        width=width,
        height=height,
        depth=depth,
        thickness=thickness,
        y_position=y_position,
    )
