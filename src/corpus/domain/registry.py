"""Panel registry: the ordered, immutable collection of corpus panels.

Every edit returns a new ``PanelRegistry`` snapshot; nothing is mutated in
place. Edits that change the vertical layout re-run the
``VerticalLayoutSolver`` before returning.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterator

from .entities import HorizontalPanel, Panel, ShelfPanel, panel_from_fields
from .services.vertical_layout import VerticalLayoutSolver
from .units import (
    MAX_DIMENSION_MM,
    MAX_THICKNESS_MM,
    MIN_DIMENSION_MM,
    MIN_THICKNESS_MM,
    clamp_dimension,
    parse_dimension,
    round_half_up,
)
from .value_objects import PanelType

__all__ = [
    "AddPanelResult",
    "MoveShelfResult",
    "PanelCandidate",
    "PanelRegistry",
    "add_panel",
    "available_types_to_add",
    "default_candidate",
    "move_shelf",
    "reconcile",
    "remove_panel",
]

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def _new_panel_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class PanelRegistry:
    """Ordered snapshot of the panels in a corpus."""

    panels: tuple[Panel, ...] = ()

    def __iter__(self) -> Iterator[Panel]:
        return iter(self.panels)

    def __len__(self) -> int:
        return len(self.panels)

    def find(self, panel_type: PanelType) -> Panel | None:
        """First panel of the given type, or None."""
        return next((p for p in self.panels if p.panel_type == panel_type), None)

    def get(self, panel_id: str) -> Panel | None:
        """Panel with the given id, or None."""
        return next((p for p in self.panels if p.id == panel_id), None)

    @property
    def shelves(self) -> list[ShelfPanel]:
        return [p for p in self.panels if isinstance(p, ShelfPanel)]

    @property
    def horizontal_panels(self) -> list[HorizontalPanel]:
        return [p for p in self.panels if isinstance(p, HorizontalPanel)]

    @property
    def types_present(self) -> set[PanelType]:
        return {p.panel_type for p in self.panels}


@dataclass
class PanelCandidate:
    """A panel as entered by the user, before validation.

    The size fields may be numbers or the raw strings typed into a form.
    """

    panel_type: PanelType | str | None
    width: float | str | None
    height: float | str | None
    depth: float | str | None
    thickness: float | str | None

    def resolved_type(self) -> PanelType:
        """The candidate type as a PanelType.

        Raises:
            ValueError: If the type is blank or unknown.
        """
        if isinstance(self.panel_type, PanelType):
            return self.panel_type
        return PanelType(str(self.panel_type or "").strip())

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.panel_type is None or not str(self.panel_type).strip():
            errors.append("Panel type is required")
        else:
            try:
                self.resolved_type()
            except ValueError:
                valid = ", ".join(t.value for t in PanelType)
                errors.append(
                    f"Unknown panel type '{self.panel_type}'. Valid types: {valid}"
                )
        for name in ("width", "height", "depth", "thickness"):
            if parse_dimension(getattr(self, name)) is None:
                errors.append(f"{name.capitalize()} must be a number")
        return errors


@dataclass
class AddPanelResult:
    """Outcome of add_panel.

    Attributes:
        registry: The new snapshot, or the unchanged one if rejected.
        panel: The panel that was added, as stored after layout.
        errors: Validation messages; empty on success.
    """

    registry: PanelRegistry
    panel: Panel | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


@dataclass
class MoveShelfResult:
    """Outcome of move_shelf."""

    registry: PanelRegistry
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


_SIDE_DEFAULTS = (18, 720, 560, 18)
_HORIZONTAL_DEFAULTS = (564, 18, 560, 18)


def default_candidate(panel_type: PanelType | str) -> PanelCandidate:
    """Suggested entry-form values for a panel type.

    Side panels default to a thin, full-height board; horizontal panels to a
    full-width board.
    """
    panel_type = PanelType(panel_type)
    width, height, depth, thickness = (
        _SIDE_DEFAULTS if panel_type.is_side else _HORIZONTAL_DEFAULTS
    )
    return PanelCandidate(
        panel_type=panel_type,
        width=width,
        height=height,
        depth=depth,
        thickness=thickness,
    )


def available_types_to_add(registry: PanelRegistry) -> list[PanelType]:
    """Panel types that can still be added, in canonical order."""
    present = registry.types_present
    return [t for t in PanelType if not t.is_singleton or t not in present]


def reconcile(
    registry: PanelRegistry,
    force_redistribute: bool = False,
    solver: VerticalLayoutSolver | None = None,
) -> PanelRegistry:
    """Re-run the vertical layout over a registry snapshot."""
    solver = solver or VerticalLayoutSolver()
    return PanelRegistry(tuple(solver.solve(registry.panels, force_redistribute)))


def add_panel(
    registry: PanelRegistry,
    candidate: PanelCandidate,
    id_factory: IdFactory = _new_panel_id,
    solver: VerticalLayoutSolver | None = None,
) -> AddPanelResult:
    """Validate, clamp and append a panel.

    Adding a shelf forces all shelves to be re-spread; adding any other type
    keeps user-set shelf positions.

    Returns:
        AddPanelResult. On validation failure the original registry is
        returned with the error messages.
    """
    errors = candidate.validate()
    if not errors:
        panel_type = candidate.resolved_type()
        if panel_type.is_singleton and panel_type in registry.types_present:
            errors.append(f"A {panel_type.label.lower()} panel is already present")
    if errors:
        logger.debug(f"Rejected panel candidate: {errors}")
        return AddPanelResult(registry=registry, errors=errors)

    panel = panel_from_fields(
        panel_id=id_factory(),
        panel_type=panel_type,
        width=clamp_dimension(parse_dimension(candidate.width), MIN_DIMENSION_MM, MAX_DIMENSION_MM),
        height=clamp_dimension(parse_dimension(candidate.height), MIN_DIMENSION_MM, MAX_DIMENSION_MM),
        depth=clamp_dimension(parse_dimension(candidate.depth), MIN_DIMENSION_MM, MAX_DIMENSION_MM),
        thickness=clamp_dimension(
            parse_dimension(candidate.thickness), MIN_THICKNESS_MM, MAX_THICKNESS_MM
        ),
    )
    logger.debug(f"Adding {panel.panel_type.value} panel {panel.id}")

    updated = reconcile(
        PanelRegistry(registry.panels + (panel,)),
        force_redistribute=panel_type == PanelType.SHELF,
        solver=solver,
    )
    return AddPanelResult(registry=updated, panel=updated.get(panel.id))


def remove_panel(
    registry: PanelRegistry,
    panel_id: str,
    solver: VerticalLayoutSolver | None = None,
) -> PanelRegistry:
    """Remove a panel by id.

    Removing a shelf re-spreads the remaining shelves over the freed space.
    Unknown ids leave the panels untouched (the layout is still reconciled).
    """
    removed = registry.get(panel_id)
    remaining = tuple(p for p in registry.panels if p.id != panel_id)
    if removed is None:
        logger.debug(f"remove_panel: no panel with id {panel_id}")
    return reconcile(
        PanelRegistry(remaining),
        force_redistribute=removed is not None and removed.panel_type == PanelType.SHELF,
        solver=solver,
    )


def move_shelf(
    registry: PanelRegistry, panel_id: str, y_position: float
) -> MoveShelfResult:
    """Set a shelf's center position by hand.

    The value is rounded to whole millimetres and is kept by later
    non-forced layouts. No overlap check happens here; run the overlap
    validator when the user commits the edit.
    """
    panel = registry.get(panel_id)
    if panel is None:
        return MoveShelfResult(registry=registry, errors=[f"Panel not found: {panel_id}"])
    if not isinstance(panel, ShelfPanel):
        return MoveShelfResult(
            registry=registry,
            errors=[
                f"Only shelves can be repositioned; {panel.panel_type.label.lower()} "
                "positions are derived from the corpus height"
            ],
        )
    value = parse_dimension(y_position)
    if value is None:
        return MoveShelfResult(registry=registry, errors=["Y position must be a number"])

    moved = panel.with_y_position(round_half_up(value))
    panels = tuple(moved if p.id == panel_id else p for p in registry.panels)
    return MoveShelfResult(registry=PanelRegistry(panels))
