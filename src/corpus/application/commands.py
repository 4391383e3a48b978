"""Application commands (use cases) for corpus editing and layout."""

from __future__ import annotations

import logging

from corpus.domain import (
    DimensionLineBuilder,
    EnvelopeCalculator,
    OverlapValidator,
    PanelCandidate,
    PanelRegistry,
    PlacementCalculator,
    SpacingAnnotator,
    VerticalLayoutSolver,
    add_panel,
    has_closed_frame,
    move_shelf,
    remove_panel,
)
from corpus.domain.registry import IdFactory, _new_panel_id

from .dtos import CorpusLayout, EditResult

logger = logging.getLogger(__name__)


class BuildLayoutCommand:
    """Command to derive the full corpus layout from a registry snapshot.

    Runs envelope, placement, spacing, dimension-line and overlap
    computation synchronously over the whole registry.
    """

    def __init__(
        self,
        envelope_calculator: EnvelopeCalculator | None = None,
        placement_calculator: PlacementCalculator | None = None,
        spacing_annotator: SpacingAnnotator | None = None,
        dimension_builder: DimensionLineBuilder | None = None,
        overlap_validator: OverlapValidator | None = None,
    ) -> None:
        self.envelope_calculator = envelope_calculator or EnvelopeCalculator()
        self.placement_calculator = placement_calculator or PlacementCalculator()
        self.spacing_annotator = spacing_annotator or SpacingAnnotator()
        self.dimension_builder = dimension_builder or DimensionLineBuilder()
        self.overlap_validator = overlap_validator or OverlapValidator()

    def execute(self, registry: PanelRegistry) -> CorpusLayout:
        """Execute the layout command.

        Args:
            registry: Panels with their current vertical positions.

        Returns:
            CorpusLayout for the renderer and the overlap warning.
        """
        panels = registry.panels
        envelope = self.envelope_calculator.compute_envelope(panels)
        placements = self.placement_calculator.compute_placements(panels, envelope)
        spacings = self.spacing_annotator.compute_spacings(panels)
        dimension_lines = self.dimension_builder.build(envelope, spacings)
        overlaps = self.overlap_validator.find_overlaps(panels)

        logger.debug(
            f"Built layout: {len(placements)} placements, {len(spacings)} spacings, "
            f"{len(overlaps)} overlaps"
        )
        return CorpusLayout(
            registry=registry,
            envelope=envelope,
            placements=placements,
            spacings=spacings,
            dimension_lines=dimension_lines,
            overlaps=overlaps,
            closed_frame=has_closed_frame(panels),
        )


class CorpusEditor:
    """Applies user edits to a registry snapshot and re-derives the layout.

    The editor holds no corpus state; each method takes the current snapshot
    and returns an EditResult with the next one. Overlap warnings are
    reported on the result and never block an edit.
    """

    def __init__(
        self,
        layout_command: BuildLayoutCommand | None = None,
        solver: VerticalLayoutSolver | None = None,
        id_factory: IdFactory = _new_panel_id,
    ) -> None:
        self.layout_command = layout_command or BuildLayoutCommand()
        self.solver = solver or VerticalLayoutSolver()
        self.id_factory = id_factory

    def add(self, registry: PanelRegistry, candidate: PanelCandidate) -> EditResult:
        """Add a panel from user input."""
        result = add_panel(
            registry, candidate, id_factory=self.id_factory, solver=self.solver
        )
        return EditResult(
            registry=result.registry,
            layout=self.layout_command.execute(result.registry),
            errors=result.errors,
            panel_id=result.panel.id if result.panel is not None else None,
        )

    def remove(self, registry: PanelRegistry, panel_id: str) -> EditResult:
        """Remove a panel; unknown ids are reported as an error."""
        if registry.get(panel_id) is None:
            return EditResult(
                registry=registry,
                layout=self.layout_command.execute(registry),
                errors=[f"Panel not found: {panel_id}"],
                panel_id=panel_id,
            )
        updated = remove_panel(registry, panel_id, solver=self.solver)
        return EditResult(
            registry=updated,
            layout=self.layout_command.execute(updated),
            panel_id=panel_id,
        )

    def move(
        self, registry: PanelRegistry, panel_id: str, y_position: float
    ) -> EditResult:
        """Move a shelf by hand; the result carries any overlap warning."""
        result = move_shelf(registry, panel_id, y_position)
        layout = self.layout_command.execute(result.registry)
        if result.is_valid and layout.has_overlap:
            logger.info(f"Shelf {panel_id} moved into an overlapping position")
        return EditResult(
            registry=result.registry,
            layout=layout,
            errors=result.errors,
            panel_id=panel_id,
        )
