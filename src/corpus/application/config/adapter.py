"""Conversion between corpus files and panel registries."""

from __future__ import annotations

import logging

from corpus.application.config.schema import CorpusConfiguration, PanelConfig
from corpus.domain import (
    HorizontalPanel,
    PanelRegistry,
    VerticalLayoutSolver,
    clamp_dimension,
    panel_from_fields,
    reconcile,
)
from corpus.domain.registry import IdFactory, _new_panel_id
from corpus.domain.units import (
    MAX_DIMENSION_MM,
    MAX_THICKNESS_MM,
    MIN_DIMENSION_MM,
    MIN_THICKNESS_MM,
)

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = "1.0"


def clamped_sizes(panel: PanelConfig) -> tuple[int, int, int, int]:
    """Width, height, depth and thickness of a panel config after clamping."""
    return (
        clamp_dimension(panel.width, MIN_DIMENSION_MM, MAX_DIMENSION_MM),
        clamp_dimension(panel.height, MIN_DIMENSION_MM, MAX_DIMENSION_MM),
        clamp_dimension(panel.depth, MIN_DIMENSION_MM, MAX_DIMENSION_MM),
        clamp_dimension(panel.thickness, MIN_THICKNESS_MM, MAX_THICKNESS_MM),
    )


def config_to_registry(
    config: CorpusConfiguration,
    id_factory: IdFactory = _new_panel_id,
    solver: VerticalLayoutSolver | None = None,
) -> PanelRegistry:
    """Build a reconciled registry from a corpus file.

    Sizes are clamped into their allowed ranges and the vertical layout is
    re-run without forcing, so stored shelf positions survive while top,
    bottom and unpositioned shelves get their derived positions.

    Args:
        config: A validated corpus configuration.
        id_factory: Source of ids for panels stored without one.
        solver: Optional solver for dependency injection.

    Returns:
        The registry snapshot described by the file.
    """
    panels = []
    for panel_config in config.panels:
        width, height, depth, thickness = clamped_sizes(panel_config)
        panels.append(
            panel_from_fields(
                panel_id=panel_config.id or id_factory(),
                panel_type=panel_config.type,
                width=width,
                height=height,
                depth=depth,
                thickness=thickness,
                y_position=panel_config.y_position,
            )
        )
    logger.debug(f"Converted {len(panels)} panel configs to registry")
    return reconcile(PanelRegistry(tuple(panels)), solver=solver)


def registry_to_config(
    registry: PanelRegistry, name: str | None = None
) -> CorpusConfiguration:
    """Snapshot a registry as a corpus file model."""
    return CorpusConfiguration(
        schema_version=CURRENT_SCHEMA_VERSION,
        name=name,
        panels=[
            PanelConfig(
                id=panel.id,
                type=panel.panel_type,
                width=panel.width,
                height=panel.height,
                depth=panel.depth,
                thickness=panel.thickness,
                y_position=(
                    panel.y_position if isinstance(panel, HorizontalPanel) else None
                ),
            )
            for panel in registry
        ],
    )
