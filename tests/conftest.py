"""Pytest configuration and shared fixtures for corpus tests."""

from __future__ import annotations

import itertools
from typing import Callable

import pytest

from corpus.domain import PanelRegistry, PanelType, add_panel, default_candidate


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "web: tests that exercise the REST API")


# =============================================================================
# Registry fixtures
# =============================================================================


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic panel ids: p1, p2, p3, ..."""
    counter = itertools.count(1)
    return lambda: f"p{next(counter)}"


@pytest.fixture
def add_default(id_factory: Callable[[], str]) -> Callable[..., PanelRegistry]:
    """Add a panel with the default form values, optionally overridden.

    Example:
        registry = add_default(PanelRegistry(), PanelType.SHELF, thickness=25)
    """

    def _add(registry: PanelRegistry, panel_type: PanelType, **sizes) -> PanelRegistry:
        candidate = default_candidate(panel_type)
        for name, value in sizes.items():
            setattr(candidate, name, value)
        result = add_panel(registry, candidate, id_factory=id_factory)
        assert result.is_valid, result.errors
        return result.registry

    return _add


@pytest.fixture
def frame_registry(add_default: Callable[..., PanelRegistry]) -> PanelRegistry:
    """Left (p1), right (p2), bottom (p3) and top (p4) with default sizes."""
    registry = PanelRegistry()
    for panel_type in (
        PanelType.LEFT_SIDE,
        PanelType.RIGHT_SIDE,
        PanelType.BOTTOM,
        PanelType.TOP,
    ):
        registry = add_default(registry, panel_type)
    return registry


@pytest.fixture
def shelved_registry(
    frame_registry: PanelRegistry, add_default: Callable[..., PanelRegistry]
) -> PanelRegistry:
    """The default frame plus three 18 mm shelves (p5, p6, p7)."""
    registry = frame_registry
    for _ in range(3):
        registry = add_default(registry, PanelType.SHELF)
    return registry
