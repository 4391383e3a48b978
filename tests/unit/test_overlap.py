"""Unit tests for OverlapValidator."""

import pytest

from corpus.domain import OverlapValidator, PanelRegistry, PanelType, move_shelf, panel_from_fields


def _horizontal(panel_id: str, panel_type: PanelType, y, thickness: int = 18):
    return panel_from_fields(panel_id, panel_type, 564, 18, 560, thickness, y_position=y)


@pytest.fixture
def validator() -> OverlapValidator:
    return OverlapValidator()


class TestOverlapValidator:
    """Tests for adjacent-pair overlap detection."""

    def test_empty_has_no_overlap(self, validator: OverlapValidator) -> None:
        assert validator.find_overlaps([]) == []
        assert not validator.has_overlap([])

    def test_single_panel_has_no_overlap(self, validator: OverlapValidator) -> None:
        assert not validator.has_overlap([_horizontal("s", PanelType.SHELF, 100)])

    def test_evenly_spread_shelves_do_not_overlap(
        self, validator: OverlapValidator, shelved_registry: PanelRegistry
    ) -> None:
        assert not validator.has_overlap(shelved_registry.panels)

    def test_moved_shelf_overlaps_neighbour(
        self, validator: OverlapValidator, shelved_registry: PanelRegistry
    ) -> None:
        registry = move_shelf(shelved_registry, "p6", 190).registry

        overlaps = validator.find_overlaps(registry.panels)

        assert len(overlaps) == 1
        pair = overlaps[0]
        assert (pair.lower.id, pair.upper.id) == ("p5", "p6")
        # 184.5 + 9 reaches 12.5 mm past 190 - 9
        assert pair.amount_mm == pytest.approx(12.5)
        assert pair.message == "Shelf (p5) overlaps Shelf (p6) by 12.5 mm"

    def test_touching_faces_do_not_overlap(self, validator: OverlapValidator) -> None:
        panels = [
            _horizontal("a", PanelType.SHELF, 100),
            _horizontal("b", PanelType.SHELF, 118),
        ]
        assert not validator.has_overlap(panels)

    def test_order_is_by_position_not_registry(self, validator: OverlapValidator) -> None:
        panels = [
            _horizontal("high", PanelType.SHELF, 400),
            _horizontal("low", PanelType.SHELF, 100),
            _horizontal("mid", PanelType.SHELF, 105),
        ]
        overlaps = validator.find_overlaps(panels)
        assert [(p.lower.id, p.upper.id) for p in overlaps] == [("low", "mid")]

    def test_unpositioned_panels_are_skipped(self, validator: OverlapValidator) -> None:
        panels = [
            _horizontal("a", PanelType.SHELF, 100),
            _horizontal("b", PanelType.SHELF, None),
        ]
        assert not validator.has_overlap(panels)

    def test_sides_are_ignored(self, validator: OverlapValidator) -> None:
        panels = [
            panel_from_fields("l", PanelType.LEFT_SIDE, 18, 720, 560, 18),
            _horizontal("s", PanelType.SHELF, 100),
        ]
        assert not validator.has_overlap(panels)


class TestCenterApproximation:
    """Top and bottom positions are treated as centers by the overlap check."""

    def test_shelf_near_bottom(self, validator: OverlapValidator) -> None:
        panels = [
            _horizontal("b", PanelType.BOTTOM, 0),
            _horizontal("s", PanelType.SHELF, 5),
        ]
        assert validator.has_overlap(panels)

    def test_bottom_span_is_centered_on_its_position(self, validator: OverlapValidator) -> None:
        # The bottom board really occupies 0..18, but is checked as -9..9.
        panels = [
            _horizontal("b", PanelType.BOTTOM, 0),
            _horizontal("s", PanelType.SHELF, 15, thickness=12),
        ]
        assert not validator.has_overlap(panels)

    def test_top_span_is_centered_on_its_position(self, validator: OverlapValidator) -> None:
        panels = [
            _horizontal("s", PanelType.SHELF, 705, thickness=12),
            _horizontal("t", PanelType.TOP, 720),
        ]
        assert not validator.has_overlap(panels)
