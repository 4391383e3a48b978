"""Unit tests for SpacingAnnotator."""

import pytest

from corpus.domain import PanelRegistry, PanelType, SpacingAnnotator, panel_from_fields


def _horizontal(panel_id: str, panel_type: PanelType, y, thickness: int = 18):
    return panel_from_fields(panel_id, panel_type, 564, 18, 560, thickness, y_position=y)


@pytest.fixture
def annotator() -> SpacingAnnotator:
    return SpacingAnnotator()


class TestSpacingAnnotator:
    def test_frame_without_shelves(
        self, annotator: SpacingAnnotator, frame_registry: PanelRegistry
    ) -> None:
        spacings = annotator.compute_spacings(frame_registry.panels)
        assert len(spacings) == 1
        assert spacings[0].y_start == 18
        assert spacings[0].y_end == 702
        assert spacings[0].distance_mm == 684

    def test_three_shelves(
        self, annotator: SpacingAnnotator, shelved_registry: PanelRegistry
    ) -> None:
        spacings = annotator.compute_spacings(shelved_registry.panels)

        assert [s.distance_mm for s in spacings] == [158, 158, 158, 158]
        assert [s.y_start for s in spacings] == pytest.approx([18, 193.5, 369, 544.5])
        assert [s.y_end for s in spacings] == pytest.approx([175.5, 351, 526.5, 702])

    def test_small_gaps_are_not_annotated(self, annotator: SpacingAnnotator) -> None:
        panels = [
            _horizontal("b", PanelType.BOTTOM, 0),
            _horizontal("s", PanelType.SHELF, 37),
        ]
        assert annotator.compute_spacings(panels) == []

    def test_gap_just_over_threshold(self, annotator: SpacingAnnotator) -> None:
        panels = [
            _horizontal("b", PanelType.BOTTOM, 0),
            _horizontal("s", PanelType.SHELF, 37.4),
        ]
        spacings = annotator.compute_spacings(panels)
        assert len(spacings) == 1
        assert spacings[0].distance_mm == 10

    def test_overlapping_panels_produce_no_spacing(self, annotator: SpacingAnnotator) -> None:
        panels = [
            _horizontal("a", PanelType.SHELF, 100),
            _horizontal("b", PanelType.SHELF, 105),
        ]
        assert annotator.compute_spacings(panels) == []

    def test_sorted_by_position(self, annotator: SpacingAnnotator) -> None:
        panels = [
            _horizontal("t", PanelType.TOP, 720),
            _horizontal("s", PanelType.SHELF, 360),
            _horizontal("b", PanelType.BOTTOM, 0),
        ]
        spacings = annotator.compute_spacings(panels)
        assert [s.y_start for s in spacings] == [18, 369]

    def test_custom_threshold(self) -> None:
        panels = [
            _horizontal("b", PanelType.BOTTOM, 0),
            _horizontal("s", PanelType.SHELF, 100),
        ]
        assert SpacingAnnotator(min_spacing_mm=100).compute_spacings(panels) == []
