"""Unit tests for text and JSON output formatters."""

import json
from dataclasses import replace

import pytest

from corpus.application import BuildLayoutCommand, CorpusLayout
from corpus.domain import PanelRegistry, move_shelf
from corpus.infrastructure import (
    ElevationDiagramFormatter,
    JsonExporter,
    LayoutReportFormatter,
    PanelTableFormatter,
)


@pytest.fixture
def shelved_layout(shelved_registry: PanelRegistry) -> CorpusLayout:
    return BuildLayoutCommand().execute(shelved_registry)


@pytest.fixture
def empty_layout() -> CorpusLayout:
    return BuildLayoutCommand().execute(PanelRegistry())


class TestPanelTableFormatter:
    def test_empty(self) -> None:
        assert PanelTableFormatter().format(PanelRegistry()) == "No panels in corpus."

    def test_table(self, shelved_registry: PanelRegistry) -> None:
        output = PanelTableFormatter().format(shelved_registry)
        lines = output.splitlines()

        assert lines[0] == "PANELS"
        assert lines[-1] == "Total panels: 7"
        assert any(line.startswith("p1 ") and "Left side" in line for line in lines)
        assert any(line.startswith("p5 ") and "184.5" in line for line in lines)

    def test_long_ids_are_shortened(self, shelved_registry: PanelRegistry) -> None:
        panel = shelved_registry.panels[0]
        long_id = "0123456789abcdef"
        registry = PanelRegistry((replace(panel, id=long_id),))
        output = PanelTableFormatter().format(registry)
        assert "01234567 " in output
        assert long_id not in output


class TestLayoutReportFormatter:
    def test_report(self, shelved_layout: CorpusLayout) -> None:
        output = LayoutReportFormatter().format(shelved_layout)

        assert "Dimensions: 600 W x 720 H x 560 D (mm)" in output
        assert "Board thickness: 18 mm" in output
        assert "Closed frame: yes" in output
        assert output.count("158 mm") == 4
        assert "WARNING" not in output

    def test_empty_report(self, empty_layout: CorpusLayout) -> None:
        output = LayoutReportFormatter().format(empty_layout)
        assert "Closed frame: no" in output
        assert "Spacings: none" in output

    def test_overlap_warning(self, shelved_registry: PanelRegistry) -> None:
        registry = move_shelf(shelved_registry, "p6", 190).registry
        output = LayoutReportFormatter().format(BuildLayoutCommand().execute(registry))

        assert "WARNING: horizontal panels overlap" in output
        assert "  - Shelf (p5) overlaps Shelf (p6) by 12.5 mm" in output


class TestElevationDiagramFormatter:
    def test_empty(self, empty_layout: CorpusLayout) -> None:
        assert ElevationDiagramFormatter().format(empty_layout) == "No panels to display."

    def test_diagram(self, shelved_layout: CorpusLayout) -> None:
        output = ElevationDiagramFormatter().format(shelved_layout, width=40, height=16)
        lines = output.splitlines()

        assert lines[0] == "FRONT ELEVATION"
        grid = lines[3 : 3 + 16]
        assert all(len(row) == 40 for row in grid)
        assert "#" in output
        assert "=" in output
        assert lines[-1] == "Dimensions: 600 W x 720 H x 560 D (mm)"


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_keys(self, shelved_layout: CorpusLayout) -> None:
        data = JsonExporter().to_dict(shelved_layout)
        assert set(data) == {
            "envelope",
            "panels",
            "placements",
            "spacings",
            "dimension_lines",
            "closed_frame",
            "has_overlap",
            "warnings",
        }

    def test_values(self, shelved_layout: CorpusLayout) -> None:
        data = JsonExporter().to_dict(shelved_layout)

        assert data["envelope"]["width"] == 600
        assert data["panels"][0] == {
            "id": "p1",
            "type": "left-side",
            "width": 18,
            "height": 720,
            "depth": 560,
            "thickness": 18,
            "y_position": None,
        }
        assert data["placements"][0]["position"] == pytest.approx([-0.291, 0.36, 0])
        assert [s["distance_mm"] for s in data["spacings"]] == [158] * 4
        assert data["dimension_lines"][0]["kind"] == "width"
        assert len(data["dimension_lines"][0]["extension_lines"]) == 2
        assert data["closed_frame"] is True
        assert data["has_overlap"] is False

    def test_export_string_is_valid_json(self, shelved_layout: CorpusLayout) -> None:
        data = json.loads(JsonExporter().export_string(shelved_layout))
        assert len(data["panels"]) == 7
