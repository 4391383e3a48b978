"""Integration tests for the corpus editing CLI.

These tests drive the CLI through a corpus file on disk:
- add, remove and move edit the file in place
- show renders text and JSON layouts, optionally with an STL model
- types lists what can still be added
- export writes files through the exporter registry
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from corpus.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    """A writable copy of the kitchen-base fixture."""
    path = tmp_path / "kitchen-base.json"
    path.write_text((FIXTURES_PATH / "valid_corpus.json").read_text())
    return path


def _panels(path: Path) -> list[dict]:
    return json.loads(path.read_text())["panels"]


class TestAddCommand:
    def test_creates_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "new.json"
        result = runner.invoke(app, ["add", str(path), "--type", "left-side"])

        assert result.exit_code == 0, result.output
        assert "Added left side panel" in result.output
        panels = _panels(path)
        assert len(panels) == 1
        assert panels[0]["type"] == "left-side"
        assert panels[0]["height"] == 720

    def test_sizes_are_clamped(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "new.json"
        result = runner.invoke(
            app, ["add", str(path), "-t", "shelf", "--width", "5000", "--thickness", "30"]
        )

        assert result.exit_code == 0, result.output
        panel = _panels(path)[0]
        assert panel["width"] == 2000
        assert panel["thickness"] == 25

    def test_shelf_respreads(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["add", str(corpus_file), "-t", "shelf"])

        assert result.exit_code == 0, result.output
        shelves = [p for p in _panels(corpus_file) if p["type"] == "shelf"]
        assert [s["y_position"] for s in shelves] == pytest.approx([184.5, 360, 535.5])

    def test_duplicate_top_rejected(self, runner: CliRunner, corpus_file: Path) -> None:
        before = corpus_file.read_text()
        result = runner.invoke(app, ["add", str(corpus_file), "-t", "top"])

        assert result.exit_code == 1
        assert "A top panel is already present" in result.output
        assert corpus_file.read_text() == before

    def test_unknown_type_rejected(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["add", str(tmp_path / "x.json"), "-t", "drawer"])
        assert result.exit_code != 0
        assert not (tmp_path / "x.json").exists()

    def test_keeps_project_name(self, runner: CliRunner, corpus_file: Path) -> None:
        runner.invoke(app, ["add", str(corpus_file), "-t", "shelf"])
        assert json.loads(corpus_file.read_text())["name"] == "kitchen-base"


class TestRemoveCommand:
    def test_remove_shelf(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["remove", str(corpus_file), "shelf-1"])

        assert result.exit_code == 0, result.output
        assert "Removed panel shelf-1" in result.output
        shelves = [p for p in _panels(corpus_file) if p["type"] == "shelf"]
        assert [s["id"] for s in shelves] == ["shelf-2"]
        assert shelves[0]["y_position"] == pytest.approx(360)

    def test_remove_by_prefix(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["remove", str(corpus_file), "bott"])

        assert result.exit_code == 0, result.output
        assert "Removed panel bottom" in result.output

    def test_ambiguous_prefix(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["remove", str(corpus_file), "shelf"])

        assert result.exit_code == 1
        assert "ambiguous" in result.output

    def test_unknown_panel(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["remove", str(corpus_file), "ghost"])

        assert result.exit_code == 1
        assert "Panel not found: ghost" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["remove", str(tmp_path / "none.json"), "x"])

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestMoveCommand:
    def test_move_shelf(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["move", str(corpus_file), "shelf-1", "300.5"])

        assert result.exit_code == 0, result.output
        assert "Moved shelf shelf-1 to 301 mm" in result.output
        assert "Warning" not in result.output

    def test_position_survives_reload(self, runner: CliRunner, corpus_file: Path) -> None:
        runner.invoke(app, ["move", str(corpus_file), "shelf-1", "300"])
        runner.invoke(app, ["remove", str(corpus_file), "right"])

        shelf = next(p for p in _panels(corpus_file) if p["id"] == "shelf-1")
        assert shelf["y_position"] == 300

    def test_overlap_warns_and_saves(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["move", str(corpus_file), "shelf-2", "250"])

        assert result.exit_code == 0, result.output
        assert "Warning: Shelf (shelf-1) overlaps Shelf (shelf-2)" in result.output
        shelf = next(p for p in _panels(corpus_file) if p["id"] == "shelf-2")
        assert shelf["y_position"] == 250

    def test_only_shelves_move(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["move", str(corpus_file), "top", "500"])

        assert result.exit_code == 1
        assert "Only shelves can be repositioned" in result.output


class TestShowCommand:
    def test_text(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["show", str(corpus_file)])

        assert result.exit_code == 0, result.output
        assert "Dimensions: 600 W x 720 H x 560 D (mm)" in result.output
        assert "Closed frame: yes" in result.output
        assert "Total panels: 6" in result.output
        assert "FRONT ELEVATION" in result.output

    def test_json(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["show", str(corpus_file), "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["envelope"]["height"] == 720
        assert [s["distance_mm"] for s in data["spacings"]] == [216, 216, 216]

    def test_stl(self, runner: CliRunner, corpus_file: Path, tmp_path: Path) -> None:
        stl_path = tmp_path / "model.stl"
        result = runner.invoke(app, ["show", str(corpus_file), "--stl", str(stl_path)])

        assert result.exit_code == 0, result.output
        assert stl_path.exists()
        assert "STL file saved to" in result.output

    def test_unknown_format(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["show", str(corpus_file), "-f", "yaml"])
        assert result.exit_code == 1

    def test_invalid_file(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["show", str(FIXTURES_PATH / "duplicate_top.json")])
        assert result.exit_code == 1
        assert "Errors:" in result.output


class TestTypesCommand:
    def test_new_corpus(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["types", str(tmp_path / "none.json")])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert [line.split()[0] for line in lines] == [
            "left-side",
            "right-side",
            "top",
            "bottom",
            "shelf",
        ]

    def test_closed_frame(self, runner: CliRunner, corpus_file: Path) -> None:
        result = runner.invoke(app, ["types", str(corpus_file)])
        assert result.output.split() == ["shelf", "Shelf"]


class TestExportCommand:
    def test_all_formats(self, runner: CliRunner, corpus_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        result = runner.invoke(app, ["export", str(corpus_file), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert (out / "kitchen-base.stl").exists()
        assert (out / "kitchen-base.json").exists()

    def test_single_format(self, runner: CliRunner, corpus_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        result = runner.invoke(
            app, ["export", str(corpus_file), "--formats", "json", "-o", str(out)]
        )

        assert result.exit_code == 0, result.output
        assert [p.name for p in out.iterdir()] == ["kitchen-base.json"]

    def test_unknown_format(self, runner: CliRunner, corpus_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["export", str(corpus_file), "--formats", "dxf", "-o", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Unknown formats: dxf" in result.output
