"""Unit tests for the corpus file schema.

These tests verify:
- Valid panel and corpus models are accepted
- Unknown fields are rejected (extra="forbid")
- Non-finite sizes and empty ids are rejected
- Schema version pattern and support checks
- Panel cardinality and id uniqueness
"""

import math
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from corpus.application.config import SUPPORTED_VERSIONS, CorpusConfiguration, PanelConfig
from corpus.domain import PanelType


def _panel(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "type": "shelf",
        "width": 564,
        "height": 18,
        "depth": 560,
        "thickness": 18,
    }
    data.update(overrides)
    return data


class TestPanelConfig:
    """Tests for PanelConfig model."""

    def test_minimal_panel(self) -> None:
        panel = PanelConfig(**_panel())
        assert panel.type == PanelType.SHELF
        assert panel.id is None
        assert panel.y_position is None

    def test_all_panel_types(self) -> None:
        for panel_type in PanelType:
            assert PanelConfig(**_panel(type=panel_type.value)).type == panel_type

    def test_out_of_range_sizes_are_accepted(self) -> None:
        """Clamping happens when the file becomes a registry, not here."""
        panel = PanelConfig(**_panel(width=5000, thickness=3))
        assert panel.width == 5000
        assert panel.thickness == 3

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PanelConfig(**_panel(type="drawer"))

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            PanelConfig(**_panel(color="oak"))
        assert "extra" in str(exc_info.value).lower()

    def test_missing_size_rejected(self) -> None:
        data = _panel()
        del data["depth"]
        with pytest.raises(PydanticValidationError):
            PanelConfig(**data)

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_size_rejected(self, value: float) -> None:
        with pytest.raises(PydanticValidationError):
            PanelConfig(**_panel(width=value))

    def test_non_finite_position_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PanelConfig(**_panel(y_position=math.inf))

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PanelConfig(**_panel(id=""))


class TestCorpusConfiguration:
    """Tests for the root corpus model."""

    def test_empty_corpus(self) -> None:
        config = CorpusConfiguration(schema_version="1.0")
        assert config.panels == []
        assert config.name is None

    def test_supported_versions(self) -> None:
        assert "1.0" in SUPPORTED_VERSIONS

    def test_newer_minor_version_accepted(self) -> None:
        assert CorpusConfiguration(schema_version="1.3").schema_version == "1.3"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            CorpusConfiguration(schema_version="2.0")
        assert "Unsupported schema version" in str(exc_info.value)

    @pytest.mark.parametrize("version", ["1", "v1.0", "1.0.0", ""])
    def test_version_pattern(self, version: str) -> None:
        with pytest.raises(PydanticValidationError):
            CorpusConfiguration(schema_version=version)

    def test_many_shelves_allowed(self) -> None:
        config = CorpusConfiguration(
            schema_version="1.0", panels=[_panel() for _ in range(5)]
        )
        assert len(config.panels) == 5

    @pytest.mark.parametrize("panel_type", ["left-side", "right-side", "top", "bottom"])
    def test_duplicate_singleton_rejected(self, panel_type: str) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            CorpusConfiguration(
                schema_version="1.0",
                panels=[_panel(type=panel_type), _panel(type=panel_type)],
            )
        assert f"Only one '{panel_type}' panel is allowed, found 2" in str(exc_info.value)

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            CorpusConfiguration(
                schema_version="1.0",
                panels=[_panel(id="a"), _panel(id="b"), _panel(id="a")],
            )
        assert "Duplicate panel ids: a" in str(exc_info.value)

    def test_dump_uses_type_values(self) -> None:
        config = CorpusConfiguration(
            schema_version="1.0", panels=[_panel(type="left-side", id="l")]
        )
        dumped = config.model_dump(mode="json")
        assert dumped["panels"][0]["type"] == "left-side"
