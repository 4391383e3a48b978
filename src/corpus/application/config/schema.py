"""Pydantic configuration schema models for corpus files.

A corpus file is a JSON snapshot of the panel registry. It uses Pydantic v2
for validation and serialization. The PanelType enum is reused from the
domain layer so file values and domain values cannot drift apart.
"""

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from corpus.domain.value_objects import PanelType

# Supported schema versions for corpus files
# Version 1.0: Initial schema with a flat panel list
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PanelConfig(BaseModel):
    """Configuration for a single panel.

    Sizes are in millimetres. Values outside the allowed range are accepted
    here and clamped when the file is turned into a registry.

    Attributes:
        id: Stable panel identifier. Generated on load when omitted.
        type: Panel type (left-side, right-side, top, bottom, shelf).
        width: Panel width in mm.
        height: Panel height in mm.
        depth: Panel depth in mm.
        thickness: Board thickness in mm.
        y_position: Vertical position in mm for horizontal panels. Top and
            bottom positions are always recomputed; a shelf without one is
            spread evenly with the other unpositioned shelves.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    type: PanelType
    width: float = Field(..., allow_inf_nan=False)
    height: float = Field(..., allow_inf_nan=False)
    depth: float = Field(..., allow_inf_nan=False)
    thickness: float = Field(..., allow_inf_nan=False)
    y_position: float | None = Field(default=None, allow_inf_nan=False)


class CorpusConfiguration(BaseModel):
    """Root configuration model for a corpus file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        name: Optional project name, used for export file names
        panels: Panels in registry order

    Example:
        >>> config = CorpusConfiguration(
        ...     schema_version="1.0",
        ...     panels=[PanelConfig(type="shelf", width=564, height=18, depth=560, thickness=18)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    name: str | None = Field(default=None, description="Project name (optional)")
    panels: list[PanelConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_panel_cardinality(self) -> "CorpusConfiguration":
        """Each non-shelf type may appear once; ids must be unique."""
        counts = Counter(panel.type for panel in self.panels)
        for panel_type, count in counts.items():
            if panel_type.is_singleton and count > 1:
                raise ValueError(
                    f"Only one '{panel_type.value}' panel is allowed, found {count}"
                )

        ids = [panel.id for panel in self.panels if panel.id is not None]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate panel ids: {', '.join(duplicates)}")
        return self
