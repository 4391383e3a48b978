"""JSON format exporter for corpus layouts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from corpus.infrastructure.exporters.base import ExporterRegistry
from corpus.infrastructure.formatters import JsonExporter

if TYPE_CHECKING:
    from corpus.application.dtos import CorpusLayout


@ExporterRegistry.register("json")
class JsonLayoutExporter:
    """Exports the full layout (envelope, panels, placements, spacings and
    dimension lines) as JSON."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self) -> None:
        self._exporter = JsonExporter()

    def export(self, layout: CorpusLayout, path: Path) -> None:
        path.write_text(self.export_string(layout) + "\n", encoding="utf-8")

    def export_string(self, layout: CorpusLayout) -> str:
        return self._exporter.export_string(layout)
