"""STL format exporter for corpus layouts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from corpus.infrastructure.exporters.base import ExporterRegistry
from corpus.infrastructure.stl_exporter import StlExporter, StlMeshBuilder

if TYPE_CHECKING:
    from corpus.application.dtos import CorpusLayout


@ExporterRegistry.register("stl")
class StlLayoutExporter:
    """Exports corpus layouts to STL for 3D viewing or printing."""

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(self, mesh_builder: StlMeshBuilder | None = None) -> None:
        self._exporter = StlExporter(mesh_builder=mesh_builder)

    def export(self, layout: CorpusLayout, path: Path) -> None:
        self._exporter.export_to_file(layout, filepath=path)

    def export_string(self, layout: CorpusLayout) -> str:
        raise NotImplementedError(
            "STL format is binary and does not support string export. "
            "Use export() to write to a file instead."
        )
