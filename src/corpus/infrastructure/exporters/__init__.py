"""Exporter framework for corpus layouts.

Registered exporters:
- json: Envelope, panels, placements, spacings and dimension lines
- stl: One box mesh per panel, in millimetres

Usage:
    from corpus.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["json", "stl"], layout, project_name="kitchen-base")
"""

from corpus.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from corpus.infrastructure.exporters.json_layout import JsonLayoutExporter
from corpus.infrastructure.exporters.stl import StlLayoutExporter

__all__ = [
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonLayoutExporter",
    "StlLayoutExporter",
]
