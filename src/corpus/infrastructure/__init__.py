"""Infrastructure layer - formatters and file exporters."""

from .exporters import ExporterRegistry, ExportManager
from .formatters import (
    ElevationDiagramFormatter,
    JsonExporter,
    LayoutReportFormatter,
    PanelTableFormatter,
)
from .stl_exporter import StlExporter, StlMeshBuilder

__all__ = [
    "ElevationDiagramFormatter",
    "ExportManager",
    "ExporterRegistry",
    "JsonExporter",
    "LayoutReportFormatter",
    "PanelTableFormatter",
    "StlExporter",
    "StlMeshBuilder",
]
