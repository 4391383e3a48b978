"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from corpus.application.dtos import CorpusLayout


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Attributes:
        format_name: Name the format is registered under (e.g., "stl").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, layout: CorpusLayout, path: Path) -> None:
        """Export a layout to a file."""
        ...

    def export_string(self, layout: CorpusLayout) -> str:
        """Export a layout as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator.
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under a format name."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports a layout to one or more formats in an output directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        layout: CorpusLayout,
        project_name: str = "corpus",
    ) -> dict[str, Path]:
        """Export a layout to multiple formats.

        Files are named ``{project_name}.{ext}``.

        Args:
            formats: Format names to export (e.g., ["stl", "json"]).
            layout: The layout to export.
            project_name: Base name for output files.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        # Fail before writing anything if a format is unknown.
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class()
            filepath = self.output_dir / f"{project_name}.{exporter.file_extension}"

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(layout, filepath)
            results[format_name] = filepath

        return results
