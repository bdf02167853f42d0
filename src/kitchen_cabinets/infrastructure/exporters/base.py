"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import ClassVar, Protocol, Sequence, Union, runtime_checkable

from kitchen_cabinets.application.dtos import GenerationOutput

logger = logging.getLogger(__name__)

ExportInput = Union[GenerationOutput, Sequence[GenerationOutput]]


def as_outputs(output: ExportInput) -> list[GenerationOutput]:
    """Normalize a single output or a sequence of outputs to a list.

    Outputs that failed generation are skipped, with a warning.
    """
    outputs = [output] if isinstance(output, GenerationOutput) else list(output)
    valid = [o for o in outputs if o.is_valid]
    skipped = len(outputs) - len(valid)
    if skipped:
        logger.warning(f"Skipping {skipped} cabinet(s) that failed generation")
    return valid


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert one or more GenerationOutputs to a specific format.

    Attributes:
        format_name: Name of the export format (e.g., "csv", "dxf").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: ExportInput, path: Path) -> None:
        """Export generation output to a file."""
        ...

    def export_string(self, output: ExportInput) -> str:
        """Export generation output as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("csv")
        class CsvCutListExporter:
            format_name = "csv"
            file_extension = "csv"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
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
    """Manages export operations to multiple formats.

    Attributes:
        output_dir: Directory where exported files will be saved.
        exporter_options: Constructor keyword arguments per format name.
    """

    def __init__(
        self,
        output_dir: Path,
        exporter_options: dict[str, dict] | None = None,
    ) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory where exported files will be saved.
                Created if it doesn't exist.
            exporter_options: Keyword arguments passed to each format's
                exporter, e.g. {"dxf": {"sheet": SheetSize(...)}}.
        """
        self.output_dir = Path(output_dir)
        self.exporter_options = exporter_options or {}

    def export_all(
        self,
        formats: list[str],
        output: ExportInput,
        project_name: str = "cabinets",
    ) -> dict[str, Path]:
        """Export generation output to multiple formats.

        Files are named "{project_name}_{format}.{ext}".

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter_class = ExporterRegistry.get(format_name)
            exporter = exporter_class(**self.exporter_options.get(format_name, {}))

            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: ExportInput,
        project_name: str = "cabinets",
    ) -> Path:
        """Export generation output to a single format."""
        results = self.export_all([format_name], output, project_name)
        return results[format_name]
