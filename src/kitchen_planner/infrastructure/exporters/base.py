"""Exporter framework: Protocol, Registry and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kitchen_planner.application.dtos import ProjectReportOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters turn a ProjectReportOutput into a file format.

    Attributes:
        format_name: Registered name of the format (e.g. "bom", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: ProjectReportOutput, path: Path) -> None:
        """Write the exported report to ``path``."""
        ...

    def export_string(self, output: ProjectReportOutput) -> str:
        """Return the exported report as a string.

        Raises:
            NotImplementedError: If the format has no string form.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry of exporter classes keyed by format name.

    Example:
        @ExporterRegistry.register("json")
        class ReportJsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator registering an exporter class under ``format_name``."""

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
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Remove every registration. Used by tests."""
        cls._exporters.clear()


class ExportManager:
    """Exports a project report to one or more formats in a directory.

    Files are named ``{project_name}_{format}.{ext}``.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: ProjectReportOutput,
        project_name: str = "kitchen",
    ) -> dict[str, Path]:
        """Export ``output`` to every format in ``formats``.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered. Nothing is written
                in that case.
            OSError: If a file cannot be written.
        """
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class()
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: ProjectReportOutput,
        project_name: str = "kitchen",
    ) -> Path:
        return self.export_all([format_name], output, project_name)[format_name]
