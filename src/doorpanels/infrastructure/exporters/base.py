"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from doorpanels.domain.value_objects import LayoutResult


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a LayoutResult to a specific format. Each exporter
    defines its format name, file extension and media type, and
    implements at least ``export``. Every built-in format is text based,
    so all of them also support ``export_string``.

    Attributes:
        format_name: Registry name of the format (e.g., "svg", "dxf").
        file_extension: File extension without leading dot (e.g., "txt").
        media_type: MIME type used when the export is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, result: LayoutResult, path: Path) -> None:
        """Export a layout result to a file.

        Args:
            result: The computed door layout.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, result: LayoutResult) -> str:
        """Export a layout result as a string.

        The CLI writes this to stdout when no output file is given, and
        the REST API returns it as the response body.

        Args:
            result: The computed door layout.

        Returns:
            The exported document.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator when ``doorpanels.infrastructure.exporters`` is imported.
    The CLI ``formats`` command and the ``/export/formats`` endpoint list
    whatever is registered here.

    Example:
        @ExporterRegistry.register("json")
        class JsonExporter:
            format_name = "json"
            file_extension = "json"
            media_type = "application/json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class.

        Registering a name twice replaces the earlier class and logs a
        warning.

        Args:
            format_name: The format name to register (e.g., "svg").

        Returns:
            Decorator function that registers the class.
        """

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

        Args:
            format_name: The format name to look up.

        Returns:
            The exporter class for the format.

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
        """Get the registered format names, sorted."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        """Check if a format is registered.

        Args:
            format_name: The format name to check.

        Returns:
            True if an exporter exists for the format.
        """
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters.

        Tests that clear the registry must restore it afterwards, since
        the built-in exporters only register on first import.
        """
        cls._exporters.clear()


class ExportManager:
    """Writes a layout result to one or more formats in a directory.

    Attributes:
        output_dir: Directory where exported files are saved.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory where exported files are saved. It is
                created on the first export if missing.
        """
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        result: LayoutResult,
        project_name: str = "door",
    ) -> dict[str, Path]:
        """Export a layout result to multiple formats.

        Each exporter is created with its default options. Files are named
        ``{project_name}.{extension}``, so every format must have its own
        extension.

        Args:
            formats: Format names to export (e.g., ["svg", "dxf"]).
            result: The computed door layout.
            project_name: Base name for output files (default "door").

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / f"{project_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(result, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        result: LayoutResult,
        project_name: str = "door",
    ) -> Path:
        """Export a layout result to a single format.

        Args:
            format_name: Format name to export (e.g., "dxf").
            result: The computed door layout.
            project_name: Base name for the output file (default "door").

        Returns:
            Path to the exported file.

        Raises:
            KeyError: If the format is not registered.
            OSError: If file operations fail.
        """
        return self.export_all([format_name], result, project_name)[format_name]
