"""Exporter framework for door panel layouts.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF drawing with door, panel and peephole geometry
- json: Full layout result as JSON
- svg: Door preview with panels, peephole and hardware
- text: Plain-text panel specification report

Usage:
    from doorpanels.infrastructure.exporters import ExporterRegistry

    formats = ExporterRegistry.available_formats()
    svg_exporter = ExporterRegistry.get("svg")(preview_width=500)
    svg = svg_exporter.export_string(result)
"""

from doorpanels.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Importing the modules registers the exporters
from doorpanels.infrastructure.exporters.dxf import LAYERS, DxfExporter
from doorpanels.infrastructure.exporters.json_export import JsonExporter
from doorpanels.infrastructure.exporters.svg import SvgExporter
from doorpanels.infrastructure.exporters.text import TextReportExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "LAYERS",
    "SvgExporter",
    "TextReportExporter",
]
