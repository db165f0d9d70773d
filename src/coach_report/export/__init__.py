"""
Module: export

Purpose:
    Export of teaching-session analyses to paginated PDF or Markdown.
    Builds content blocks from an analysis, packs them onto fixed-size
    pages and renders the pages with ReportLab.

Key Functions:
    - export_analysis(): Main entry point for exporting
    - build_content_blocks(): Analysis -> ordered content blocks
    - pack_into_pages(): Blocks -> pages

Key Classes:
    - ExportConfiguration: Sections and techniques to include
    - ExportFormat: PDF or Markdown
    - ExportError: Exception for export failures

Dependencies:
    - reportlab: Measurement and PDF generation
    - coach_report.core.models: Analysis, Recording

Used By:
    - coach_report.cli: Command line export
"""

from .errors import ExportCancelled, ExportError
from .config import ExportConfiguration, ExportFormat
from .assembly import build_content_blocks
from .layout import PageGeometry, ReportLabMeasurer, pack_into_pages
from .controller import (
    ExportResult,
    default_filename,
    export_analysis,
    export_analysis_in_background,
)

__all__ = [
    # Config
    "ExportConfiguration",
    "ExportFormat",
    "PageGeometry",
    # Pipeline
    "build_content_blocks",
    "pack_into_pages",
    "ReportLabMeasurer",
    # Controller
    "export_analysis",
    "export_analysis_in_background",
    "default_filename",
    "ExportResult",
    "ExportError",
    "ExportCancelled",
]
