"""
Module: export.controller

Purpose:
    Orchestrate a complete analysis export.
    PDF: Assemble blocks → Pack into pages → Render → Write
    Markdown: Generate text → Write

Key Functions:
    - export_analysis(): Main entry point for exporting an analysis
    - export_analysis_in_background(): Submit an export to an executor

Key Classes:
    - ExportResult: Outcome of an export

Dependencies:
    - export.assembly: Content blocks
    - export.layout: Packing
    - export.output: PDF and Markdown rendering

Used By:
    - coach_report.cli: Command line export
"""

from __future__ import annotations

import logging
import re
import threading
import time
from concurrent.futures import Executor, Future
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from coach_report.core.models import Analysis, Recording

from .assembly import build_content_blocks
from .config import ExportConfiguration, ExportFormat
from .errors import ExportCancelled, ExportError
from .layout import PageGeometry, ReportLabMeasurer, cancellable, pack_into_pages
from .layout.measurer import Measurer
from .output import generate_markdown, render_to_pdf

logger = logging.getLogger(__name__)

_INVALID_FILENAME_CHARS = re.compile(r'[:/\\?%*|"<>]')


@dataclass(frozen=True)
class ExportResult:
    """
    Outcome of an export (immutable).

    Attributes:
        path: Written file
        format: Format written
        page_count: Number of PDF pages (0 for Markdown)
        warnings: Layout warnings, e.g. blocks overflowing a page
    """

    path: Path
    format: ExportFormat
    page_count: int
    warnings: tuple[str, ...] = ()


def export_analysis(
    analysis: Analysis,
    recording: Recording,
    configuration: ExportConfiguration,
    output_dir: Path,
    *,
    filename: Optional[str] = None,
    measure: Optional[Measurer] = None,
    geometry: Optional[PageGeometry] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ExportResult:
    """
    Export an analysis to PDF or Markdown.

    Nothing is written unless the whole document was generated.

    Args:
        analysis: Analysis to export
        recording: Recording the analysis belongs to
        configuration: Export selections and format
        output_dir: Directory to write into (created if missing)
        filename: File name; defaults to "<title>_Analysis.<ext>"
        measure: Block height function (defaults to ReportLabMeasurer)
        geometry: Page geometry (defaults to US Letter)
        cancel_event: Set to cancel a PDF export between block measurements

    Returns:
        ExportResult describing the written file

    Raises:
        ExportCancelled: If cancel_event was set during pagination
        ExportError: If nothing is selected, generation fails, or the
            file cannot be written
    """
    if not configuration.has_selection:
        raise ExportError("Nothing selected for export")

    start_time = time.perf_counter()
    logger.info(f"Exporting '{recording.title}' as {configuration.format.value}")

    if configuration.format is ExportFormat.PDF:
        content, page_count, warnings = _generate_pdf(
            analysis, recording, configuration,
            measure=measure or ReportLabMeasurer(),
            geometry=geometry or PageGeometry(),
            cancel_event=cancel_event,
        )
    else:
        content = generate_markdown(analysis, recording, configuration).encode("utf-8")
        page_count, warnings = 0, []

    path = Path(output_dir) / (filename or default_filename(recording, configuration.format))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    except OSError as e:
        raise ExportError(f"Failed to save file: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Wrote {path} in {elapsed:.2f}s")

    return ExportResult(
        path=path,
        format=configuration.format,
        page_count=page_count,
        warnings=tuple(warnings),
    )


def export_analysis_in_background(
    executor: Executor,
    analysis: Analysis,
    recording: Recording,
    configuration: ExportConfiguration,
    output_dir: Path,
    **kwargs,
) -> tuple[Future, threading.Event]:
    """
    Run export_analysis on ``executor``.

    Returns:
        Tuple of (future resolving to ExportResult, event that cancels it)
    """
    cancel_event = threading.Event()
    future = executor.submit(
        export_analysis,
        analysis, recording, configuration, output_dir,
        cancel_event=cancel_event,
        **kwargs,
    )
    return future, cancel_event


def default_filename(recording: Recording, export_format: ExportFormat) -> str:
    """
    Sanitized default file name for an export.

    Example:
        >>> default_filename(Recording("Math 3/4: Fractions"), ExportFormat.PDF)
        'Math 3_4_ Fractions_Analysis.pdf'
    """
    return _INVALID_FILENAME_CHARS.sub("_", f"{recording.title}_Analysis.{export_format.extension}")


def _generate_pdf(
    analysis: Analysis,
    recording: Recording,
    configuration: ExportConfiguration,
    *,
    measure: Measurer,
    geometry: PageGeometry,
    cancel_event: Optional[threading.Event],
) -> tuple[bytes, int, list[str]]:
    """Assemble, pack and render; any failure becomes one ExportError."""
    if cancel_event is not None:
        measure = cancellable(measure, cancel_event)

    try:
        blocks = build_content_blocks(analysis, recording, configuration, measure, geometry)
        layout = pack_into_pages(
            blocks, measure, geometry,
            title=recording.title,
            document_date=recording.created_at.date(),
        )
        pdf = render_to_pdf(layout, geometry)
    except ExportCancelled:
        logger.info("PDF export cancelled")
        raise
    except Exception as e:
        logger.error(f"PDF generation failed: {e}")
        raise ExportError("Failed to generate PDF") from e

    for warning in layout.warnings:
        logger.warning(f"Layout: {warning}")

    return pdf, layout.page_count, layout.warnings
