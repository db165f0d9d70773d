"""
Command line export of an analysis JSON file.

Usage:
    coach-report analysis.json -o exports/ --format pdf
    coach-report analysis.json --technique wait-time --technique cold-call --no-next-steps
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from coach_report import __version__
from coach_report.core.models import Recording
from coach_report.core.utils import load_analysis_file
from coach_report.export import (
    ExportConfiguration,
    ExportError,
    ExportFormat,
    export_analysis,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coach-report",
        description="Export a teaching-session analysis to PDF or Markdown",
    )
    parser.add_argument("analysis", type=Path, help="Path to analysis JSON")
    parser.add_argument("--output-dir", "-o", type=Path, default=Path("."),
                        help="Directory to write the export into (default: current directory)")
    parser.add_argument("--format", "-f", choices=[f.value for f in ExportFormat],
                        default=ExportFormat.PDF.value, help="Output format (default: pdf)")
    parser.add_argument("--filename", help="Output file name (default: <title>_Analysis.<ext>)")
    parser.add_argument("--title", help="Recording title (overrides the file's recording)")
    parser.add_argument("--duration", type=float, help="Recording duration in seconds")
    parser.add_argument("--technique", action="append", dest="techniques", metavar="ID",
                        help="Evaluation id to include; repeat for more (default: all)")
    parser.add_argument("--no-summary", action="store_true", help="Leave out the summary")
    parser.add_argument("--no-strengths", action="store_true", help="Leave out strengths")
    parser.add_argument("--no-growth-areas", action="store_true", help="Leave out growth areas")
    parser.add_argument("--no-next-steps", action="store_true", help="Leave out next steps")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        analysis, recording = load_analysis_file(args.analysis)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read {args.analysis}: {e}")
        return 1

    recording = _resolve_recording(args, recording, analysis.created_at)

    technique_ids = frozenset(args.techniques) if args.techniques else analysis.evaluation_ids
    configuration = ExportConfiguration(
        format=ExportFormat(args.format),
        include_summary=not args.no_summary,
        include_strengths=not args.no_strengths,
        include_growth_areas=not args.no_growth_areas,
        include_next_steps=not args.no_next_steps,
        included_technique_ids=technique_ids,
    )

    try:
        result = export_analysis(
            analysis, recording, configuration, args.output_dir,
            filename=args.filename,
        )
    except ExportError as e:
        logger.error(str(e))
        return 1

    if result.format is ExportFormat.PDF:
        print(f"Wrote {result.path} ({result.page_count} pages)")
    else:
        print(f"Wrote {result.path}")
    for warning in result.warnings:
        print(f"  warning: {warning}")
    return 0


def _resolve_recording(
    args: argparse.Namespace,
    recording: Optional[Recording],
    fallback_date: datetime,
) -> Recording:
    """Combine the file's recording with command line overrides."""
    title = args.title or (recording.title if recording else args.analysis.stem)
    duration = args.duration if args.duration is not None else (
        recording.duration_seconds if recording else 0.0
    )
    created_at = recording.created_at if recording else fallback_date
    return Recording(title=title, duration_seconds=duration, created_at=created_at)


if __name__ == "__main__":
    sys.exit(main())
