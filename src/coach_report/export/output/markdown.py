"""
Module: export.output.markdown

Purpose:
    Plain Markdown export of an analysis. No pagination is involved; the
    same export selections decide which sections appear.

Key Functions:
    - generate_markdown(): Analysis + configuration -> Markdown text
"""

from __future__ import annotations

from typing import List

from coach_report.core.models import Analysis, RatingLevel, Recording

from ..config import ExportConfiguration
from .text import format_date, rating_stars

FOOTER = "*Generated by Teacher Coach*"


def generate_markdown(
    analysis: Analysis,
    recording: Recording,
    configuration: ExportConfiguration,
) -> str:
    """
    Render the selected parts of an analysis as Markdown.

    Args:
        analysis: Analysis to export
        recording: Recording the analysis belongs to
        configuration: Sections and techniques to include

    Returns:
        Markdown document text
    """
    lines: List[str] = [
        f"# {recording.title}",
        "",
        f"**Duration:** {recording.formatted_duration}",
        f"**Date:** {format_date(recording.created_at)}",
        "",
        "---",
        "",
    ]

    if configuration.include_summary:
        lines += ["## Summary", "", analysis.overall_summary, ""]

    if configuration.include_strengths and analysis.strengths:
        lines += ["## Strengths", ""]
        lines += [f"- {s}" for s in analysis.strengths]
        lines.append("")

    if configuration.include_growth_areas and analysis.growth_areas:
        lines += ["## Growth Areas", ""]
        lines += [f"- {a}" for a in analysis.growth_areas]
        lines.append("")

    selected = [
        e for e in analysis.technique_evaluations
        if e.id in configuration.included_technique_ids
    ]
    if selected:
        lines += ["## Technique Feedback", ""]

        if analysis.ratings_included:
            lines += [
                "### Rating Scale",
                "",
                "| Rating | Level | Description |",
                "|--------|-------|-------------|",
            ]
            lines += [
                f"| {rating_stars(level.value)} | {level.display_text} | {level.description} |"
                for level in RatingLevel
            ]
            lines.append("")

        for evaluation in selected:
            lines.append(f"### {evaluation.technique_name}")

            if analysis.ratings_included and evaluation.rating is not None:
                lines += ["", f"**Rating:** {rating_stars(evaluation.rating)}"]

            if not evaluation.was_observed:
                lines += ["", "*Not observed*"]

            lines += ["", evaluation.feedback]

            if evaluation.evidence:
                lines += ["", "**Evidence:**"]
                lines += [f'> "{item}"' for item in evaluation.evidence]

            if evaluation.suggestions:
                lines += ["", "**Suggestions:**"]
                lines += [f"- {s}" for s in evaluation.suggestions]

            lines.append("")

    if configuration.include_next_steps and analysis.actionable_next_steps:
        lines += ["## Next Steps", ""]
        lines += [
            f"{number}. {step}"
            for number, step in enumerate(analysis.actionable_next_steps, start=1)
        ]
        lines.append("")

    lines += ["---", "", FOOTER]
    return "\n".join(lines)
