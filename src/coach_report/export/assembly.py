"""
Module: export.assembly

Purpose:
    Build the ordered list of content blocks for a report from an analysis
    and the user's export selections.

Key Functions:
    - build_content_blocks(): Analysis + configuration -> blocks in read order

Block order:
    header, summary, strengths/growth, rating legend, technique cards,
    next steps. The header is always present; everything else follows
    the configuration.

Dependencies:
    - export.layout: Blocks, geometry, measurer

Used By:
    - export.controller: PDF export
"""

from __future__ import annotations

import logging
from typing import List, Optional

from coach_report.core.models import Analysis, Recording

from .config import ExportConfiguration
from .layout.blocks import (
    ContentBlock,
    DocumentHeader,
    NextSteps,
    RatingLegend,
    StrengthsAndGrowth,
    Summary,
    TechniqueCard,
)
from .layout.config import STACKED_LAYOUT_THRESHOLD, PageGeometry
from .layout.measurer import Measurer

logger = logging.getLogger(__name__)


def build_content_blocks(
    analysis: Analysis,
    recording: Recording,
    configuration: ExportConfiguration,
    measure: Measurer,
    geometry: Optional[PageGeometry] = None,
) -> List[ContentBlock]:
    """
    Build content blocks from analysis and configuration.

    Args:
        analysis: Analysis to export
        recording: Recording the analysis belongs to (title, duration, date)
        configuration: Sections and techniques to include
        measure: Height function, used to choose the strengths layout
        geometry: Page geometry (defaults to US Letter)

    Returns:
        Blocks in read order
    """
    geometry = geometry or PageGeometry()
    blocks: List[ContentBlock] = []

    # Document header (always first)
    blocks.append(DocumentHeader(
        title=recording.title,
        duration=recording.formatted_duration,
        date=recording.created_at.date(),
    ))

    if configuration.include_summary:
        blocks.append(Summary(text=analysis.overall_summary))

    if configuration.include_strengths or configuration.include_growth_areas:
        blocks.append(_strengths_and_growth(analysis, configuration, measure, geometry))

    selected = [
        e for e in analysis.technique_evaluations
        if e.id in configuration.included_technique_ids
    ]

    # Legend precedes the cards it explains
    if selected and analysis.ratings_included:
        blocks.append(RatingLegend())

    for evaluation in selected:
        blocks.append(TechniqueCard(
            technique_id=evaluation.id,
            technique_name=evaluation.technique_name,
            rating=evaluation.rating,
            ratings_included=analysis.ratings_included,
            was_observed=evaluation.was_observed,
            feedback=evaluation.feedback,
            evidence=evaluation.evidence,
            suggestions=evaluation.suggestions,
        ))

    if configuration.include_next_steps and analysis.actionable_next_steps:
        blocks.append(NextSteps(steps=analysis.actionable_next_steps))

    unknown = configuration.included_technique_ids - analysis.evaluation_ids
    if unknown:
        logger.warning(f"Ignoring {len(unknown)} technique ids not in analysis: {sorted(unknown)}")

    logger.info(f"Built {len(blocks)} content blocks ({len(selected)} technique cards)")
    return blocks


def _strengths_and_growth(
    analysis: Analysis,
    configuration: ExportConfiguration,
    measure: Measurer,
    geometry: PageGeometry,
) -> StrengthsAndGrowth:
    """Side-by-side unless that would take more than 40% of a page."""
    strengths = analysis.strengths if configuration.include_strengths else ()
    growth_areas = analysis.growth_areas if configuration.include_growth_areas else ()

    side_by_side = StrengthsAndGrowth(strengths=strengths, growth_areas=growth_areas, stacked=False)
    height = measure(side_by_side, geometry.content_width)
    if height > geometry.max_height * STACKED_LAYOUT_THRESHOLD:
        logger.debug(f"Strengths/growth side-by-side is {height:.1f}pt, using stacked layout")
        return StrengthsAndGrowth(strengths=strengths, growth_areas=growth_areas, stacked=True)
    return side_by_side
