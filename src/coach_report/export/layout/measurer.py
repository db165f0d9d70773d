"""
Module: export.layout.measurer

Purpose:
    Height measurement of content blocks.
    The packer consumes measurement as an injected function
    ``measure(block, content_width) -> height`` and never depends on how
    the height is computed.

Key Classes:
    - Measurer: Callable type of a height function
    - ReportLabMeasurer: Measures the flowable the renderer will draw

Key Functions:
    - measure_technique_head(): Height of a card without suggestions
    - measure_continuation(): Height of a card's suggestions tail
    - cancellable(): Wrap a measurer so a threading.Event can abort a run

Dependencies:
    - reportlab (via export.output.flowables)

Used By:
    - export.layout.packer: Page packing
    - export.assembly: Strengths/growth layout decision
    - export.controller: Default measurer
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from ..errors import ExportCancelled
from ..output.flowables import StyleSheet, build_flowable, build_styles
from .blocks import ContentBlock, TechniqueCard

logger = logging.getLogger(__name__)

Measurer = Callable[[ContentBlock, float], float]

# Available height handed to wrap(); blocks report their natural height
_UNBOUNDED_HEIGHT = 1_000_000.0


class ReportLabMeasurer:
    """
    Measure blocks by wrapping their ReportLab flowable at a fixed width.

    Uses the same flowable builder as the PDF renderer, so a measured
    height is the height the block occupies when drawn. Any ReportLab
    error propagates to the caller unchanged.

    Example:
        >>> measure = ReportLabMeasurer()
        >>> height = measure(Summary("Short session."), 540.0)
    """

    def __init__(self, styles: Optional[StyleSheet] = None) -> None:
        self.styles = styles or build_styles()

    def __call__(self, block: ContentBlock, content_width: float) -> float:
        flowable = build_flowable(block, content_width, self.styles)
        _, height = flowable.wrap(content_width, _UNBOUNDED_HEIGHT)
        logger.debug(f"Measured {block.id}: {height:.1f}pt at width {content_width:.1f}pt")
        return float(height)


def measure_technique_head(measure: Measurer, card: TechniqueCard, content_width: float) -> float:
    """Measure a technique card with its suggestions removed."""
    return measure(card.without_suggestions(), content_width)


def measure_continuation(measure: Measurer, card: TechniqueCard, content_width: float) -> float:
    """Measure the suggestions tail generated when ``card`` is split."""
    return measure(card.continuation(), content_width)


def cancellable(measure: Measurer, cancel_event: threading.Event) -> Measurer:
    """
    Wrap ``measure`` so that setting ``cancel_event`` aborts packing.

    The check runs before each measurement, i.e. between placement
    decisions; the packer itself has no cancellation logic and simply
    propagates the ExportCancelled raised here.

    Args:
        measure: Measurer to wrap
        cancel_event: Event set by the caller to cancel

    Returns:
        Measurer with the same results as ``measure``
    """
    def _measure(block: ContentBlock, content_width: float) -> float:
        if cancel_event.is_set():
            logger.info(f"Cancelled before measuring {block.id}")
            raise ExportCancelled()
        return measure(block, content_width)

    return _measure
