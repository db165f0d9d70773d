"""
Module: export.layout.packer

Purpose:
    Pack content blocks onto pages of bounded height.
    Blocks are atomic, with one exception: a technique card that does not
    fit may leave its suggestions for the next page.

Key Functions:
    - pack_into_pages(): Main packing function

Algorithm:
    Greedy single forward pass, no backtracking:
    1. For each block, measure it and place it on the current page if
       height used + spacing + block height <= max height (inclusive)
    2. If it does not fit and it is a technique card with suggestions,
       try the card without suggestions on the current page; if that fits,
       place it, close the page and open the next page with a
       "suggestions continued" block
    3. Otherwise close the current page and start a new one with the block
       alone; a block taller than a whole page still goes there alone and
       a warning is recorded

Dependencies:
    - export.layout.blocks: ContentBlock, TechniqueCard
    - export.layout.config: PageGeometry
    - export.layout.models: PagePlan, LayoutResult

Used By:
    - export.controller: Export pipeline
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence

from .blocks import ContentBlock, TechniqueCard
from .config import PageGeometry
from .measurer import Measurer, measure_continuation, measure_technique_head
from .models import LayoutResult, PagePlan

logger = logging.getLogger(__name__)


def pack_into_pages(
    blocks: Sequence[ContentBlock],
    measure: Measurer,
    geometry: Optional[PageGeometry] = None,
    *,
    title: Optional[str] = None,
    document_date: Optional[date] = None,
) -> LayoutResult:
    """
    Distribute blocks across pages, preserving their order.

    Rules:
    1. Spacing is only added between blocks, never before the first block
       of a page.
    2. Only a TechniqueCard with suggestions is ever split, into a head
       (suggestions cleared) on the current page and a
       TechniqueSuggestionsContinued tail opening the next page.
    3. A block taller than the page is placed alone and overflows.

    Args:
        blocks: Blocks in read order
        measure: Height function, called as measure(block, content_width)
        geometry: Page geometry (defaults to US Letter)
        title: Document title passed through for running headers
        document_date: Document date passed through for running headers

    Returns:
        LayoutResult with page plans and overflow warnings

    Raises:
        ValueError: If the measurer returns a negative height
        Exception: Any error raised by ``measure`` propagates unchanged

    Example:
        >>> result = pack_into_pages(blocks, ReportLabMeasurer())
        >>> [len(p.blocks) for p in result.pages]
        [4, 3]
    """
    geometry = geometry or PageGeometry()

    if not blocks:
        return LayoutResult(pages=(), warnings=[], title=title, document_date=document_date)

    max_height = geometry.max_height
    width = geometry.content_width

    pages: List[PagePlan] = []
    warnings: List[str] = []

    current_page: List[ContentBlock] = []
    current_height = 0.0

    for block in blocks:
        spacing = geometry.block_spacing if current_page else 0
        block_height = _measure(measure, block, width)

        # Fits as-is
        if current_height + spacing + block_height <= max_height:
            current_page.append(block)
            current_height += spacing + block_height
            continue

        # Split at the suggestions boundary if the head fits here
        if isinstance(block, TechniqueCard) and block.is_splittable:
            head = block.without_suggestions()
            head_height = _checked(head, measure_technique_head(measure, block, width))

            if current_height + spacing + head_height <= max_height:
                current_page.append(head)
                current_height += spacing + head_height
                pages.append(_close_page(len(pages), current_page, current_height))

                tail = block.continuation()
                current_page = [tail]
                current_height = _checked(tail, measure_continuation(measure, block, width))
                logger.debug(
                    f"Split {block.id}: head on page {len(pages)}, "
                    f"{len(tail.suggestions)} suggestions continue on page {len(pages) + 1}"
                )
                if current_height > max_height:
                    warnings.append(_overflow_warning(tail, current_height, max_height, len(pages)))
                continue

        # Start a new page with this block alone
        if current_page:
            pages.append(_close_page(len(pages), current_page, current_height))
        current_page = [block]
        current_height = block_height

        if block_height > max_height:
            warnings.append(_overflow_warning(block, block_height, max_height, len(pages)))

    # Add final page
    if current_page:
        pages.append(_close_page(len(pages), current_page, current_height))

    logger.info(f"Packed {len(blocks)} blocks onto {len(pages)} pages")

    return LayoutResult(
        pages=tuple(pages),
        warnings=warnings,
        title=title,
        document_date=document_date,
    )


def _measure(measure: Measurer, block: ContentBlock, width: float) -> float:
    return _checked(block, measure(block, width))


def _checked(block: ContentBlock, height: float) -> float:
    if height < 0:
        raise ValueError(f"Measured negative height for {block.id}: {height}")
    return height


def _close_page(index: int, blocks: List[ContentBlock], height_used: float) -> PagePlan:
    return PagePlan(index=index, blocks=tuple(blocks), height_used=height_used)


def _overflow_warning(block: ContentBlock, height: float, max_height: float, page_index: int) -> str:
    """Log and return the warning for a block taller than a page."""
    message = (
        f"Block {block.id} overflows page {page_index + 1}: "
        f"{height:.1f}pt needed, {max_height:.1f}pt available"
    )
    logger.warning(message)
    return message
