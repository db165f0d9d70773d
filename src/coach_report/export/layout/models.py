"""
Module: export.layout.models

Purpose:
    Data models for packed pages.
    Immutable dataclasses describing which blocks land on which page.

Key Classes:
    - PagePlan: Blocks placed on a single page
    - LayoutResult: Final packing output with warnings and document info

Dependencies:
    - dataclasses (std)
    - export.layout.blocks: ContentBlock

Used By:
    - export.layout.packer: Creates PagePlans
    - export.output.renderer: Draws PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .blocks import ContentBlock


@dataclass(frozen=True)
class PagePlan:
    """
    Blocks placed on a single page, in read order.

    Attributes:
        index: Page number (0-indexed)
        blocks: Tuple of blocks on this page
        height_used: Sum of block heights plus inter-block spacing

    Example:
        >>> page = PagePlan(index=0, blocks=(header, summary), height_used=212)
        >>> page.number
        1
    """

    index: int
    blocks: tuple[ContentBlock, ...]
    height_used: float

    @property
    def number(self) -> int:
        """Page number as printed (1-indexed)."""
        return self.index + 1

    @property
    def block_count(self) -> int:
        return len(self.blocks)

    @property
    def is_empty(self) -> bool:
        return len(self.blocks) == 0

    def overflows(self, max_height: float) -> bool:
        """Check if content on this page is taller than the page allows."""
        return self.height_used > max_height


@dataclass(frozen=True)
class LayoutResult:
    """
    Final packing output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans
        warnings: Overflow warnings raised while packing
        title: Document title for running headers (optional)
        document_date: Date shown in running headers (optional)

    Example:
        >>> result = LayoutResult(pages=(page1, page2))
        >>> result.page_label(page2)
        'Page 2 of 2'
    """

    pages: tuple[PagePlan, ...]
    warnings: list[str] = field(default_factory=list)
    title: Optional[str] = None
    document_date: Optional[date] = None

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def total_blocks(self) -> int:
        """Total number of blocks across all pages."""
        return sum(p.block_count for p in self.pages)

    def page_label(self, page: PagePlan) -> str:
        """Footer label for ``page``; the total is never shown below 1."""
        return f"Page {page.number} of {max(self.page_count, 1)}"

    def flattened_blocks(self) -> list[ContentBlock]:
        """All blocks in print order."""
        return [block for page in self.pages for block in page.blocks]
