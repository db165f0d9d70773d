"""
Module: export.layout.config

Purpose:
    Page geometry for report pagination.
    Defines page dimensions, margins, reserved header/footer bands and
    the spacing between content blocks, all in PDF points.

Key Classes:
    - PageGeometry: Immutable page geometry

Dependencies:
    - dataclasses (std)

Used By:
    - export.layout.packer: Height available per page
    - export.assembly: Stacked strengths/growth decision
    - export.output.renderer: Page drawing
"""

from __future__ import annotations

from dataclasses import dataclass


# US Letter (8.5 x 11 inches) in points
LETTER_WIDTH_PT = 612
LETTER_HEIGHT_PT = 792

# Strengths/growth switch to a stacked layout above this share of a page
STACKED_LAYOUT_THRESHOLD = 0.4


@dataclass(frozen=True)
class PageGeometry:
    """
    Page geometry for pagination (immutable).

    Attributes:
        page_width: Full page width in points
        page_height: Full page height in points
        margin: Margin on all sides in points
        header_height: Band reserved for the running header
        footer_height: Band reserved for the page footer
        block_spacing: Vertical gap between consecutive blocks on a page

    Example:
        >>> geometry = PageGeometry()
        >>> geometry.content_width
        540
        >>> geometry.max_height
        640
    """

    page_width: float = LETTER_WIDTH_PT
    page_height: float = LETTER_HEIGHT_PT
    margin: float = 36
    header_height: float = 50
    footer_height: float = 30
    block_spacing: float = 12

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.header_height < 0 or self.footer_height < 0:
            raise ValueError("header_height and footer_height must be non-negative")
        if self.block_spacing < 0:
            raise ValueError(f"block_spacing must be non-negative: {self.block_spacing}")
        if self.content_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.max_height <= 0:
            raise ValueError("Margins and header/footer exceed page height")

    @property
    def content_width(self) -> float:
        """Width available for content (page width minus margins)."""
        return self.page_width - 2 * self.margin

    @property
    def max_height(self) -> float:
        """Height available for content per page (excluding header/footer)."""
        return self.page_height - 2 * self.margin - self.header_height - self.footer_height

    @property
    def content_top(self) -> float:
        """Distance from the top page edge to the top of the content area."""
        return self.margin + self.header_height
