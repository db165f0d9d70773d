"""
Module: export.output.renderer

Purpose:
    Render a LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page: running header, the page's blocks
    stacked from the top of the content area, and a "Page N of M" footer.

Key Functions:
    - render_to_pdf(): LayoutResult -> PDF bytes

Dependencies:
    - reportlab: PDF generation
    - export.layout.models: LayoutResult, PagePlan
    - export.output.flowables: Block drawing

Used By:
    - export.controller: PDF export
"""

from __future__ import annotations

import io
import logging
from typing import Optional

from reportlab.pdfgen import canvas

from ..layout.config import PageGeometry
from ..layout.models import LayoutResult, PagePlan
from .flowables import MUTED_COLOR, StyleSheet, build_flowable, build_styles
from .text import format_date

logger = logging.getLogger(__name__)

# Running header/footer
APP_NAME = "Teacher Coach"
HEADER_FONT = "Helvetica-Bold"
FOOTER_FONT = "Helvetica"
CAPTION_FONT_SIZE = 9


def render_to_pdf(
    layout: LayoutResult,
    geometry: Optional[PageGeometry] = None,
    *,
    styles: Optional[StyleSheet] = None,
) -> bytes:
    """
    Render a packed layout to PDF.

    Blocks are drawn with the same flowables used for measurement, so
    blocks of a page that passed the packer's fit test stay inside the
    content area.

    Args:
        layout: Layout result from the packer
        geometry: Page geometry the layout was packed with
        styles: Paragraph styles (built on demand if omitted)

    Returns:
        PDF document bytes

    Example:
        >>> pdf = render_to_pdf(pack_into_pages(blocks, ReportLabMeasurer()))
        >>> pdf[:5]
        b'%PDF-'
    """
    geometry = geometry or PageGeometry()
    styles = styles or build_styles()

    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=(geometry.page_width, geometry.page_height))
    if layout.title:
        c.setTitle(layout.title)
    c.setCreator(APP_NAME)

    for page in layout.pages:
        _render_page(c, page, layout, geometry, styles)
        c.showPage()

    c.save()

    logger.info(f"Rendered {layout.page_count} pages")
    return buffer.getvalue()


def _render_page(
    c: canvas.Canvas,
    page: PagePlan,
    layout: LayoutResult,
    geometry: PageGeometry,
    styles: StyleSheet,
) -> None:
    """Draw header, blocks and footer of a single page."""
    _draw_header(c, layout, geometry)

    # PDF y grows upwards; blocks are laid out downwards from the content top
    top = geometry.page_height - geometry.content_top
    for i, block in enumerate(page.blocks):
        if i > 0:
            top -= geometry.block_spacing
        flowable = build_flowable(block, geometry.content_width, styles)
        _, height = flowable.wrapOn(c, geometry.content_width, geometry.max_height)
        flowable.drawOn(c, geometry.margin, top - height)
        top -= height

    _draw_footer(c, layout.page_label(page), geometry)


def _draw_header(c: canvas.Canvas, layout: LayoutResult, geometry: PageGeometry) -> None:
    """App name on the left, document date on the right, 8pt above the band bottom."""
    y = geometry.page_height - geometry.content_top + 8

    c.saveState()
    c.setFillColor(MUTED_COLOR)
    c.setFont(HEADER_FONT, CAPTION_FONT_SIZE)
    c.drawString(geometry.margin, y, APP_NAME)
    if layout.document_date is not None:
        c.setFont(FOOTER_FONT, CAPTION_FONT_SIZE)
        c.drawRightString(
            geometry.page_width - geometry.margin, y, format_date(layout.document_date)
        )
    c.restoreState()


def _draw_footer(c: canvas.Canvas, label: str, geometry: PageGeometry) -> None:
    """Centered page label, 8pt below the top of the footer band."""
    y = geometry.margin + geometry.footer_height - 8 - CAPTION_FONT_SIZE

    c.saveState()
    c.setFillColor(MUTED_COLOR)
    c.setFont(FOOTER_FONT, CAPTION_FONT_SIZE)
    c.drawCentredString(geometry.page_width / 2, y, label)
    c.restoreState()
