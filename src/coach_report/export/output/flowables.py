"""
Module: export.output.flowables

Purpose:
    Build the ReportLab flowable for a content block.
    The same flowable is used to measure a block (wrap at the content
    width) and to draw it, so measured and drawn heights always agree.

Key Functions:
    - build_flowable(): Block -> single framed Table flowable
    - build_styles(): Paragraph styles used by all blocks

Dependencies:
    - reportlab: Paragraph/Table flowables
    - export.layout.blocks: ContentBlock variants

Used By:
    - export.layout.measurer: ReportLabMeasurer
    - export.output.renderer: Page drawing
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_RIGHT
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Flowable, Paragraph, Spacer, Table, TableStyle

from coach_report.core.models import RatingLevel

from ..layout.blocks import (
    BlockKind,
    ContentBlock,
    DocumentHeader,
    NextSteps,
    RatingLegend,
    StrengthsAndGrowth,
    Summary,
    TechniqueCard,
    TechniqueSuggestionsContinued,
)
from .text import format_date, rating_label

logger = logging.getLogger(__name__)

# Colors
TEXT_COLOR = colors.black
MUTED_COLOR = colors.HexColor("#6b6b6b")
CARD_BACKGROUND = colors.HexColor("#f2f2f2")
SUMMARY_BACKGROUND = colors.HexColor("#e6e6e6")
STRENGTHS_COLOR = colors.HexColor("#2e8b3d")
STRENGTHS_BACKGROUND = colors.HexColor("#e3f2e5")
GROWTH_COLOR = colors.HexColor("#d9780f")
GROWTH_BACKGROUND = colors.HexColor("#fcefe0")
NEXT_STEPS_COLOR = colors.HexColor("#1f5fbf")
NEXT_STEPS_BACKGROUND = colors.HexColor("#e4ecf8")

RATING_COLORS = {
    "red": colors.HexColor("#c62828"),
    "orange": colors.HexColor("#d9780f"),
    "yellow": colors.HexColor("#b59b00"),
    "green": colors.HexColor("#2e8b3d"),
    "blue": colors.HexColor("#1f5fbf"),
}

# Box metrics (points)
CARD_PADDING = 12
COLUMN_GAP = 16
SECTION_GAP = 12
ITEM_GAP = 4

StyleSheet = Dict[str, ParagraphStyle]


def build_styles() -> StyleSheet:
    """
    Create all paragraph styles used by report blocks.

    Returns:
        Dict of style name -> ParagraphStyle
    """
    base = getSampleStyleSheet()

    return {
        "title": ParagraphStyle(
            "ReportTitle",
            parent=base["Normal"],
            fontName="Helvetica-Bold",
            fontSize=22,
            leading=26,
            textColor=TEXT_COLOR,
            spaceAfter=8,
        ),
        "meta": ParagraphStyle(
            "ReportMeta",
            parent=base["Normal"],
            fontSize=11,
            leading=14,
            textColor=MUTED_COLOR,
        ),
        "heading": ParagraphStyle(
            "BlockHeading",
            parent=base["Normal"],
            fontName="Helvetica-Bold",
            fontSize=13,
            leading=16,
            textColor=TEXT_COLOR,
            spaceAfter=6,
        ),
        "subheading": ParagraphStyle(
            "BlockSubheading",
            parent=base["Normal"],
            fontName="Helvetica-Bold",
            fontSize=10.5,
            leading=13,
            textColor=TEXT_COLOR,
            spaceBefore=6,
            spaceAfter=ITEM_GAP,
        ),
        "body": ParagraphStyle(
            "BlockBody",
            parent=base["Normal"],
            fontSize=10.5,
            leading=14,
            textColor=TEXT_COLOR,
        ),
        "caption": ParagraphStyle(
            "BlockCaption",
            parent=base["Normal"],
            fontSize=9,
            leading=11,
            textColor=MUTED_COLOR,
            spaceAfter=ITEM_GAP,
        ),
        "rating": ParagraphStyle(
            "RatingBadge",
            parent=base["Normal"],
            fontName="Helvetica-Bold",
            fontSize=9,
            leading=16,
            alignment=TA_RIGHT,
        ),
        "quote": ParagraphStyle(
            "EvidenceQuote",
            parent=base["Normal"],
            fontName="Helvetica-Oblique",
            fontSize=10,
            leading=13,
            textColor=MUTED_COLOR,
            leftIndent=8,
            spaceAfter=ITEM_GAP,
        ),
        "bullet": ParagraphStyle(
            "BulletItem",
            parent=base["Normal"],
            fontSize=10,
            leading=13,
            textColor=TEXT_COLOR,
            leftIndent=16,
            bulletIndent=4,
            spaceAfter=ITEM_GAP,
        ),
        "step": ParagraphStyle(
            "NumberedStep",
            parent=base["Normal"],
            fontSize=10.5,
            leading=14,
            textColor=TEXT_COLOR,
            leftIndent=22,
            bulletIndent=0,
            bulletFontName="Helvetica-Bold",
            spaceAfter=6,
        ),
    }


def build_flowable(
    block: ContentBlock,
    width: float,
    styles: Optional[StyleSheet] = None,
) -> Flowable:
    """
    Build the flowable that draws ``block`` at ``width``.

    Args:
        block: Content block to draw
        width: Content width in points
        styles: Paragraph styles (built on demand if omitted)

    Returns:
        A single Table flowable spanning ``width``

    Raises:
        TypeError: If ``block`` is not a known content block
    """
    builder = _BUILDERS.get(getattr(block, "kind", None))
    if builder is None:
        raise TypeError(f"Not a content block: {block!r}")
    return builder(block, width, styles or build_styles())


# ─────────────────────────────────────────────────────────────────────────────
# Block builders
# ─────────────────────────────────────────────────────────────────────────────

def _document_header(block: DocumentHeader, width: float, styles: StyleSheet) -> Flowable:
    meta = (
        f"Duration: {escape(block.duration)}"
        f"&nbsp;&nbsp;&nbsp;&nbsp;Date: {format_date(block.date)}"
    )
    content = [
        Paragraph(_text(block.title), styles["title"]),
        Paragraph(meta, styles["meta"]),
    ]
    return _frame(content, width, background=None, padding=0)


def _summary(block: Summary, width: float, styles: StyleSheet) -> Flowable:
    content = [
        Paragraph("Summary", styles["heading"]),
        Paragraph(_text(block.text), styles["body"]),
    ]
    return _frame(content, width, background=SUMMARY_BACKGROUND)


def _strengths_and_growth(block: StrengthsAndGrowth, width: float, styles: StyleSheet) -> Flowable:
    sections = []
    if block.strengths:
        sections.append(("Strengths", block.strengths, STRENGTHS_COLOR, STRENGTHS_BACKGROUND))
    if block.growth_areas:
        sections.append(("Growth Areas", block.growth_areas, GROWTH_COLOR, GROWTH_BACKGROUND))

    if not sections:
        return _frame([Spacer(width, 0)], width, background=None, padding=0)

    if block.stacked or len(sections) == 1:
        rows = [[_list_section(*s, width=width, styles=styles)] for s in sections]
        table = Table(rows, colWidths=[width])
        commands = _zero_padding()
        for row in range(1, len(rows)):
            commands.append(("TOPPADDING", (0, row), (0, row), SECTION_GAP))
        table.setStyle(TableStyle(commands))
        return table

    column = (width - COLUMN_GAP) / 2
    left = _list_section(*sections[0], width=column, styles=styles)
    right = _list_section(*sections[1], width=column, styles=styles)
    table = Table([[left, "", right]], colWidths=[column, COLUMN_GAP, column])
    table.setStyle(TableStyle(_zero_padding()))
    return table


def _rating_legend(block: RatingLegend, width: float, styles: StyleSheet) -> Flowable:
    content: List[Flowable] = [Paragraph("Rating Scale", styles["heading"])]
    for level in RatingLevel:
        color = RATING_COLORS[level.color].hexval()[2:]
        content.append(Paragraph(
            f'<font color="#{color}"><b>{level.value} · {level.display_text}</b></font>'
            f" – {escape(level.description)}",
            styles["bullet"],
        ))
    return _frame(content, width, background=CARD_BACKGROUND)


def _technique_card(block: TechniqueCard, width: float, styles: StyleSheet) -> Flowable:
    inner = width - 2 * CARD_PADDING
    content: List[Flowable] = [_card_title(block, inner, styles)]

    if not block.was_observed:
        content.append(Paragraph("Not observed", styles["caption"]))

    content.append(Paragraph(_text(block.feedback), styles["body"]))

    if block.evidence:
        content.append(Paragraph("Evidence", styles["subheading"]))
        content.extend(
            Paragraph(f"“{_text(item)}”", styles["quote"]) for item in block.evidence
        )

    if block.suggestions:
        content.extend(_suggestions(block.suggestions, styles))

    return _frame(content, width, background=CARD_BACKGROUND)


def _suggestions_continued(
    block: TechniqueSuggestionsContinued,
    width: float,
    styles: StyleSheet,
) -> Flowable:
    content: List[Flowable] = [
        Paragraph(f"{_text(block.technique_name)} (continued)", styles["heading"]),
    ]
    content.extend(_suggestions(block.suggestions, styles))
    return _frame(content, width, background=CARD_BACKGROUND)


def _next_steps(block: NextSteps, width: float, styles: StyleSheet) -> Flowable:
    heading = ParagraphStyle("NextStepsHeading", parent=styles["heading"], textColor=NEXT_STEPS_COLOR)
    content: List[Flowable] = [Paragraph("Next Steps", heading)]
    content.extend(
        Paragraph(_text(step), styles["step"], bulletText=f"{number}.")
        for number, step in enumerate(block.steps, start=1)
    )
    return _frame(content, width, background=NEXT_STEPS_BACKGROUND)


_BUILDERS: Dict[BlockKind, Callable[..., Flowable]] = {
    BlockKind.DOCUMENT_HEADER: _document_header,
    BlockKind.SUMMARY: _summary,
    BlockKind.STRENGTHS_AND_GROWTH: _strengths_and_growth,
    BlockKind.RATING_LEGEND: _rating_legend,
    BlockKind.TECHNIQUE_CARD: _technique_card,
    BlockKind.TECHNIQUE_SUGGESTIONS_CONTINUED: _suggestions_continued,
    BlockKind.NEXT_STEPS: _next_steps,
}


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _text(value: str) -> str:
    """Escape user text for Paragraph markup, keeping line breaks."""
    return escape(value).replace("\n", "<br/>")


def _card_title(block: TechniqueCard, width: float, styles: StyleSheet) -> Flowable:
    title = Paragraph(_text(block.technique_name), styles["heading"])
    if not block.shows_rating:
        return title

    color = RATING_COLORS[RatingLevel(block.rating).color]
    badge_style = ParagraphStyle("RatingBadgeColored", parent=styles["rating"], textColor=color)
    badge = Paragraph(escape(rating_label(block.rating)), badge_style)
    badge_width = min(110.0, width / 3)
    table = Table([[title, badge]], colWidths=[width - badge_width, badge_width])
    table.setStyle(TableStyle(_zero_padding() + [("VALIGN", (0, 0), (-1, -1), "TOP")]))
    return table


def _suggestions(suggestions: tuple[str, ...], styles: StyleSheet) -> List[Flowable]:
    items: List[Flowable] = [Paragraph("Suggestions", styles["subheading"])]
    items.extend(
        Paragraph(_text(s), styles["bullet"], bulletText="•") for s in suggestions
    )
    return items


def _list_section(
    title: str,
    items: tuple[str, ...],
    color: colors.Color,
    background: colors.Color,
    *,
    width: float,
    styles: StyleSheet,
) -> Flowable:
    heading = ParagraphStyle(f"{title}Heading", parent=styles["heading"], textColor=color)
    content: List[Flowable] = [Paragraph(title, heading)]
    content.extend(
        Paragraph(_text(item), styles["bullet"], bulletText="•") for item in items
    )
    return _frame(content, width, background=background)


def _zero_padding() -> list:
    return [
        ("LEFTPADDING", (0, 0), (-1, -1), 0),
        ("RIGHTPADDING", (0, 0), (-1, -1), 0),
        ("TOPPADDING", (0, 0), (-1, -1), 0),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]


def _frame(
    content: List[Flowable],
    width: float,
    background: Optional[colors.Color],
    padding: float = CARD_PADDING,
) -> Table:
    """Wrap a list of flowables in a single-cell table of exactly ``width``."""
    table = Table([[content]], colWidths=[width])
    commands = [
        ("LEFTPADDING", (0, 0), (-1, -1), padding),
        ("RIGHTPADDING", (0, 0), (-1, -1), padding),
        ("TOPPADDING", (0, 0), (-1, -1), padding),
        ("BOTTOMPADDING", (0, 0), (-1, -1), padding),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]
    if background is not None:
        commands.append(("BACKGROUND", (0, 0), (-1, -1), background))
    table.setStyle(TableStyle(commands))
    return table
