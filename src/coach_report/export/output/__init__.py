"""
Module: export.output

Purpose:
    Document output for report export.
    Converts packed layouts to PDF with ReportLab and analyses to Markdown.

Key Functions:
    - build_flowable(): Content block -> ReportLab flowable
    - render_to_pdf(): Render a LayoutResult to PDF bytes
    - generate_markdown(): Render an analysis to Markdown text

Dependencies:
    - reportlab: PDF generation

Used By:
    - export.controller: Export pipeline
    - export.layout.measurer: Block measurement
"""

from .flowables import build_flowable, build_styles
from .markdown import generate_markdown
from .renderer import render_to_pdf

__all__ = [
    "build_flowable",
    "build_styles",
    "generate_markdown",
    "render_to_pdf",
]
