"""
Tests for PDF rendering of packed layouts.

Uses pypdf (when installed) to inspect the generated document.
"""

import io
from datetime import date

import pytest

from coach_report.export.layout import (
    DocumentHeader,
    NextSteps,
    PageGeometry,
    ReportLabMeasurer,
    Summary,
    pack_into_pages,
)
from coach_report.export.layout.models import LayoutResult
from coach_report.export.output import render_to_pdf

# Try to import pypdf for PDF inspection
try:
    from pypdf import PdfReader
    PYPDF_AVAILABLE = True
except ImportError:
    PYPDF_AVAILABLE = False

LETTER = (612.0, 792.0)
TOLERANCE_PT = 1.0


@pytest.fixture
def layout(card_factory):
    """Real measurement of a report long enough for several pages."""
    blocks = [
        DocumentHeader("Biology Period 3", "45:12", date(2025, 3, 3)),
        Summary("A well-paced lesson. " * 30),
    ]
    blocks += [
        card_factory(
            f"Technique {i}",
            evidence=("'A quote from the lesson.'",),
            suggestions=tuple(f"Suggestion {j} for technique {i}" for j in range(4)),
        )
        for i in range(8)
    ]
    blocks.append(NextSteps(("Pause after questions", "Use exit tickets")))
    return pack_into_pages(
        blocks, ReportLabMeasurer(), title="Biology Period 3", document_date=date(2025, 3, 3)
    )


class TestRenderToPdf:
    def test_render_returns_pdf_bytes(self, layout):
        pdf = render_to_pdf(layout)

        assert pdf.startswith(b"%PDF-")

    def test_layout_spans_several_pages(self, layout):
        assert layout.page_count > 1
        assert layout.warnings == []

    def test_render_when_empty_layout_then_still_pdf(self):
        assert render_to_pdf(LayoutResult(pages=[])).startswith(b"%PDF-")

    @pytest.mark.skipif(not PYPDF_AVAILABLE, reason="pypdf not installed")
    def test_page_count_matches_layout(self, layout):
        reader = PdfReader(io.BytesIO(render_to_pdf(layout)))

        assert len(reader.pages) == layout.page_count

    @pytest.mark.skipif(not PYPDF_AVAILABLE, reason="pypdf not installed")
    def test_pages_are_us_letter(self, layout):
        reader = PdfReader(io.BytesIO(render_to_pdf(layout)))

        for page in reader.pages:
            width, height = float(page.mediabox.width), float(page.mediabox.height)
            assert abs(width - LETTER[0]) < TOLERANCE_PT
            assert abs(height - LETTER[1]) < TOLERANCE_PT

    @pytest.mark.skipif(not PYPDF_AVAILABLE, reason="pypdf not installed")
    def test_footer_and_header_text(self, layout):
        reader = PdfReader(io.BytesIO(render_to_pdf(layout)))

        last = reader.pages[-1].extract_text()
        assert f"Page {layout.page_count} of {layout.page_count}" in last
        assert "Teacher Coach" in last
        assert "Mar 3, 2025" in last

    @pytest.mark.skipif(not PYPDF_AVAILABLE, reason="pypdf not installed")
    def test_document_title_metadata(self, layout):
        reader = PdfReader(io.BytesIO(render_to_pdf(layout, PageGeometry())))

        assert reader.metadata.title == "Biology Period 3"
