"""
Unit tests for page geometry.
"""

import pytest

from coach_report.export.layout import PageGeometry


class TestPageGeometry:
    """Tests for PageGeometry dataclass."""

    def test_init_when_defaults_then_us_letter(self):
        # Act
        geometry = PageGeometry()

        # Assert
        assert (geometry.page_width, geometry.page_height) == (612, 792)
        assert geometry.content_width == 540  # 612 - 2 * 36
        assert geometry.max_height == 640  # 792 - 2 * 36 - 50 - 30
        assert geometry.block_spacing == 12

    def test_content_top_when_defaults_then_margin_plus_header(self):
        assert PageGeometry().content_top == 86

    def test_init_when_margins_exceed_width_then_raises_error(self):
        with pytest.raises(ValueError, match="Margins exceed page width"):
            PageGeometry(page_width=100, margin=60)

    def test_init_when_header_and_footer_fill_page_then_raises_error(self):
        with pytest.raises(ValueError, match="exceed page height"):
            PageGeometry(page_height=200, margin=20, header_height=100, footer_height=60)

    @pytest.mark.parametrize("kwargs", [
        {"page_width": 0},
        {"page_height": -1},
        {"margin": -5},
        {"block_spacing": -1},
        {"footer_height": -1},
    ])
    def test_init_when_invalid_values_then_raises_error(self, kwargs):
        with pytest.raises(ValueError):
            PageGeometry(**kwargs)

    def test_geometry_is_immutable(self):
        geometry = PageGeometry()

        with pytest.raises(AttributeError):
            geometry.margin = 10
