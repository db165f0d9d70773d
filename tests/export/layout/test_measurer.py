"""
Unit tests for block measurement with ReportLab.
"""

import threading
from datetime import date
from unittest.mock import patch

import pytest

from coach_report.export import ExportCancelled
from coach_report.export.layout import (
    DocumentHeader,
    NextSteps,
    RatingLegend,
    ReportLabMeasurer,
    StrengthsAndGrowth,
    Summary,
    cancellable,
    measure_continuation,
    measure_technique_head,
)

WIDTH = 540.0


@pytest.fixture
def measure():
    return ReportLabMeasurer()


class TestReportLabMeasurer:
    """Heights reported by the ReportLab measurer."""

    @pytest.mark.parametrize("block", [
        DocumentHeader("Biology Period 3", "45:12", date(2025, 3, 3)),
        Summary("A short summary."),
        StrengthsAndGrowth(("Clear objectives",), ("Wait time",)),
        StrengthsAndGrowth(("Clear objectives",), ()),
        RatingLegend(),
        NextSteps(("Pause after questions",)),
    ])
    def test_height_when_block_then_positive(self, measure, block):
        assert measure(block, WIDTH) > 0

    def test_height_when_longer_text_then_taller(self, measure):
        short = measure(Summary("One line."), WIDTH)
        long = measure(Summary("Many words in this summary. " * 40), WIDTH)

        assert long > short

    def test_height_when_narrower_then_taller(self, measure):
        block = Summary("Many words in this summary. " * 20)

        assert measure(block, 300.0) > measure(block, WIDTH)

    def test_height_is_deterministic(self, measure, card_factory):
        card = card_factory("Wait Time", evidence=("a quote",), suggestions=("one", "two"))

        assert measure(card, WIDTH) == measure(card, WIDTH)
        assert ReportLabMeasurer()(card, WIDTH) == measure(card, WIDTH)

    def test_head_and_tail_are_shorter_than_full_card(self, measure, card_factory):
        card = card_factory(
            "Wait Time",
            evidence=("a quote",),
            suggestions=tuple(f"Suggestion number {i}" for i in range(6)),
        )

        full = measure(card, WIDTH)
        head = measure_technique_head(measure, card, WIDTH)
        tail = measure_continuation(measure, card, WIDTH)

        assert head < full
        assert tail < full

    def test_stacked_layout_is_taller_than_side_by_side(self, measure):
        items = tuple(f"Item {i}" for i in range(5))
        side = measure(StrengthsAndGrowth(items, items, stacked=False), WIDTH)
        stacked = measure(StrengthsAndGrowth(items, items, stacked=True), WIDTH)

        assert stacked > side

    def test_markup_characters_in_text_are_escaped(self, measure):
        assert measure(Summary("Use <b> & </i> as written"), WIDTH) > 0

    def test_when_not_a_block_then_type_error(self, measure):
        with pytest.raises(TypeError, match="Not a content block"):
            measure("summary", WIDTH)

    def test_when_reportlab_fails_then_error_propagates(self, measure):
        with patch(
            "coach_report.export.layout.measurer.build_flowable",
            side_effect=RuntimeError("font missing"),
        ):
            with pytest.raises(RuntimeError, match="font missing"):
                measure(Summary("x"), WIDTH)


class TestCancellable:
    """Tests for the cancellation wrapper."""

    def test_when_not_set_then_delegates(self, table_measurer):
        inner = table_measurer(default=42.0)
        wrapped = cancellable(inner, threading.Event())

        assert wrapped(Summary("x"), WIDTH) == 42.0
        assert len(inner.calls) == 1

    def test_when_set_then_raises_before_measuring(self, table_measurer):
        inner = table_measurer()
        event = threading.Event()
        event.set()
        wrapped = cancellable(inner, event)

        with pytest.raises(ExportCancelled):
            wrapped(Summary("x"), WIDTH)
        assert inner.calls == []
