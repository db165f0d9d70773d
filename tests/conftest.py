import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to sys.path so we can import coach_report
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from coach_report.core.models import Analysis, Recording, TechniqueEvaluation  # noqa: E402
from coach_report.export.layout import TechniqueCard  # noqa: E402


class TableMeasurer:
    """
    Deterministic measurer for tests: heights are looked up per block.

    Blocks are frozen dataclasses, so a split head built by the packer
    compares equal to the one registered here. Unknown blocks measure
    ``default``. Every call is recorded.
    """

    def __init__(self, heights=None, default=50.0):
        self.heights = dict(heights or {})
        self.default = default
        self.calls = []

    def __call__(self, block, width):
        self.calls.append((block, width))
        return self.heights.get(block, self.default)


@pytest.fixture
def table_measurer():
    """Factory for lookup-table measurers."""
    def _create(heights=None, default=50.0):
        return TableMeasurer(heights, default)
    return _create


@pytest.fixture
def card_factory():
    """Factory for technique cards with distinct ids."""
    def _create(name: str, suggestions=("Try it",), evidence=(), rating=3):
        return TechniqueCard(
            technique_id=name.lower().replace(" ", "-"),
            technique_name=name,
            rating=rating,
            ratings_included=True,
            was_observed=True,
            feedback=f"Feedback on {name}.",
            evidence=tuple(evidence),
            suggestions=tuple(suggestions),
        )
    return _create


@pytest.fixture
def sample_analysis() -> Analysis:
    """Analysis with three technique evaluations."""
    return Analysis(
        overall_summary="A well-paced lesson with strong student engagement.",
        model_used="test-model",
        strengths=("Clear objectives", "Warm rapport"),
        growth_areas=("Longer wait time",),
        actionable_next_steps=("Pause three seconds after questions", "Use exit tickets"),
        technique_evaluations=(
            TechniqueEvaluation(
                id="e1",
                technique_id="wait-time",
                technique_name="Wait Time",
                feedback="Questions were often answered by the teacher.",
                rating=2,
                evidence=("'Anyone? OK, it's photosynthesis.'",),
                suggestions=("Count to three silently",),
            ),
            TechniqueEvaluation(
                id="e2",
                technique_id="cold-call",
                technique_name="Cold Call",
                feedback="Students were called on by name.",
                rating=4,
            ),
            TechniqueEvaluation(
                id="e3",
                technique_id="think-pair-share",
                technique_name="Think-Pair-Share",
                feedback="Not used in this session.",
                was_observed=False,
            ),
        ),
        ratings_included=True,
        created_at=datetime(2025, 3, 3, 10, 15),
    )


@pytest.fixture
def sample_recording() -> Recording:
    return Recording(
        title="Biology Period 3",
        duration_seconds=2712,
        created_at=datetime(2025, 3, 3, 9, 0),
    )
