"""
Module: analysis

Purpose:
    Immutable models for an AI-generated analysis of a teaching session.
    These are the inputs to report export; nothing here knows about pages
    or rendering.

Key Classes:
    - RatingLevel: 1-5 rating scale with display text
    - TechniqueEvaluation: Evaluation of one teaching technique
    - Analysis: Complete analysis result
    - Recording: The recorded session the analysis belongs to

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.utils.serialization: JSON loading
    - export.assembly: Content block construction
    - export.output.markdown: Markdown export
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Optional


MIN_RATING = 1
MAX_RATING = 5


class RatingLevel(IntEnum):
    """Rating scale used by technique evaluations."""

    DEVELOPING = 1
    EMERGING = 2
    PROFICIENT = 3
    ACCOMPLISHED = 4
    EXEMPLARY = 5

    @property
    def display_text(self) -> str:
        return self.name.capitalize()

    @property
    def description(self) -> str:
        return _RATING_DESCRIPTIONS[self]

    @property
    def color(self) -> str:
        """Color name used for rating badges."""
        return _RATING_COLORS[self]


_RATING_DESCRIPTIONS = {
    RatingLevel.DEVELOPING: "Technique not observed or needs significant development",
    RatingLevel.EMERGING: "Beginning to implement technique with inconsistent results",
    RatingLevel.PROFICIENT: "Solid implementation of technique with room for refinement",
    RatingLevel.ACCOMPLISHED: "Effective and consistent use of technique",
    RatingLevel.EXEMPLARY: "Masterful implementation that could serve as a model",
}

_RATING_COLORS = {
    RatingLevel.DEVELOPING: "red",
    RatingLevel.EMERGING: "orange",
    RatingLevel.PROFICIENT: "yellow",
    RatingLevel.ACCOMPLISHED: "green",
    RatingLevel.EXEMPLARY: "blue",
}


@dataclass(frozen=True, slots=True)
class TechniqueEvaluation:
    """
    Evaluation of a specific teaching technique (immutable).

    Attributes:
        id: Unique evaluation identifier
        technique_id: Identifier of the framework technique
        technique_name: Display name of the technique
        feedback: Detailed feedback text
        rating: 1-5 rating, None if not observed or not rated
        was_observed: Whether the technique was seen in the session
        evidence: Quotes or behaviours cited from the transcript
        suggestions: Improvement suggestions

    Example:
        >>> ev = TechniqueEvaluation("e1", "wait-time", "Wait Time", "Good.", rating=4)
        >>> ev.rating_level.display_text
        'Accomplished'
    """

    id: str
    technique_id: str
    technique_name: str
    feedback: str
    rating: Optional[int] = None
    was_observed: bool = True
    evidence: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate evaluation on construction."""
        if not self.id:
            raise ValueError("TechniqueEvaluation id cannot be empty")
        if self.rating is not None and not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(
                f"rating must be between {MIN_RATING} and {MAX_RATING}: {self.rating}"
            )

    @property
    def rating_level(self) -> Optional[RatingLevel]:
        if self.rating is None:
            return None
        return RatingLevel(self.rating)


@dataclass(frozen=True, slots=True)
class Analysis:
    """
    AI-generated analysis of a teaching session (immutable).

    Attributes:
        overall_summary: Short summary of the session
        model_used: Name of the model that produced the analysis
        strengths: Observed strengths
        growth_areas: Areas for growth
        actionable_next_steps: Ordered next steps
        technique_evaluations: Per-technique evaluations, in display order
        ratings_included: Whether numeric ratings were requested
        created_at: When the analysis was produced
    """

    overall_summary: str
    model_used: str
    strengths: tuple[str, ...] = ()
    growth_areas: tuple[str, ...] = ()
    actionable_next_steps: tuple[str, ...] = ()
    technique_evaluations: tuple[TechniqueEvaluation, ...] = ()
    ratings_included: bool = True
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        """Evaluation ids identify technique cards, so they must be unique."""
        seen: set[str] = set()
        for evaluation in self.technique_evaluations:
            if evaluation.id in seen:
                raise ValueError(f"Duplicate technique evaluation id: {evaluation.id!r}")
            seen.add(evaluation.id)

    @property
    def average_rating(self) -> Optional[float]:
        """Mean of the ratings present, None if no evaluation is rated."""
        ratings = [e.rating for e in self.technique_evaluations if e.rating is not None]
        if not ratings:
            return None
        return sum(ratings) / len(ratings)

    @property
    def evaluation_ids(self) -> frozenset[str]:
        return frozenset(e.id for e in self.technique_evaluations)


@dataclass(frozen=True, slots=True)
class Recording:
    """
    Recorded teaching session (immutable).

    Only the fields the report needs are modelled.

    Example:
        >>> Recording("Period 3", duration_seconds=3725).formatted_duration
        '1:02:05'
    """

    title: str
    duration_seconds: float = 0.0
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if self.duration_seconds < 0:
            raise ValueError(f"duration_seconds cannot be negative: {self.duration_seconds}")

    @property
    def formatted_duration(self) -> str:
        """Duration as M:SS, or H:MM:SS for an hour or more."""
        total = int(self.duration_seconds)
        hours, remainder = divmod(total, 3600)
        minutes, seconds = divmod(remainder, 60)
        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"
