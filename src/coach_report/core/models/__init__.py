"""
Core Models Package

Immutable models describing a teaching-session analysis.

All models in this package are frozen dataclasses. Sequences are stored as
tuples so that models are hashable and safe to hand to a background export.
"""

from .analysis import (
    MAX_RATING,
    MIN_RATING,
    Analysis,
    RatingLevel,
    Recording,
    TechniqueEvaluation,
)

__all__ = [
    "Analysis",
    "MAX_RATING",
    "MIN_RATING",
    "RatingLevel",
    "Recording",
    "TechniqueEvaluation",
]
