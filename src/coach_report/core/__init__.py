"""
Core package: analysis models and serialization.
"""

from .models import Analysis, RatingLevel, Recording, TechniqueEvaluation

__all__ = [
    "Analysis",
    "RatingLevel",
    "Recording",
    "TechniqueEvaluation",
]
