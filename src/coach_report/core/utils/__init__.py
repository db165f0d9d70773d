"""
Core utilities: JSON serialization of analysis models.
"""

from .serialization import (
    analysis_from_dict,
    analysis_to_dict,
    load_analysis_file,
    recording_from_dict,
)

__all__ = [
    "analysis_from_dict",
    "analysis_to_dict",
    "load_analysis_file",
    "recording_from_dict",
]
