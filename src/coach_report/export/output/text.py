"""
Text formatting shared by the PDF and Markdown outputs.
"""

from __future__ import annotations

from datetime import date

from coach_report.core.models import MAX_RATING, RatingLevel


def format_date(value: date) -> str:
    """Medium date style, e.g. ``Mar 3, 2025``."""
    return f"{value:%b} {value.day}, {value.year}"


def rating_stars(rating: int) -> str:
    """Filled and empty stars out of MAX_RATING (Markdown only; not in Helvetica)."""
    return "★" * rating + "☆" * (MAX_RATING - rating)


def rating_label(rating: int) -> str:
    """Plain-text rating, e.g. ``3/5 · Proficient``."""
    return f"{rating}/{MAX_RATING} · {RatingLevel(rating).display_text}"
