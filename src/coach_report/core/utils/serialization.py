"""
Serialization Utilities

Provides to/from JSON utilities for analysis models.

The analysis backend returns snake_case keys (``overall_summary``,
``technique_evaluations[].was_observed`` ...). The model prompt asks for
camelCase, and older saved files use it, so both spellings are accepted on
load. Output is always snake_case.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from ..models.analysis import MAX_RATING, MIN_RATING, Analysis, Recording, TechniqueEvaluation

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Analysis Serialization
# ─────────────────────────────────────────────────────────────────────────────

def analysis_to_dict(analysis: Analysis) -> dict[str, Any]:
    """
    Serialize an Analysis to a dictionary.

    Args:
        analysis: Analysis instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "overall_summary": analysis.overall_summary,
        "model_used": analysis.model_used,
        "strengths": list(analysis.strengths),
        "growth_areas": list(analysis.growth_areas),
        "actionable_next_steps": list(analysis.actionable_next_steps),
        "ratings_included": analysis.ratings_included,
        "created_at": analysis.created_at.isoformat(),
        "technique_evaluations": [
            _evaluation_to_dict(e) for e in analysis.technique_evaluations
        ],
    }


def analysis_from_dict(data: dict[str, Any]) -> Analysis:
    """
    Deserialize an Analysis from a dictionary.

    Args:
        data: Dictionary from JSON

    Returns:
        Analysis instance

    Raises:
        ValueError: If a required key is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise ValueError(f"Analysis payload must be an object, got {type(data).__name__}")

    evaluations: list[TechniqueEvaluation] = []
    taken: set[str] = set()
    for index, item in enumerate(_get(data, "technique_evaluations", default=[])):
        evaluation = _evaluation_from_dict(item, index, taken)
        taken.add(evaluation.id)
        evaluations.append(evaluation)

    return Analysis(
        overall_summary=_require_str(data, "overall_summary"),
        model_used=_get(data, "model_used", default="unknown"),
        strengths=_str_tuple(data, "strengths"),
        growth_areas=_str_tuple(data, "growth_areas"),
        actionable_next_steps=_str_tuple(data, "actionable_next_steps"),
        technique_evaluations=tuple(evaluations),
        ratings_included=bool(_get(data, "ratings_included", default=True)),
        created_at=_parse_datetime(_get(data, "created_at")),
    )


def recording_from_dict(data: dict[str, Any]) -> Recording:
    """Deserialize a Recording; ``duration`` is accepted for ``duration_seconds``."""
    duration = _get(data, "duration_seconds", default=None)
    if duration is None:
        duration = _get(data, "duration", default=0)
    return Recording(
        title=_require_str(data, "title"),
        duration_seconds=float(duration),
        created_at=_parse_datetime(_get(data, "created_at")),
    )


def load_analysis_file(path: Path) -> tuple[Analysis, Optional[Recording]]:
    """
    Load an analysis JSON file.

    The file is either a bare analysis object, or an object with
    ``analysis`` and ``recording`` members.

    Args:
        path: Path to the JSON file

    Returns:
        Tuple of (analysis, recording or None)

    Raises:
        ValueError: If the file is not valid JSON or not a valid analysis
    """
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(payload, dict) and "analysis" in payload:
        analysis = analysis_from_dict(payload["analysis"])
        recording_data = payload.get("recording")
        recording = recording_from_dict(recording_data) if recording_data else None
    else:
        analysis = analysis_from_dict(payload)
        recording = None

    logger.debug(
        f"Loaded analysis from {path} with "
        f"{len(analysis.technique_evaluations)} technique evaluations"
    )
    return analysis, recording


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _evaluation_to_dict(evaluation: TechniqueEvaluation) -> dict[str, Any]:
    return {
        "id": evaluation.id,
        "technique_id": evaluation.technique_id,
        "technique_name": evaluation.technique_name,
        "rating": evaluation.rating,
        "was_observed": evaluation.was_observed,
        "feedback": evaluation.feedback,
        "evidence": list(evaluation.evidence),
        "suggestions": list(evaluation.suggestions),
    }


def _evaluation_from_dict(data: dict[str, Any], index: int, taken: set[str]) -> TechniqueEvaluation:
    if not isinstance(data, dict):
        raise ValueError(f"technique_evaluations[{index}] must be an object")

    technique_id = _require_str(data, "technique_id")

    rating = _get(data, "rating")
    if rating is not None and (isinstance(rating, bool) or not isinstance(rating, int)):
        raise ValueError(f"technique_evaluations[{index}].rating must be an integer or null")
    if rating is not None and not MIN_RATING <= rating <= MAX_RATING:
        logger.warning(
            f"Dropping out-of-range rating {rating} for technique_evaluations[{index}] "
            f"({technique_id})"
        )
        rating = None

    evaluation_id = _get(data, "id")
    if evaluation_id is None:
        # Backend responses carry no evaluation id; a repeated technique gets its position appended
        evaluation_id = technique_id if technique_id not in taken else f"{technique_id}-{index + 1}"

    return TechniqueEvaluation(
        id=str(evaluation_id),
        technique_id=technique_id,
        technique_name=_get(data, "technique_name", default=technique_id),
        feedback=_get(data, "feedback", default=""),
        rating=rating,
        was_observed=bool(_get(data, "was_observed", default=True)),
        evidence=_str_tuple(data, "evidence"),
        suggestions=_str_tuple(data, "suggestions"),
    )


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _get(data: dict[str, Any], key: str, default: Any = None) -> Any:
    if key in data:
        return data[key]
    return data.get(_camel(key), default)


def _require_str(data: dict[str, Any], key: str) -> str:
    value = _get(data, key)
    if not isinstance(value, str):
        raise ValueError(f"Missing or invalid string field: {key!r}")
    return value


def _str_tuple(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = _get(data, key, default=[]) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"Field {key!r} must be a list of strings")
    return tuple(value)


def _parse_datetime(value: Any) -> datetime:
    if value is None:
        return datetime.now()
    text = str(value)
    # JavaScript toISOString() ends in "Z", which fromisoformat only accepts from 3.11
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid ISO timestamp: {value!r}") from e
