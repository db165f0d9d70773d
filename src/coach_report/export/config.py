"""
Module: export.config

Purpose:
    User selections for an analysis export. Immutable configuration with
    validation on construction.

Key Classes:
    - ExportFormat: Output format
    - ExportConfiguration: Which sections and techniques to include

Dependencies:
    - dataclasses (std)

Used By:
    - export.assembly: Block selection
    - export.output.markdown: Section selection
    - export.controller: Format dispatch
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from coach_report.core.models import Analysis


class ExportFormat(Enum):
    PDF = "pdf"
    MARKDOWN = "markdown"

    @property
    def extension(self) -> str:
        return "pdf" if self is ExportFormat.PDF else "md"


@dataclass(frozen=True)
class ExportConfiguration:
    """
    Configuration for an analysis export (immutable).

    Attributes:
        format: Output format
        include_summary: Include the overall summary
        include_strengths: Include strengths
        include_growth_areas: Include growth areas
        include_next_steps: Include actionable next steps
        included_technique_ids: Evaluation ids to include as technique cards

    Example:
        >>> config = ExportConfiguration.including_all(analysis)
        >>> config.has_selection
        True
    """

    format: ExportFormat = ExportFormat.PDF
    include_summary: bool = True
    include_strengths: bool = True
    include_growth_areas: bool = True
    include_next_steps: bool = True
    included_technique_ids: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate and normalise configuration on construction."""
        if not isinstance(self.format, ExportFormat):
            raise ValueError(f"format must be an ExportFormat: {self.format!r}")
        if not isinstance(self.included_technique_ids, frozenset):
            object.__setattr__(self, "included_technique_ids", frozenset(self.included_technique_ids))

    @property
    def has_selection(self) -> bool:
        """Whether at least one item is selected for export."""
        return (
            self.include_summary
            or self.include_strengths
            or self.include_growth_areas
            or self.include_next_steps
            or bool(self.included_technique_ids)
        )

    @classmethod
    def including_all(cls, analysis: Analysis, format: ExportFormat = ExportFormat.PDF) -> ExportConfiguration:
        """Select every section and every technique evaluation of ``analysis``."""
        return cls(format=format, included_technique_ids=analysis.evaluation_ids)
