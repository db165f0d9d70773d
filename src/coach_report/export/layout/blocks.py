"""
Module: export.layout.blocks

Purpose:
    Content blocks for report pagination.
    Each block is one semantically atomic unit of report content that the
    packer places as a whole. The variant set is closed: ContentBlock is
    the union of the dataclasses below, discriminated by ``kind``.

Key Classes:
    - BlockKind: Variant tag
    - DocumentHeader, Summary, StrengthsAndGrowth, RatingLegend,
      TechniqueCard, TechniqueSuggestionsContinued, NextSteps: Variants

Splitting:
    Only a TechniqueCard may be split, and only at its suggestions
    boundary: the head keeps feedback and evidence, the tail is a
    TechniqueSuggestionsContinued carrying the suggestions.

Used By:
    - export.assembly: Builds blocks from an analysis
    - export.layout.packer: Places blocks onto pages
    - export.output.flowables: Draws blocks
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import ClassVar, Optional, Union


class BlockKind(Enum):
    """Variant tag for content blocks."""

    DOCUMENT_HEADER = "document_header"
    SUMMARY = "summary"
    STRENGTHS_AND_GROWTH = "strengths_and_growth"
    RATING_LEGEND = "rating_legend"
    TECHNIQUE_CARD = "technique_card"
    TECHNIQUE_SUGGESTIONS_CONTINUED = "technique_suggestions_continued"
    NEXT_STEPS = "next_steps"


@dataclass(frozen=True)
class DocumentHeader:
    """Report title block with session duration and date."""

    kind: ClassVar[BlockKind] = BlockKind.DOCUMENT_HEADER

    title: str
    duration: str
    date: date

    @property
    def id(self) -> str:
        return "header"


@dataclass(frozen=True)
class Summary:
    kind: ClassVar[BlockKind] = BlockKind.SUMMARY

    text: str

    @property
    def id(self) -> str:
        return "summary"


@dataclass(frozen=True)
class StrengthsAndGrowth:
    """
    Strengths and growth areas, side by side or stacked.

    Either list may be empty when the export excludes that section.
    """

    kind: ClassVar[BlockKind] = BlockKind.STRENGTHS_AND_GROWTH

    strengths: tuple[str, ...]
    growth_areas: tuple[str, ...]
    stacked: bool = False

    @property
    def id(self) -> str:
        return "strengths-growth"


@dataclass(frozen=True)
class RatingLegend:
    """Fixed explanation of the 1-5 rating scale."""

    kind: ClassVar[BlockKind] = BlockKind.RATING_LEGEND

    @property
    def id(self) -> str:
        return "rating-legend"


@dataclass(frozen=True)
class TechniqueSuggestionsContinued:
    """Suggestions tail of a TechniqueCard that was split across pages."""

    kind: ClassVar[BlockKind] = BlockKind.TECHNIQUE_SUGGESTIONS_CONTINUED

    technique_name: str
    suggestions: tuple[str, ...]

    @property
    def id(self) -> str:
        return f"technique-continued-{self.technique_name}"


@dataclass(frozen=True)
class TechniqueCard:
    """
    Feedback card for one technique evaluation.

    Attributes:
        technique_id: Identifier of the source evaluation
        technique_name: Display name
        rating: 1-5 rating, or None
        ratings_included: Whether ratings are shown at all
        was_observed: Whether the technique was observed
        feedback: Feedback text
        evidence: Evidence quotes (never split)
        suggestions: Suggestions (the only splittable part)

    Example:
        >>> card = TechniqueCard("e1", "Wait Time", 3, True, True, "ok", (), ("a",))
        >>> card.without_suggestions().suggestions
        ()
        >>> card.continuation().id
        'technique-continued-Wait Time'
    """

    kind: ClassVar[BlockKind] = BlockKind.TECHNIQUE_CARD

    technique_id: str
    technique_name: str
    rating: Optional[int]
    ratings_included: bool
    was_observed: bool
    feedback: str
    evidence: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    @property
    def id(self) -> str:
        return f"technique-{self.technique_id}"

    @property
    def is_splittable(self) -> bool:
        return bool(self.suggestions)

    @property
    def shows_rating(self) -> bool:
        return self.ratings_included and self.rating is not None

    def without_suggestions(self) -> TechniqueCard:
        """Head of a split: the same card with suggestions cleared."""
        return replace(self, suggestions=())

    def continuation(self) -> TechniqueSuggestionsContinued:
        """Tail of a split: this card's suggestions under its name."""
        return TechniqueSuggestionsContinued(
            technique_name=self.technique_name,
            suggestions=self.suggestions,
        )


@dataclass(frozen=True)
class NextSteps:
    kind: ClassVar[BlockKind] = BlockKind.NEXT_STEPS

    steps: tuple[str, ...]

    @property
    def id(self) -> str:
        return "next-steps"


ContentBlock = Union[
    DocumentHeader,
    Summary,
    StrengthsAndGrowth,
    RatingLegend,
    TechniqueCard,
    TechniqueSuggestionsContinued,
    NextSteps,
]


def is_split_pair(head: ContentBlock, tail: ContentBlock) -> bool:
    """Check whether ``tail`` is the continuation generated for ``head``."""
    return (
        isinstance(head, TechniqueCard)
        and not head.suggestions
        and isinstance(tail, TechniqueSuggestionsContinued)
        and tail.technique_name == head.technique_name
    )
