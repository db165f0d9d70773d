"""
Module: export.layout

Purpose:
    Pagination of report content.
    Converts an ordered list of content blocks into packed pages.

Key Functions:
    - pack_into_pages(): Distribute blocks onto pages

Key Classes:
    - PageGeometry: Page size, margins and block spacing
    - ContentBlock variants: DocumentHeader ... NextSteps
    - ReportLabMeasurer: Default block height function
    - PagePlan / LayoutResult: Packing output

Dependencies:
    - reportlab (measurement only)

Used By:
    - export.controller: Export pipeline
"""

from .blocks import (
    BlockKind,
    ContentBlock,
    DocumentHeader,
    NextSteps,
    RatingLegend,
    StrengthsAndGrowth,
    Summary,
    TechniqueCard,
    TechniqueSuggestionsContinued,
    is_split_pair,
)
from .config import PageGeometry
from .measurer import (
    Measurer,
    ReportLabMeasurer,
    cancellable,
    measure_continuation,
    measure_technique_head,
)
from .models import LayoutResult, PagePlan
from .packer import pack_into_pages

__all__ = [
    # Config
    "PageGeometry",
    # Blocks
    "BlockKind",
    "ContentBlock",
    "DocumentHeader",
    "NextSteps",
    "RatingLegend",
    "StrengthsAndGrowth",
    "Summary",
    "TechniqueCard",
    "TechniqueSuggestionsContinued",
    "is_split_pair",
    # Measurement
    "Measurer",
    "ReportLabMeasurer",
    "cancellable",
    "measure_continuation",
    "measure_technique_head",
    # Models
    "PagePlan",
    "LayoutResult",
    # Functions
    "pack_into_pages",
]
