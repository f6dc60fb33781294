"""
Rulebook data model

Article numbers, rules, approved rulings (A.R.) and the parse errors shared by
all extraction stages.
"""

from .errors import (
    RulebookParseError,
    BoundaryMarkerNotFoundError,
    HeaderPatternError,
    InvalidRomanNumeralError,
    CrossReferenceError,
    DuplicateArticleError,
    MalformedIdentifierError,
    PdfExtractionError,
)
from .models import ArticleNr, Rule, RuleInterpretation

__all__ = [
    "ArticleNr",
    "Rule",
    "RuleInterpretation",
    "RulebookParseError",
    "BoundaryMarkerNotFoundError",
    "HeaderPatternError",
    "InvalidRomanNumeralError",
    "CrossReferenceError",
    "DuplicateArticleError",
    "MalformedIdentifierError",
    "PdfExtractionError",
]
