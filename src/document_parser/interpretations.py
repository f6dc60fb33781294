"""
Interpretation extractor

Collects the approved rulings ("A.R. 1.3.2.I <situation> Regelung: <ruling>")
from the interpretations part of the rulebook, independent of the article
segmenter.
"""

from typing import Dict, Iterator, List

from loguru import logger

from src.rulebook.errors import (
    BoundaryMarkerNotFoundError,
    HeaderPatternError,
    MalformedIdentifierError,
)
from src.rulebook.models import ArticleNr, RuleInterpretation
from src.rulebook.roman import from_roman
from .rules import (
    INTERPRETATION_HEADING_PATTERNS,
    INTERPRETATION_MARKER,
    INTERPRETATION_PATTERN,
    INTERPRETATIONS_END_MARKER,
    INTERPRETATIONS_START_MARKER,
)


def rewrite_headings(text: str) -> str:
    """Collapse rule/section/article headings in front of an A.R. into the bare marker"""
    for pattern in INTERPRETATION_HEADING_PATTERNS:
        text = pattern.sub("\nA.R.", text)
    return text


def find_interpretations_region(text: str) -> str:
    """
    Cut out the interpretations part of the heading-rewritten text

    Args:
        text: Output of rewrite_headings

    Returns:
        Region from the first interpretation up to the next part, followed by a
        closing marker so the last record is delimited like all others

    Raises:
        BoundaryMarkerNotFoundError: One of the markers is missing
    """
    start = text.find(INTERPRETATIONS_START_MARKER)
    if start == -1:
        raise BoundaryMarkerNotFoundError(INTERPRETATIONS_START_MARKER)
    end = text.find(INTERPRETATIONS_END_MARKER, start)
    if end == -1:
        raise BoundaryMarkerNotFoundError(INTERPRETATIONS_END_MARKER)
    return text[start:end] + "\n" + INTERPRETATION_MARKER


def iter_interpretations(text: str) -> Iterator[RuleInterpretation]:
    """
    Scan interpretation records

    The marker that ends one record is the marker that starts the next one.
    After a match the cursor is therefore moved back by the marker length onto
    that shared marker, not past the whole match; otherwise every second
    record would be skipped.

    Args:
        text: Interpretations region, every record followed by "\\nA.R. "

    Yields:
        Interpretations in document order
    """
    position = 0
    while True:
        match = INTERPRETATION_PATTERN.search(text, position)
        if match is None:
            return

        try:
            article_nr = ArticleNr.from_string(match.group("ar_nr"))
        except MalformedIdentifierError as e:
            raise HeaderPatternError(match.group("ar_nr") + match.group("index")) from e

        yield RuleInterpretation(
            article_nr=article_nr,
            index=from_roman(match.group("index")),
            text=match.group("situation").strip(),
            ruling=match.group("ruling").strip(),
        )

        position = match.end() - len(INTERPRETATION_MARKER)


class InterpretationExtractor:
    """Extracts approved rulings grouped by article"""

    def extract(self, text: str) -> Dict[ArticleNr, List[RuleInterpretation]]:
        """
        Extract all interpretations

        Args:
            text: Normalized document text

        Returns:
            Interpretations per article number, both in document order
        """
        region = find_interpretations_region(rewrite_headings(text))

        interpretations: Dict[ArticleNr, List[RuleInterpretation]] = {}
        for interpretation in iter_interpretations(region):
            items = interpretations.setdefault(interpretation.article_nr, [])
            if any(item.index == interpretation.index for item in items):
                raise HeaderPatternError(interpretation.get_title(), reason="Duplicate interpretation index")
            items.append(interpretation)
            logger.debug(f"Found {interpretation.get_title()}")

        total = sum(len(items) for items in interpretations.values())
        logger.info(f"Extracted {total} interpretations for {len(interpretations)} articles")
        return interpretations
