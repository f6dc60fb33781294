"""
Article segmenter

Finds the rules region of the normalized text and cuts it into one span per
article header. A span runs from its header to the next header; the last one
runs to the penalty summary.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger

from src.rulebook.errors import (
    BoundaryMarkerNotFoundError,
    DuplicateArticleError,
    HeaderPatternError,
    MalformedIdentifierError,
)
from src.rulebook.models import ArticleNr, Rule
from .formatter import RuleBodyFormatter
from .rules import (
    ARTICLE_HEADER_PATTERN,
    LAST_ARTICLE_END_MARKER,
    RULES_END_MARKER,
    RULES_START_MARKER,
)


@dataclass
class ArticleSpan:
    """Text of one article inside the rules region"""
    article_nr: ArticleNr
    title: str
    start: int   # offset of the header inside the region
    end: int     # offset of the next header or the end marker
    text: str


def find_rules_region(text: str) -> str:
    """
    Cut out the rules part of the document

    Args:
        text: Normalized document text

    Returns:
        Text from the first article up to the abbreviations note

    Raises:
        BoundaryMarkerNotFoundError: One of the markers is missing
    """
    start = text.find(RULES_START_MARKER)
    if start == -1:
        raise BoundaryMarkerNotFoundError(RULES_START_MARKER)
    end = text.find(RULES_END_MARKER, start)
    if end == -1:
        raise BoundaryMarkerNotFoundError(RULES_END_MARKER)
    return text[start:end]


class ArticleSegmenter:
    """Splits the rules region into articles"""

    def __init__(self, formatter: Optional[RuleBodyFormatter] = None, strict: bool = True):
        """
        Args:
            formatter: Body formatter, a default one if omitted
            strict: Raise on duplicate article numbers instead of overwriting
        """
        self.formatter = formatter or RuleBodyFormatter()
        self.strict = strict

    def find_spans(self, region: str) -> List[ArticleSpan]:
        """
        Locate all article spans of the rules region

        Args:
            region: Rules region

        Returns:
            Spans in document order, each one ending where the next starts
        """
        headers = list(ARTICLE_HEADER_PATTERN.finditer(region))
        if not headers:
            raise HeaderPatternError(region[:80], reason="No article header found in rules region")

        spans = []
        for i, header in enumerate(headers):
            if i + 1 < len(headers):
                end = headers[i + 1].start()
            else:
                end = region.find(LAST_ARTICLE_END_MARKER, header.end())
                if end == -1:
                    raise BoundaryMarkerNotFoundError(LAST_ARTICLE_END_MARKER)

            try:
                article_nr = ArticleNr.from_string(header.group("article_nr"))
            except MalformedIdentifierError as e:
                raise HeaderPatternError(header.group(0)) from e

            spans.append(ArticleSpan(
                article_nr=article_nr,
                title=header.group("title"),
                start=header.start(),
                end=end,
                text=region[header.start():end],
            ))

        return spans

    def segment(self, text: str) -> Dict[ArticleNr, Rule]:
        """
        Extract all rules

        Args:
            text: Normalized document text

        Returns:
            Rules keyed by article number, in document order
        """
        region = find_rules_region(text)
        spans = self.find_spans(region)

        rules: Dict[ArticleNr, Rule] = {}
        for span in spans:
            if span.article_nr in rules:
                if self.strict:
                    raise DuplicateArticleError(span.article_nr, span.title)
                logger.warning(
                    f"Duplicate article {span.article_nr} ({span.title!r}) overwrites "
                    f"{rules[span.article_nr].title!r}"
                )
            rules[span.article_nr] = self.formatter.format(span.text, span.article_nr, span.title)

        logger.info(f"Extracted {len(rules)} rules from {len(spans)} article headers")
        return rules
