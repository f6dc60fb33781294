"""
Rule body formatter

Turns the raw text span of one article into the tab-depth encoding: every
logical line starts with 0-3 tabs giving its enumeration depth, visual line
wraps are joined with a space. Each step is a plain function, the formatter
runs them in order.
"""

from typing import List, Pattern

from loguru import logger

from src.rulebook.models import ArticleNr, Rule
from .rules import (
    DEPTH_LETTERED,
    DEPTH_NUMBERED,
    DEPTH_INNER_LETTERED,
    LETTERED_PATTERN,
    NUMBERED_PATTERN,
    INNER_LETTERED_PATTERN,
    EXCEPTIONS_PATTERN,
    SOFT_WRAP_PATTERN,
    TRAILING_PAGE_NUMBER_PATTERN,
    NoteSplit,
    get_lettered_depth,
    get_note_splits,
)


def strip_header(span: str) -> str:
    """Drop the header line, keeping the newline that ends it"""
    newline = span.find("\n")
    if newline == -1:
        return ""
    return span[newline:]


def _indent(pattern: Pattern, text: str, depth: int) -> str:
    tabs = "\t" * depth
    return pattern.sub(lambda m: "\n" + tabs + m.group(1), text)


def tag_enumerations(text: str, lettered_depth: int = DEPTH_LETTERED) -> str:
    """
    Insert depth tabs in front of enumeration items

    Args:
        text: Body starting with a newline
        lettered_depth: Depth of "a)" items

    Returns:
        Text with tabbed "a)", "1." and "a." lines
    """
    text = _indent(LETTERED_PATTERN, text, lettered_depth)
    text = _indent(NUMBERED_PATTERN, text, DEPTH_NUMBERED)
    return _indent(INNER_LETTERED_PATTERN, text, DEPTH_INNER_LETTERED)


def tag_exceptions(text: str) -> str:
    """The "Ausnahmen:" heading is a paragraph at depth 1"""
    return _indent(EXCEPTIONS_PATTERN, text, DEPTH_LETTERED)


def collapse_soft_wraps(text: str) -> str:
    """Join every line not starting with a tab onto the previous one"""
    return SOFT_WRAP_PATTERN.sub(lambda m: " " + m.group(1), text).strip()


def strip_page_number(text: str) -> str:
    return TRAILING_PAGE_NUMBER_PATTERN.sub("", text)


def split_notes(text: str, splits: List[NoteSplit]) -> str:
    for split in splits:
        text = text.replace(split.old, split.new)
    return text


def indent_leading_item(text: str) -> str:
    """Strip removed the tab of a first "a)" item, put it back"""
    if text.startswith("a)"):
        return "\t" + text
    return text


class RuleBodyFormatter:
    """Builds a Rule from the text span of one article"""

    def format_text(self, span: str, article_nr: ArticleNr, title: str) -> str:
        """
        Format the body of one article

        Args:
            span: Article text starting with its header line
            article_nr: Parsed article number
            title: Parsed title

        Returns:
            Body in tab-depth encoding
        """
        text = strip_header(span)
        text = tag_enumerations(text, get_lettered_depth(article_nr, title))
        text = tag_exceptions(text)
        text = collapse_soft_wraps(text)
        text = strip_page_number(text)
        text = split_notes(text, get_note_splits(title))
        return indent_leading_item(text)

    def format(self, span: str, article_nr: ArticleNr, title: str) -> Rule:
        """Format one article into a Rule without interpretations"""
        text = self.format_text(span, article_nr, title)
        logger.debug(f"Formatted article {article_nr} {title}: {len(text)} characters")
        return Rule(article_nr=article_nr, title=title, text=text)
