"""
Text normalizer

Turns the raw pdftotext output of the rulebook into text with unified article
headers: literal fixes first, then page breaks, section preambles and chapter
cover pages are removed. The steps run in a fixed order, later steps rely on
the output of earlier ones.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from loguru import logger

from .fixes import LITERAL_FIXES, LiteralFix

# Page break, optionally with a hyphenated word split across pages
RE_NEW_PAGE = re.compile(r"-?\n\x0c")

# Section header plus preamble up to the next article header
RE_SECTION = re.compile(r"^Abschnitt .*?Artikel", re.MULTILINE | re.DOTALL)

# Chapter cover page: two short lines and a blank line after a page break
RE_NEW_CHAPTER = re.compile(r"\n\x0c.*\n.*\n\n")


@dataclass(frozen=True)
class NormalizationStep:
    """A named pure text transformation"""
    name: str
    apply: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.apply(text)


def _literal_fixes_step(fixes: List[LiteralFix]) -> NormalizationStep:
    def _apply(text: str) -> str:
        for fix in fixes:
            text = fix.apply(text)
        return text

    return NormalizationStep("literal_fixes", _apply)


def _regex_step(name: str, pattern: re.Pattern, replacement: str) -> NormalizationStep:
    return NormalizationStep(name, lambda text: pattern.sub(replacement, text))


REGEX_STEPS: List[NormalizationStep] = [
    _regex_step("join_pages", RE_NEW_PAGE, ""),
    _regex_step("drop_section_preambles", RE_SECTION, "\nArtikel"),
    _regex_step("drop_chapter_covers", RE_NEW_CHAPTER, ""),
]


class TextNormalizer:
    """Ordered list of text normalization steps"""

    def __init__(self, literal_fixes: Optional[List[LiteralFix]] = None):
        """
        Args:
            literal_fixes: Substring fixes to run first, defaults to LITERAL_FIXES
        """
        fixes = LITERAL_FIXES if literal_fixes is None else literal_fixes
        self.steps: List[NormalizationStep] = [_literal_fixes_step(fixes)] + REGEX_STEPS

    def normalize(self, text: str) -> str:
        """
        Normalize raw rulebook text

        Args:
            text: Raw text extracted from the PDF

        Returns:
            Normalized text
        """
        logger.info(f"Normalizing rulebook text, {len(text)} characters")

        for step in self.steps:
            before = len(text)
            text = step(text)
            logger.debug(f"Step {step.name}: {before} -> {len(text)} characters")

        return text


_default_normalizer = TextNormalizer()


def normalize_text(text: str) -> str:
    """Normalize text with the default steps"""
    return _default_normalizer.normalize(text)
