"""
Rulebook structure rules

Literal boundary markers, compiled header/enumeration patterns and the tables
of articles that need special treatment. All patterns are compiled once at
import time and never mutated.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

from src.rulebook.models import ArticleNr

# Rules region
RULES_START_MARKER = "Artikel 1.1.1"
RULES_END_MARKER = "Die Abkürzungen R, Ab, Art stehen für Regel,"
# Only the last article has no following header, it ends at the penalty summary
LAST_ARTICLE_END_MARKER = "Zusammenfassung der Strafen"

# Interpretations region
INTERPRETATION_MARKER = "A.R. "
INTERPRETATIONS_START_MARKER = "\nA.R. 1.3.2.I "
INTERPRETATIONS_END_MARKER = "Teil IV"

ARTICLE_HEADER_PATTERN: Pattern = re.compile(
    r"^Artikel (?P<article_nr>\d+\.\d+\.\d+) (?P<title>.*)$",
    re.MULTILINE,
)

# Enumeration depths of the tab encoding
DEPTH_LETTERED = 1        # a)
DEPTH_NUMBERED = 2        # 1.
DEPTH_INNER_LETTERED = 3  # a.

LETTERED_PATTERN: Pattern = re.compile(r"\n([a-z]\) )")
NUMBERED_PATTERN: Pattern = re.compile(r"\n([0-9]+\. )")
INNER_LETTERED_PATTERN: Pattern = re.compile(r"\n([a-z]\. )")
EXCEPTIONS_PATTERN: Pattern = re.compile(r"\n(Ausnahmen:\n)")
SOFT_WRAP_PATTERN: Pattern = re.compile(r"\n([^\t])")
TRAILING_PAGE_NUMBER_PATTERN: Pattern = re.compile(r" \d+$")

# Heading boilerplate in front of interpretation blocks, in application order.
# Some section headings follow another section heading before the first A.R.,
# so the section pass runs twice.
_RULE_HEADING = re.compile(r"^Regel .*?A\.R\.", re.MULTILINE | re.DOTALL)
_SECTION_HEADING = re.compile(r"^Abschnitt .*?A\.R\.", re.MULTILINE | re.DOTALL)
_ARTICLE_HEADING = re.compile(r"^Artikel .*?A\.R\.", re.MULTILINE | re.DOTALL)
INTERPRETATION_HEADING_PATTERNS: List[Pattern] = [
    _RULE_HEADING,
    _SECTION_HEADING,
    _SECTION_HEADING,
    _ARTICLE_HEADING,
]

INTERPRETATION_PATTERN: Pattern = re.compile(
    r"^A\.R\. (?P<ar_nr>\d+\.\d+\.\d+.)(?P<index>[IVX]+) (?P<situation>.*?)Regelung:(?P<ruling>.*?)\nA\.R\. ",
    re.MULTILINE | re.DOTALL,
)


@dataclass(frozen=True)
class LetteredDepthOverride:
    """Article whose "a)" items sit deeper than usual"""
    title: str
    depth: int
    chapter: Optional[int] = None

    def matches(self, article_nr: ArticleNr, title: str) -> bool:
        if title != self.title:
            return False
        return self.chapter is None or article_nr.chapter == self.chapter


@dataclass(frozen=True)
class NoteSplit:
    """Run-on note heading to split back into separate lines"""
    title: str
    old: str
    new: str


LETTERED_DEPTH_OVERRIDES: List[LetteredDepthOverride] = [
    # There is another article called Clipping outside of chapter 9
    LetteredDepthOverride(title="Clipping", chapter=9, depth=DEPTH_INNER_LETTERED),
    LetteredDepthOverride(title="Blocken in den Rücken", depth=DEPTH_INNER_LETTERED),
]

TARGETING_TITLE = "Targeting und Forcible Contact zum Kopf-/Halsbereich verteidigungsloser Spieler"

NOTE_SPLITS: List[NoteSplit] = [
    NoteSplit(title=TARGETING_TITLE, old="Anmerkung 1 Targeting", new="\nAnmerkung 1\nTargeting"),
    NoteSplit(title=TARGETING_TITLE, old="Anmerkung 2 Verteidigungslose", new="\nAnmerkung 2\nVerteidigungslose"),
]


def get_lettered_depth(article_nr: ArticleNr, title: str) -> int:
    """
    Depth of "a)" items inside an article

    Args:
        article_nr: Article number
        title: Article title

    Returns:
        Tab depth, DEPTH_LETTERED unless an override matches
    """
    for override in LETTERED_DEPTH_OVERRIDES:
        if override.matches(article_nr, title):
            return override.depth
    return DEPTH_LETTERED


def get_note_splits(title: str) -> List[NoteSplit]:
    """Note splits that apply to the article with the given title"""
    return [split for split in NOTE_SPLITS if split.title == title]
