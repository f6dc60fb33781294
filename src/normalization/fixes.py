"""
Document specific text fixes

Known defects of the rulebook text extraction, repaired by plain substring
replacement before any regex pass runs.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class LiteralFix:
    """One substring replacement"""
    old: str
    new: str
    description: str = ""

    def apply(self, text: str) -> str:
        return text.replace(self.old, self.new)


LITERAL_FIXES: List[LiteralFix] = [
    LiteralFix(
        old="Abschnitt 9.1 Persönliche Fouls\nAlle",
        new="Artikel 9.1.0 Persönliche Fouls\nAlle",
        description="Section 9.1 has no article of its own, treat it as rule 9.1.0",
    ),
    LiteralFix(
        old="Regel 9\nVerhalten von Spielern und anderen",
        new="",
        description="Stray running header of chapter 9",
    ),
    LiteralFix(
        old="9.1.4 Targeting und Forcible Contact zum Kopf-/Halsbereich\nverteidigungsloser Spieler",
        new="9.1.4 Targeting und Forcible Contact zum Kopf-/Halsbereich verteidigungsloser Spieler",
        description="Article title wrapped across two lines",
    ),
    LiteralFix(
        old="6.1.3 Berühren, illegales Berühren und Recovern eines Free\nKicks",
        new="6.1.3 Berühren, illegales Berühren und Recovern eines Free Kicks",
        description="Article title wrapped across two lines",
    ),
]
