import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# Shaped like pdftotext output of the rulebook: pages end with a form feed,
# section preambles between headers, interpretation headings before A.R. blocks.
RAW_RULEBOOK = (
    "Offizielles Regelbuch 2025\n"
    "\n"
    "Regel 1\n"
    "Das Spiel, das Feld, die Spieler und die Ausrüstung\n"
    "Abschnitt 1.1 Allgemeines\n"
    "Dieser Abschnitt regelt das Spiel.\n"
    "Artikel 1.1.1 Das Spiel\n"
    "Das Spiel wird zwischen zwei Teams auf einem recht-\n\x0c"
    "eckigen Spielfeld gespielt.\n"
    "a) Das erste Team\n"
    "b) Das zweite Team\n"
    "1. mit elf Spielern\n"
    "2. mit Ersatzspielern\n"
    "\n\x0c"
    "Artikel 1.1.2 Spielleitung\n"
    "Das Spiel wird von Offiziellen\n"
    "geleitet. 12\n"
    "\n\x0c"
    "Abschnitt 1.3 Spieler\n"
    "Artikel 1.3.2 Anzahl der Spieler\n"
    "Jedes Team hat elf Spieler.\n"
    "Ausnahmen:\n"
    "a) Bei Strafen\n"
    "Zusammenfassung der Strafen\n"
    "Fünf Yards\n"
    "Die Abkürzungen R, Ab, Art stehen für Regel, Abschnitt und Artikel.\n"
    "Regel 1\n"
    "Das Spiel\n"
    "Abschnitt 3 Spieler\n"
    "Artikel 2 Anzahl der Spieler\n"
    "A.R. 1.3.2.I Team A hat zwölf Spieler\n"
    "auf dem Feld.\n"
    "Regelung:\n"
    "Foul von Team A.\n"
    "A.R. 1.3.2.II Team B hat zehn Spieler.\n"
    "Regelung: Legal.\n"
    "Abschnitt 1 Allgemeines\n"
    "Artikel 2 Spielleitung\n"
    "A.R. 1.1.2.I Ein Offizieller fehlt.\n"
    "Regelung: Das Spiel wird fortgesetzt.\n"
    "Teil IV\n"
    "Anhang\n"
)

RULES_END = "Die Abkürzungen R, Ab, Art stehen für Regel, Abschnitt und Artikel.\n"


@pytest.fixture
def raw_rulebook():
    """Raw extracted text of a small rulebook"""
    return RAW_RULEBOOK


@pytest.fixture
def rules_region_text():
    """Build normalized text around a list of article blocks"""
    def _build(body: str) -> str:
        return body + "Zusammenfassung der Strafen\nStrafen\n" + RULES_END
    return _build
