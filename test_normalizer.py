"""Tests for the text normalizer"""
from src.normalization import LITERAL_FIXES, REGEX_STEPS, LiteralFix, TextNormalizer, normalize_text


class TestLiteralFixes:
    """Known extraction defects"""

    def test_section_9_1_becomes_article(self):
        text = "Abschnitt 9.1 Persönliche Fouls\nAlle Fouls sind verboten.\n"
        assert normalize_text(text) == "Artikel 9.1.0 Persönliche Fouls\nAlle Fouls sind verboten.\n"

    def test_stray_running_header_removed(self):
        text = "Text\nRegel 9\nVerhalten von Spielern und anderen\nMehr"
        assert normalize_text(text) == "Text\n\nMehr"

    def test_wrapped_titles_joined(self):
        text = (
            "Artikel 9.1.4 Targeting und Forcible Contact zum Kopf-/Halsbereich\nverteidigungsloser Spieler\n"
            "Artikel 6.1.3 Berühren, illegales Berühren und Recovern eines Free\nKicks\n"
        )
        result = normalize_text(text)
        assert "Artikel 9.1.4 Targeting und Forcible Contact zum Kopf-/Halsbereich verteidigungsloser Spieler\n" in result
        assert "Artikel 6.1.3 Berühren, illegales Berühren und Recovern eines Free Kicks\n" in result

    def test_custom_fixes(self):
        normalizer = TextNormalizer(literal_fixes=[LiteralFix(old="Foo", new="Bar")])
        assert normalizer.normalize("Foo") == "Bar"

    def test_fix_table(self):
        assert len(LITERAL_FIXES) == 4
        assert all(fix.old for fix in LITERAL_FIXES)


class TestRegexSteps:
    """Page breaks, section preambles and chapter covers"""

    def test_hyphenated_page_break(self):
        assert normalize_text("recht-\n\x0ceckig") == "rechteckig"

    def test_clean_page_break(self):
        assert normalize_text("Ende.\n\n\x0cAnfang") == "Ende.\nAnfang"

    def test_section_preamble_removed(self):
        text = "Vorher\nAbschnitt 2.1 Titel\nPräambel ohne eigene\nNummer.\nArtikel 2.1.1 Erster Artikel\n"
        assert normalize_text(text) == "Vorher\n\nArtikel 2.1.1 Erster Artikel\n"

    def test_section_preamble_ends_at_first_artikel(self):
        text = "Abschnitt 2.1 Titel\nKein Artikel folgt hier\n"
        assert normalize_text(text) == "\nArtikel folgt hier\n"

    def test_section_mid_line_untouched(self):
        text = "Dieser Abschnitt gilt.\nArtikel 2.1.1 Titel\n"
        assert normalize_text(text) == text

    def test_section_without_article_untouched(self):
        text = "Abschnitt 2.1 Titel\nNur Text\n"
        assert normalize_text(text) == text

    def test_chapter_cover_removed(self):
        drop_chapter_covers = REGEX_STEPS[2]
        assert drop_chapter_covers.name == "drop_chapter_covers"
        assert drop_chapter_covers("Ende\n\x0cRegel 2\nSpielzeit\n\nArtikel 2.1.1") == "EndeArtikel 2.1.1"

    def test_empty_and_unmatched_input(self):
        assert normalize_text("") == ""
        assert normalize_text("Nichts zu tun.\n") == "Nichts zu tun.\n"

    def test_regex_steps_idempotent(self, raw_rulebook):
        normalized = normalize_text(raw_rulebook)
        for step in REGEX_STEPS:
            assert step(normalized) == normalized

    def test_step_order(self):
        names = [step.name for step in TextNormalizer().steps]
        assert names == ["literal_fixes", "join_pages", "drop_section_preambles", "drop_chapter_covers"]


class TestNormalizedRulebook:
    """Normalization of the sample rulebook"""

    def test_article_headers_on_own_lines(self, raw_rulebook):
        normalized = normalize_text(raw_rulebook)
        assert "\x0c" not in normalized
        assert "\nArtikel 1.1.1 Das Spiel\n" in normalized
        assert "rechteckigen Spielfeld" in normalized
        assert "geleitet. 12\n\nArtikel 1.3.2 Anzahl der Spieler\n" in normalized
        assert "Abschnitt 1.3" not in normalized
