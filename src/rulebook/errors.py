"""Parse errors

Every error is terminal for the current parse attempt and carries the marker or
raw text that failed, so a change in the source document can be diagnosed.
"""


class RulebookParseError(Exception):
    """Base class for all rulebook extraction errors"""


class BoundaryMarkerNotFoundError(RulebookParseError):
    """A literal anchor string is missing from the text"""

    def __init__(self, marker: str):
        self.marker = marker
        super().__init__(f"Could not find {marker!r} inside the pdf text")


class HeaderPatternError(RulebookParseError):
    """A header matched but one of its captures did not parse"""

    def __init__(self, raw: str, reason: str = "Invalid header"):
        self.raw = raw
        super().__init__(f"{reason}: {raw!r}")


class InvalidRomanNumeralError(HeaderPatternError):
    """An interpretation index is not a valid roman numeral"""

    def __init__(self, raw: str):
        super().__init__(raw, reason="Invalid roman numeral")


class CrossReferenceError(RulebookParseError):
    """An interpretation refers to an article that has no rule"""

    def __init__(self, article_nr):
        self.article_nr = article_nr
        super().__init__(f"Could not find rule {article_nr} for interpretation")


class DuplicateArticleError(RulebookParseError):
    """Two article headers share the same number"""

    def __init__(self, article_nr, title: str = ""):
        self.article_nr = article_nr
        self.title = title
        super().__init__(f"Duplicate article number {article_nr} ({title!r})")


class MalformedIdentifierError(RulebookParseError, ValueError):
    """An article number string is not exactly three integer parts"""

    def __init__(self, value: str, reason: str = "Invalid article number"):
        self.value = value
        super().__init__(f"{reason}: {value!r}")


class PdfExtractionError(RulebookParseError):
    """The PDF could not be turned into text"""
