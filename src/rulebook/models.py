"""Rulebook data model"""
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field

from .errors import MalformedIdentifierError
from .roman import to_roman

_PART_RE = re.compile(r"[0-9]+")
_MAX_PART = 255


@dataclass(frozen=True, order=True)
class ArticleNr:
    """Hierarchical article number (chapter, section, article)"""
    chapter: int
    section: int
    article: int

    def __post_init__(self):
        for part in (self.chapter, self.section, self.article):
            if not isinstance(part, int) or not 0 <= part <= _MAX_PART:
                raise MalformedIdentifierError(
                    f"{self.chapter}.{self.section}.{self.article}",
                    reason="Article number parts have to be within 0..255",
                )

    def __str__(self) -> str:
        return f"{self.chapter}.{self.section}.{self.article}"

    @classmethod
    def from_string(cls, value: str) -> "ArticleNr":
        """
        Parse the dotted display form

        Surrounding whitespace and trailing dots are ignored, so the "1.3.2."
        captured in front of an interpretation index parses as well.

        Args:
            value: e.g. "9.1.4"

        Returns:
            ArticleNr

        Raises:
            MalformedIdentifierError: Not exactly three non-negative integers
        """
        return cls._from_parts(value, value.strip().rstrip(".").split("."))

    @classmethod
    def from_path_parameter(cls, value: str) -> "ArticleNr":
        """Parse the dash separated URL form, e.g. "9-1-4"."""
        return cls._from_parts(value, value.split("-"))

    @classmethod
    def _from_parts(cls, value: str, parts: List[str]) -> "ArticleNr":
        if len(parts) != 3:
            raise MalformedIdentifierError(value, reason="Article number has to consist of three parts")
        if not all(_PART_RE.fullmatch(part) for part in parts):
            raise MalformedIdentifierError(value, reason="Article number parts have to be integer")
        chapter, section, article = (int(part) for part in parts)
        return cls(chapter, section, article)

    def to_path_parameter(self) -> str:
        return f"{self.chapter}-{self.section}-{self.article}"

    def to_pdf_destination(self) -> str:
        """Named destination of the article inside the official PDF"""
        if self.article != 0:
            return f"subsection.1.{self.chapter}.{self.section}.{self.article}"
        # x.y.0 articles are sections promoted to rules
        return f"section.1.{self.chapter}.{self.section}"


class RuleInterpretation(BaseModel):
    """Approved ruling (A.R.) attached to an article"""
    article_nr: ArticleNr = Field(..., description="Article the ruling belongs to")
    index: int = Field(..., gt=0, description="Position within the article, from the roman numeral")
    text: str = Field(..., description="Situation")
    ruling: str = Field(..., description="Ruling")

    class Config:
        frozen = True

    def get_title(self) -> str:
        return f"A.R. {self.article_nr}.{to_roman(self.index)}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON friendly dict"""
        return {
            "article_nr": str(self.article_nr),
            "index": self.index,
            "title": self.get_title(),
            "text": self.text,
            "ruling": self.ruling,
        }


class Rule(BaseModel):
    """A single rulebook article"""
    article_nr: ArticleNr = Field(..., description="Article number")
    title: str = Field(..., description="Article title")
    text: str = Field(..., description="Body in tab-depth encoding")
    interpretations: Tuple[RuleInterpretation, ...] = Field(default_factory=tuple, description="Approved rulings")

    class Config:
        frozen = True

    def to_title(self) -> str:
        return f"{self.article_nr} {self.title}"

    def to_description(self) -> str:
        """First 50 characters of the first body line"""
        first_line = self.text.split("\n", 1)[0]
        return f"{first_line[:50]}..."

    def to_url(self, base_url: str) -> str:
        return f"{base_url}/rule/{self.article_nr.to_path_parameter()}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON friendly dict"""
        return {
            "article_nr": str(self.article_nr),
            "title": self.title,
            "text": self.text,
            "interpretations": [i.to_dict() for i in self.interpretations],
        }
