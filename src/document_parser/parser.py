"""
Rulebook parser

Runs the whole extraction on the text of the rulebook: normalization, article
segmentation, interpretation extraction and assembly.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from src.normalization.normalizer import TextNormalizer
from src.rulebook.export import get_statistics
from src.rulebook.models import ArticleNr, Rule, RuleInterpretation
from .assembler import assemble_rules
from .interpretations import InterpretationExtractor
from .segmenter import ArticleSegmenter


class RulebookParser:
    """Rulebook text parser"""

    def __init__(self, strict_article_numbers: bool = True, normalizer: Optional[TextNormalizer] = None):
        """
        Args:
            strict_article_numbers: Fail on duplicate article numbers
            normalizer: Text normalizer, the default steps if omitted
        """
        self.normalizer = normalizer or TextNormalizer()
        self.segmenter = ArticleSegmenter(strict=strict_article_numbers)
        self.extractor = InterpretationExtractor()
        self.rules: Dict[ArticleNr, Rule] = {}

    def parse(self, text: str) -> Dict[ArticleNr, Rule]:
        """
        Parse rules with their interpretations

        Args:
            text: Raw text extracted from the rulebook PDF

        Returns:
            Rules keyed by article number, in document order
        """
        logger.info(f"Parsing rulebook, text length: {len(text)} characters")
        self.rules = {}

        normalized = self.normalizer.normalize(text)
        rules = self.segmenter.segment(normalized)
        interpretations = self.extractor.extract(normalized)
        self.rules = assemble_rules(rules, interpretations)

        logger.info(f"Rulebook parsed, {len(self.rules)} rules")
        return self.rules

    def parse_interpretations(self, text: str) -> Dict[ArticleNr, List[RuleInterpretation]]:
        """
        Parse only the interpretations

        Args:
            text: Raw text extracted from the rulebook PDF

        Returns:
            Interpretations per article number
        """
        return self.extractor.extract(self.normalizer.normalize(text))

    def get_statistics(self) -> Dict[str, Any]:
        """Statistics of the last parse() call"""
        return get_statistics(self.rules)
