"""
Rulebook structure parsing

Splits the normalized rulebook text into articles, formats their bodies into
the tab-depth encoding and collects the approved rulings (A.R.) per article.
"""

from .parser import RulebookParser
from .segmenter import ArticleSegmenter, ArticleSpan, find_rules_region
from .formatter import RuleBodyFormatter
from .interpretations import InterpretationExtractor, iter_interpretations
from .assembler import assemble_rules

__all__ = [
    "RulebookParser",
    "ArticleSegmenter",
    "ArticleSpan",
    "find_rules_region",
    "RuleBodyFormatter",
    "InterpretationExtractor",
    "iter_interpretations",
    "assemble_rules",
]
