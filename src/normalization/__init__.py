"""
Text normalization

Document specific substring fixes and regex rewrites that turn the raw PDF text
into something the article and interpretation scanners can work with.
"""

from .normalizer import TextNormalizer, NormalizationStep, REGEX_STEPS, normalize_text
from .fixes import LiteralFix, LITERAL_FIXES

__all__ = [
    "TextNormalizer",
    "NormalizationStep",
    "REGEX_STEPS",
    "normalize_text",
    "LiteralFix",
    "LITERAL_FIXES",
]
