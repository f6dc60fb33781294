"""Attach extracted interpretations to their rules"""

from typing import Dict, List

from loguru import logger

from src.rulebook.errors import CrossReferenceError
from src.rulebook.models import ArticleNr, Rule, RuleInterpretation


def assemble_rules(
    rules: Dict[ArticleNr, Rule],
    interpretations: Dict[ArticleNr, List[RuleInterpretation]],
) -> Dict[ArticleNr, Rule]:
    """
    Merge interpretations into the rules they belong to

    Args:
        rules: Output of the article segmenter
        interpretations: Output of the interpretation extractor

    Returns:
        New rule map in the same order, with interpretations attached

    Raises:
        CrossReferenceError: An interpretation refers to an unknown article.
            Nothing is returned in that case.
    """
    for article_nr in interpretations:
        if article_nr not in rules:
            raise CrossReferenceError(article_nr)

    assembled = {
        article_nr: rule.model_copy(update={"interpretations": tuple(interpretations[article_nr])})
        if article_nr in interpretations else rule
        for article_nr, rule in rules.items()
    }

    logger.info(f"Attached interpretations to {len(interpretations)} of {len(rules)} rules")
    return assembled
