"""Statistics and JSON export of parsed rules"""
import json
import os
from collections import Counter
from datetime import datetime
from typing import Any, Dict, List

from loguru import logger

from .models import ArticleNr, Rule, RuleInterpretation


def get_statistics(rules: Dict[ArticleNr, Rule]) -> Dict[str, Any]:
    """
    Summarize a parsed rule map

    Args:
        rules: Rules in document order

    Returns:
        Statistics dict
    """
    chapter_counts = Counter(article_nr.chapter for article_nr in rules)

    return {
        "total_rules": len(rules),
        "total_interpretations": sum(len(r.interpretations) for r in rules.values()),
        "rules_with_interpretations": len([r for r in rules.values() if r.interpretations]),
        "chapter_distribution": {str(chapter): count for chapter, count in sorted(chapter_counts.items())},
    }


def _write_json(data: Dict[str, Any], output_path: str) -> bool:
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.error(f"Failed to write {output_path}: {e}")
        return False

    logger.info(f"Exported to {output_path}")
    return True


def export_to_json(rules: Dict[ArticleNr, Rule], output_path: str) -> bool:
    """
    Export rules (with their interpretations) to a JSON file

    Args:
        rules: Rules in document order
        output_path: Target file

    Returns:
        Whether the file was written
    """
    export_data = {
        "export_time": datetime.now().isoformat(),
        "stats": get_statistics(rules),
        "rules": [rule.to_dict() for rule in rules.values()],
    }
    return _write_json(export_data, output_path)


def export_interpretations_to_json(
    interpretations: Dict[ArticleNr, List[RuleInterpretation]],
    output_path: str,
) -> bool:
    """Export interpretations only, flattened in document order"""
    items = [i.to_dict() for article_items in interpretations.values() for i in article_items]
    export_data = {
        "export_time": datetime.now().isoformat(),
        "stats": {"total_interpretations": len(items), "articles": len(interpretations)},
        "interpretations": items,
    }
    return _write_json(export_data, output_path)
