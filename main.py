"""Command line entry point"""
import os
import sys
from typing import Dict, List, Optional

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.pdf_processor.extractor import PDFExtractor
from src.document_parser.parser import RulebookParser
from src.rulebook.errors import PdfExtractionError, RulebookParseError
from src.rulebook.export import export_interpretations_to_json, export_to_json, get_statistics
from src.rulebook.models import ArticleNr, Rule, RuleInterpretation
from src.utils.logger import logger, setup_logger
from config.settings import settings


class RulebookPipeline:
    """Rulebook extraction pipeline"""

    def __init__(self, excluded_rules: Optional[List[ArticleNr]] = None):
        """
        Initialize the pipeline

        Args:
            excluded_rules: Articles to drop from the result
        """
        self.pdf_extractor = PDFExtractor()
        self.parser = RulebookParser(strict_article_numbers=settings.strict_article_numbers)
        self.excluded_rules = excluded_rules or []

        logger.info("Rulebook pipeline initialized")

    def load_text(self, pdf_path: str) -> str:
        """
        Extract the text of a rulebook

        Raises:
            PdfExtractionError: Extraction failed
        """
        result = self.pdf_extractor.extract_from_file(pdf_path)
        if not result.get("success"):
            raise PdfExtractionError(f"Could not extract {pdf_path}: {result.get('error')}")
        return result["full_text"]

    def process_single_pdf(self, pdf_path: str) -> Dict[ArticleNr, Rule]:
        """
        Parse the rules of a single rulebook

        Args:
            pdf_path: PDF (or extracted text) file

        Returns:
            Rules in document order, without the excluded ones
        """
        logger.info(f"Processing {pdf_path}")

        parsed = self.parser.parse(self.load_text(pdf_path))

        for article_nr in self.excluded_rules:
            if article_nr in parsed:
                logger.info(f"Excluded rule {article_nr}")
            else:
                logger.warning(f"Excluded rule {article_nr} does not exist")

        # parser.rules keeps the full result for its statistics
        return {
            article_nr: rule
            for article_nr, rule in parsed.items()
            if article_nr not in self.excluded_rules
        }

    def process_interpretations(self, pdf_path: str) -> Dict[ArticleNr, List[RuleInterpretation]]:
        """Parse only the interpretations of a single rulebook"""
        logger.info(f"Processing interpretations of {pdf_path}")
        return self.parser.parse_interpretations(self.load_text(pdf_path))

    def collect_inputs(self, input_path: Optional[str] = None) -> List[str]:
        """
        Resolve the input path to a list of files

        Args:
            input_path: File or directory, the configured input dir if omitted
        """
        input_path = input_path or settings.input_dir

        if os.path.isfile(input_path):
            return [input_path]
        if os.path.isdir(input_path):
            return [
                os.path.join(input_path, f)
                for f in sorted(os.listdir(input_path))
                if f.lower().endswith(".pdf")
            ]

        logger.error(f"Invalid input path: {input_path}")
        return []


def _export_path(export: str, pdf_path: str, multiple: bool) -> str:
    if not multiple:
        return export
    base_name = os.path.splitext(os.path.basename(pdf_path))[0]
    return f"{os.path.splitext(export)[0]}_{base_name}.json"


def main():
    """Main function"""
    import argparse

    parser = argparse.ArgumentParser(description="Extract rules and approved rulings from the football rulebook")
    parser.add_argument("--input", "-i", help="Rulebook PDF, extracted .txt file or directory of PDFs")
    parser.add_argument("--exclude-rule", "-x", action="append", default=[], type=ArticleNr.from_string,
                        help="Article to leave out, e.g. 9.1.4 (repeatable)")
    parser.add_argument("--export", "-e", help="Export the result to a JSON file")
    parser.add_argument("--interpretations-only", action="store_true", help="Only extract the interpretations")
    parser.add_argument("--save-text", action="store_true", help="Save the extracted text to the output directory")
    parser.add_argument("--log-level", help="Log level, e.g. DEBUG (defaults to the settings)")
    args = parser.parse_args()

    if args.log_level:
        setup_logger(log_level=args.log_level)

    pipeline = RulebookPipeline(excluded_rules=args.exclude_rule)
    inputs = pipeline.collect_inputs(args.input)
    if not inputs:
        print("No files processed")
        sys.exit(1)

    multiple = len(inputs) > 1
    for pdf_path in inputs:
        try:
            if args.save_text:
                pipeline.pdf_extractor.save_extracted_text(pipeline.pdf_extractor.extract_from_file(pdf_path))

            if args.interpretations_only:
                interpretations = pipeline.process_interpretations(pdf_path)
                total = sum(len(items) for items in interpretations.values())
                print(f"{pdf_path}: {total} interpretations for {len(interpretations)} articles")
                if args.export:
                    export_interpretations_to_json(interpretations, _export_path(args.export, pdf_path, multiple))
                continue

            rules = pipeline.process_single_pdf(pdf_path)
        except RulebookParseError as e:
            logger.error(f"Failed to parse {pdf_path}: {e}")
            sys.exit(1)

        stats = get_statistics(rules)
        print("\n" + "=" * 60)
        print(pdf_path)
        print("=" * 60)
        print(f"Rules: {stats['total_rules']}")
        print(f"Interpretations: {stats['total_interpretations']}")
        print(f"Rules with interpretations: {stats['rules_with_interpretations']}")
        for chapter, count in stats["chapter_distribution"].items():
            print(f"  Rule {chapter}: {count} articles")

        if args.export:
            export_to_json(rules, _export_path(args.export, pdf_path, multiple))


if __name__ == "__main__":
    main()
