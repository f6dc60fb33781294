"""PDF text extraction"""
import os
import subprocess
from typing import List, Optional

import fitz  # PyMuPDF

from config.settings import get_extraction_config, settings
from src.utils.logger import logger

PAGE_BREAK = "\x0c"


class PDFExtractor:
    """Rulebook PDF text extractor"""

    def __init__(self, input_dir: Optional[str] = None, config: Optional[dict] = None):
        """
        Initialize the extractor

        Args:
            input_dir: Directory with PDF files, defaults to the settings
            config: Extraction config (backend, crop box), defaults to the settings
        """
        self.input_dir = input_dir or settings.input_dir
        self.config = config or get_extraction_config()
        logger.info(f"PDF extractor initialized, backend: {self.config['backend']}, input dir: {self.input_dir}")

    def extract_from_file(self, pdf_path: str) -> dict:
        """
        Extract the text of a single file

        Pages are cropped to the configured box and terminated by a form feed.
        A ".txt" file is taken as already extracted text.

        Args:
            pdf_path: Path of the PDF (or text) file

        Returns:
            dict: file name, page count, extracted text, success flag
        """
        if not os.path.exists(pdf_path):
            logger.error(f"PDF file does not exist: {pdf_path}")
            return {"file_name": os.path.basename(pdf_path), "file_path": pdf_path,
                    "error": f"File does not exist: {pdf_path}", "success": False}

        try:
            if pdf_path.lower().endswith(".txt"):
                with open(pdf_path, "r", encoding="utf-8") as f:
                    full_text = f.read()
            elif self.config["backend"] == "pymupdf":
                full_text = self._extract_with_pymupdf(pdf_path)
            else:
                full_text = self._extract_with_pdftotext(pdf_path)
        except (OSError, RuntimeError, UnicodeDecodeError, subprocess.SubprocessError) as e:
            logger.error(f"Failed to extract PDF {pdf_path}: {e}")
            return {
                "file_name": os.path.basename(pdf_path),
                "file_path": pdf_path,
                "error": str(e),
                "success": False,
            }

        result = {
            "file_name": os.path.basename(pdf_path),
            "file_path": pdf_path,
            "page_count": full_text.count(PAGE_BREAK),
            "full_text": full_text,
            "success": True,
        }

        logger.info(f"Extracted {pdf_path}, pages: {result['page_count']}, text length: {len(full_text)}")
        return result

    def _extract_with_pdftotext(self, pdf_path: str) -> str:
        cmd = [
            self.config["pdftotext_path"],
            "-x", str(self.config["x"]),
            "-y", str(self.config["y"]),
            "-W", str(self.config["width"]),
            "-H", str(self.config["height"]),
            pdf_path,
            "-",
        ]
        logger.debug(f"Running {' '.join(cmd)}")
        completed = subprocess.run(cmd, capture_output=True)
        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise RuntimeError(f"pdftotext did not exit successfully ({completed.returncode}): {stderr}")
        return completed.stdout.decode("utf-8")

    def _extract_with_pymupdf(self, pdf_path: str) -> str:
        x, y = self.config["x"], self.config["y"]
        clip = fitz.Rect(x, y, x + self.config["width"], y + self.config["height"])

        doc = fitz.open(pdf_path)
        try:
            pages = [page.get_text("text", clip=clip) + PAGE_BREAK for page in doc]
        finally:
            doc.close()
        return "".join(pages)

    def extract_from_directory(self) -> List[dict]:
        """
        Extract all PDF files of the input directory

        Returns:
            List[dict]: Extraction results in file name order
        """
        if not os.path.exists(self.input_dir):
            logger.error(f"Input directory does not exist: {self.input_dir}")
            return []

        pdf_files = [
            f for f in os.listdir(self.input_dir)
            if f.lower().endswith('.pdf')
        ]

        if not pdf_files:
            logger.warning(f"No PDF files found in {self.input_dir}")
            return []

        logger.info(f"Found {len(pdf_files)} PDF files")

        return [
            self.extract_from_file(os.path.join(self.input_dir, pdf_file))
            for pdf_file in sorted(pdf_files)
        ]

    def save_extracted_text(self, result: dict, output_dir: Optional[str] = None) -> Optional[str]:
        """
        Write the extracted text next to the other outputs

        Args:
            result: Extraction result
            output_dir: Output directory, defaults to the settings

        Returns:
            Path of the text file, None on failure
        """
        if not result.get("success"):
            logger.error(f"Cannot save failed extraction: {result.get('file_name')}")
            return None

        output_dir = output_dir or settings.output_dir
        os.makedirs(output_dir, exist_ok=True)

        base_name = os.path.splitext(result["file_name"])[0]
        txt_path = os.path.join(output_dir, f"{base_name}.txt")

        try:
            with open(txt_path, 'w', encoding='utf-8') as f:
                f.write(result["full_text"])
        except OSError as e:
            logger.error(f"Failed to save text {txt_path}: {e}")
            return None

        logger.info(f"Text saved: {txt_path}")
        return txt_path
