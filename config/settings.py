"""Configuration management"""
import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()


class Settings(BaseSettings):
    """Application settings"""

    # Paths
    input_dir: str = os.path.join(os.path.dirname(os.path.dirname(__file__)), "input")
    output_dir: str = os.path.join(os.path.dirname(os.path.dirname(__file__)), "output")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "output/logs/app.log")

    # PDF text extraction
    pdf_backend: str = os.getenv("PDF_BACKEND", "pdftotext")  # pdftotext | pymupdf
    pdftotext_path: str = os.getenv("PDFTOTEXT_PATH", "pdftotext")

    # Crop box of the text extraction (pt). The parser relies on this geometry:
    # it cuts off the running header and the page footer.
    crop_x: int = 0
    crop_y: int = 40
    crop_width: int = 1000
    crop_height: int = 540

    # Two articles sharing a number is an error unless disabled
    strict_article_numbers: bool = True

    # Public links
    pub_url: str = os.getenv("PUB_URL", "https://ruleoftheday.de")
    rules_pdf_url: str = os.getenv(
        "RULES_PDF_URL",
        "https://afsvd.de/content/files/2024/12/Football_Regelbuch_2025.pdf",
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_extraction_config() -> dict:
    """Return the PDF extraction configuration"""
    return {
        "backend": settings.pdf_backend,
        "pdftotext_path": settings.pdftotext_path,
        "x": settings.crop_x,
        "y": settings.crop_y,
        "width": settings.crop_width,
        "height": settings.crop_height,
    }
