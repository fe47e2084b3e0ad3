from __future__ import annotations

import logging
from io import BytesIO

from pypdf import PdfReader

from .models import RawDocument

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"
EXTRACTION_FAILED_MESSAGE = (
    "Could not extract text from this PDF. The file may be scanned, image-based, or corrupted."
)


class PdfExtractionError(ValueError):
    pass


def extract_pdf_text(content: bytes) -> RawDocument:
    """Extract plain text and the page count from PDF bytes.

    Pages without text are skipped; the remaining pages are joined with a
    blank line. Any reader failure surfaces as ``PdfExtractionError``.
    """
    warnings: list[str] = []
    try:
        reader = PdfReader(BytesIO(content))
        page_count = len(reader.pages)
        text_parts: list[str] = []
        for page in reader.pages:
            page_text = page.extract_text() or ""
            if page_text.strip():
                text_parts.append(page_text)
    except Exception as exc:
        logger.warning("pdf_extraction_failed bytes=%s: %s", len(content), exc)
        raise PdfExtractionError(EXTRACTION_FAILED_MESSAGE) from exc

    if not text_parts:
        warnings.append("No extractable text found in PDF.")

    text = PAGE_SEPARATOR.join(text_parts)
    logger.info("pdf_extracted chars=%s pages=%s", len(text), page_count)
    return RawDocument(text=text, page_count=page_count, parsing_warnings=warnings)
