"""
CV text helpers for uploaded files.
"""

import io
import logging

from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)


def extract_text_from_pdf(pdf_bytes: bytes) -> str:
    """
    Extract text from a PDF file.

    Parameters
    ----------
    pdf_bytes : bytes
        Raw PDF file bytes.

    Returns
    -------
    str
        Extracted text from all pages, joined by newlines.

    Raises
    ------
    ValueError
        If the bytes cannot be read as a PDF.
    """
    try:
        pdf_reader = PdfReader(io.BytesIO(pdf_bytes))
        text_pages = []
        for page in pdf_reader.pages:
            page_text = page.extract_text() or ""
            if page_text.strip():
                text_pages.append(page_text)
    except Exception as exc:
        logger.exception("PDF extraction failed")
        raise ValueError(f"Failed to parse PDF: {exc}") from exc

    result = "\n".join(text_pages)
    logger.info("PDF extracted  pages=%d  chars=%d", len(pdf_reader.pages), len(result))
    return result
