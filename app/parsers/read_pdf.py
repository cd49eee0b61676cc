import logging

import fitz  # PyMuPDF

from app.errors import ExtractionError

logger = logging.getLogger(__name__)


def extract_text(pdf_bytes: bytes) -> str:
    """
    Extract the plain text layer of a PDF held in memory.

    Pages are joined with a newline. Raises ExtractionError when the bytes
    are not a readable PDF or carry no text at all (e.g. scanned images).
    """
    if not pdf_bytes:
        raise ExtractionError(detail="Empty upload")

    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        logger.warning("Error opening PDF with PyMuPDF: %s", e)
        raise ExtractionError(detail=f"Unreadable PDF: {e}") from e

    with doc:
        if doc.needs_pass:
            raise ExtractionError(detail="PDF is password protected")

        page_texts = []
        try:
            for page in doc:
                page_texts.append(page.get_text("text"))
        except Exception as e:
            logger.warning("Error reading PDF page text: %s", e)
            raise ExtractionError(detail=f"Unreadable PDF page: {e}") from e

    text = "\n".join(page_texts).replace("\u00ad", "")  # Remove soft hyphens
    if not text.strip():
        raise ExtractionError(detail="PDF has no extractable text layer")

    logger.debug("Extracted %d characters from %d page(s)", len(text), len(page_texts))
    return text
