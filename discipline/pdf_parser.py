# discipline/pdf_parser.py

import io
import logging
from typing import Any, Dict, List

import pdfplumber

logger = logging.getLogger(__name__)


def parse_pdf(file_bytes: bytes) -> List[Dict[str, Any]]:
    pages: List[Dict[str, Any]] = []
    with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
        for idx, page in enumerate(pdf.pages, start=1):
            try:
                text = page.extract_text(x_tolerance=1, y_tolerance=1) or ""
            except Exception:
                logger.warning("Could not extract text from handbook page %d", idx)
                text = ""
            pages.append({
                "page_number": idx,
                "text": text,
            })
    return pages


def extract_text(file_bytes: bytes) -> str:
    # Page boundaries double as paragraph boundaries for passage splitting.
    return "\n\n".join(page["text"] for page in parse_pdf(file_bytes) if page["text"])
