"""Document ➜ raw text.

Reads PDF resumes with pdfplumber and plain-text resumes directly. This is
the only I/O-bound step of parsing; everything downstream works on strings.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import pdfplumber
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = frozenset({".txt", ".text", ".md"})
PDF_SUFFIXES = frozenset({".pdf"})

_CID_RE = re.compile(r"\(cid:\d+\)")


class ExtractionFailure(Exception):
    """Raised when a document cannot be turned into text."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not extract text from {self.path}: {reason}")


def _pdf_to_text(path: Path) -> str:
    try:
        with pdfplumber.open(path) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except (PdfminerException, PDFSyntaxError) as e:
        raise ExtractionFailure(path, "corrupt or unreadable PDF") from e
    return _CID_RE.sub("", "\n".join(pages))


def _plain_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ExtractionFailure(path, "text is not valid UTF-8") from e


def extract_text(path: Path | str) -> str:
    """Return the text of a resume document.

    Raises:
        ExtractionFailure: The file is missing, has an unsupported format,
            or cannot be decoded.
    """
    document = Path(path)
    if not document.is_file():
        raise ExtractionFailure(document, "file not found")

    suffix = document.suffix.lower()
    if suffix in PDF_SUFFIXES:
        text = _pdf_to_text(document)
    elif suffix in TEXT_SUFFIXES:
        text = _plain_text(document)
    else:
        raise ExtractionFailure(document, f"unsupported format '{suffix or '(none)'}'")

    logger.debug(f"Extracted {len(text)} characters from {document.name}")
    return text
