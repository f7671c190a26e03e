"""Decode uploaded resume files into plain text."""

import io
import logging

import pdfplumber
from docx import Document

from services.exceptions import ResumeParsingError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

SUPPORTED_FILE_TYPES = ("pdf", "docx", "txt")


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_txt(txt_bytes: bytes) -> str:
    """Decode a plain-text file, falling back to latin-1."""
    try:
        return txt_bytes.decode("utf-8")
    except UnicodeDecodeError:
        return txt_bytes.decode("latin-1")


_EXTRACTORS = {
    "pdf": extract_text,
    "docx": extract_text_docx,
    "txt": extract_text_txt,
}


def file_type_from_name(file_name: str) -> str:
    """Lowercased extension without the dot ("" if there is none)."""
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[1].lower()


def extract_document_text(content: bytes, file_type: str, file_name: str | None = None) -> str:
    """Decode ``content`` according to its declared type.

    Raises UnsupportedFileTypeError for unknown types and ResumeParsingError
    when a supported file cannot be decoded.
    """
    extractor = _EXTRACTORS.get(file_type.lower())
    if extractor is None:
        raise UnsupportedFileTypeError(file_type)

    try:
        return extractor(content)
    except Exception as e:
        logger.error("Failed to decode %s file %s: %s", file_type, file_name, e)
        raise ResumeParsingError(
            f"Resume parsing failed: {e}", file_name=file_name
        ) from e
