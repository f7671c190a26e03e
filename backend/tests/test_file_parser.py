"""Tests for upload decoding."""

import io

import pytest
from docx import Document

from services.exceptions import ResumeParsingError, UnsupportedFileTypeError
from services.file_parser import (
    extract_document_text,
    extract_text_txt,
    file_type_from_name,
)


def test_txt_utf8():
    assert extract_document_text("Café résumé".encode("utf-8"), "txt") == "Café résumé"


def test_txt_latin1_fallback():
    assert extract_text_txt("Café".encode("latin-1")) == "Café"


def test_docx_paragraphs():
    doc = Document()
    doc.add_paragraph("Jane Smith")
    doc.add_paragraph("Skills")
    doc.add_paragraph("Python, Docker")
    buffer = io.BytesIO()
    doc.save(buffer)

    text = extract_document_text(buffer.getvalue(), "DOCX")
    assert text == "Jane Smith\nSkills\nPython, Docker"


def test_unsupported_type():
    with pytest.raises(UnsupportedFileTypeError) as exc_info:
        extract_document_text(b"{\\rtf1}", "rtf")
    assert exc_info.value.message == "Unsupported file type: rtf"
    assert exc_info.value.error_code == "UNSUPPORTED_FILE_TYPE"


def test_corrupt_pdf_raises_parsing_error():
    with pytest.raises(ResumeParsingError) as exc_info:
        extract_document_text(b"not a pdf", "pdf", file_name="broken.pdf")
    assert exc_info.value.details == {"file_name": "broken.pdf"}


def test_file_type_from_name():
    assert file_type_from_name("CV.Final.PDF") == "pdf"
    assert file_type_from_name("resume") == ""
