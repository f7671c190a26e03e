"""Education, certification and summary extraction from resume sections."""

import logging
import re

from models.schemas.profile import CertificationEntry, EducationEntry
from services.section_parser import extract_sections
from services.taxonomy import (
    CERTIFICATION_HEADERS,
    DEGREE_KEYWORDS,
    EDUCATION_HEADERS,
    SUMMARY_HEADERS,
)

logger = logging.getLogger(__name__)

_GRADUATION_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
_GPA_RE = re.compile(r"gpa\s*:?\s*(\d+\.?\d*)", re.IGNORECASE)
MIN_CERTIFICATION_LEN = 6
MAX_SUMMARY_LEN = 500


def is_degree(line: str) -> bool:
    lower = line.lower()
    return any(keyword in lower for keyword in DEGREE_KEYWORDS)


def parse_degree(line: str) -> EducationEntry:
    # Institution and field are not reliably separable from the degree line
    year_match = _GRADUATION_YEAR_RE.search(line)
    gpa_match = _GPA_RE.search(line)
    return EducationEntry(
        degree=line.strip(),
        institution="Unknown",
        field_of_study="Unknown",
        graduation_year=int(year_match.group()) if year_match else None,
        gpa=gpa_match.group(1) if gpa_match else None,
    )


def parse_education_section(section: str) -> list[EducationEntry]:
    return [
        parse_degree(line)
        for line in section.split("\n")
        if line.strip() and is_degree(line)
    ]


def extract_education(text: str) -> list[EducationEntry]:
    education: list[EducationEntry] = []
    for section in extract_sections(text, EDUCATION_HEADERS):
        education.extend(parse_education_section(section))
    logger.debug("Extracted %d education entries", len(education))
    return education


def parse_certification_section(section: str) -> list[CertificationEntry]:
    """Every non-trivial line is one certification; no issuer or dates parsed."""
    return [
        CertificationEntry(name=line.strip(), issuer="Unknown")
        for line in section.split("\n")
        if len(line.strip()) >= MIN_CERTIFICATION_LEN
    ]


def extract_certifications(text: str) -> list[CertificationEntry]:
    certifications: list[CertificationEntry] = []
    for section in extract_sections(text, CERTIFICATION_HEADERS):
        certifications.extend(parse_certification_section(section))
    return certifications


def extract_summary(text: str) -> str:
    """First summary/objective/profile section, truncated to 500 chars."""
    sections = extract_sections(text, SUMMARY_HEADERS)
    return sections[0][:MAX_SUMMARY_LEN] if sections else ""
