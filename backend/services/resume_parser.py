"""Resume extraction pipeline: raw text -> ExtractedProfile.

Steps:
1. Normalize text for keyword matching (identity fields use the original)
2. Contact extraction (name, email, phone)
3. Section-driven extractors: skills, experience, education, certifications
4. Total experience years and summary
"""

import logging
from datetime import datetime

from models.schemas.profile import ExtractedProfile, ParsedResume, ResumeMetadata
from services.education_extractor import (
    extract_certifications,
    extract_education,
    extract_summary,
)
from services.experience_extractor import calculate_total_experience, extract_experience
from services.file_parser import extract_document_text
from services.section_parser import extract_contact_info, normalize_text
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)


def extract_structured_data(text: str, now: datetime | None = None) -> ExtractedProfile:
    """Run every extractor over one resume's text.

    Never raises for missing or malformed content: each field falls back
    to None, an empty list, 0 or "".
    """
    clean_text = normalize_text(text)
    contact = extract_contact_info(text)

    profile = ExtractedProfile(
        name=contact["name"],
        email=contact["email"],
        phone=contact["phone"],
        skills=extract_skills(clean_text, text),
        experience=extract_experience(text, now),
        education=extract_education(text),
        certifications=extract_certifications(text),
        total_experience_years=calculate_total_experience(clean_text, text, now),
        summary=extract_summary(text),
    )
    logger.info(
        "Extracted profile: %d skills, %d jobs, %d degrees, %.1f years",
        len(profile.skills),
        len(profile.experience),
        len(profile.education),
        profile.total_experience_years,
    )
    return profile


def parse_resume(
    content: bytes,
    file_name: str,
    file_type: str,
    now: datetime | None = None,
) -> ParsedResume:
    """Decode an uploaded file and extract its profile.

    Raises UnsupportedFileTypeError before any extraction happens when the
    declared type is unknown.
    """
    text = extract_document_text(content, file_type, file_name)

    return ParsedResume(
        raw_text=text,
        normalized_text=normalize_text(text),
        extracted_data=extract_structured_data(text, now),
        metadata=ResumeMetadata(
            file_name=file_name,
            file_type=file_type.lower(),
            parsed_at=now or datetime.now(),
            word_count=len(text.split()),
        ),
    )
