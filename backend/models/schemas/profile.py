"""Structured profile extracted from one resume."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel

SkillCategory = Literal["technical", "soft", "domain", "other"]
ProficiencyLevel = Literal["beginner", "intermediate", "advanced", "expert"]


class Skill(BaseModel):
    """A single skill with its taxonomy bucket and estimated proficiency."""
    name: str
    category: SkillCategory = "other"
    proficiency_level: ProficiencyLevel = "intermediate"


class ExperienceEntry(BaseModel):
    """A single job parsed from the experience section."""
    position: str = ""
    company: str = "Unknown"
    duration: str = ""  # raw date line, free text
    description: str = ""
    start_date: date | None = None
    end_date: date | None = None
    is_current: bool = False


class EducationEntry(BaseModel):
    """A degree line from the education section.

    Institution and field are not separated from the degree line; the
    whole line is kept in ``degree``.
    """
    degree: str = ""
    institution: str = "Unknown"
    field_of_study: str = "Unknown"
    graduation_year: int | None = None
    gpa: str | None = None


class CertificationEntry(BaseModel):
    """A single certification line."""
    name: str
    issuer: str = "Unknown"
    issue_date: date | None = None
    expiry_date: date | None = None


class ExtractedProfile(BaseModel):
    """Output of the resume extraction pipeline.

    Replaced wholesale on reparse, never merged.
    """
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    skills: list[Skill] = []
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    certifications: list[CertificationEntry] = []
    total_experience_years: float = 0.0  # derived, capped at 50
    summary: str = ""  # <= 500 chars

    model_config = {"frozen": True}


class ResumeMetadata(BaseModel):
    file_name: str
    file_type: str
    parsed_at: datetime
    word_count: int = 0


class ParsedResume(BaseModel):
    """Result of the upload path: decoded text plus extracted profile."""
    raw_text: str
    normalized_text: str
    extracted_data: ExtractedProfile
    metadata: ResumeMetadata


class ResumeRecord(BaseModel):
    """A stored resume as the matching path sees it."""
    id: str
    candidate_name: str = ""
    email: str | None = None
    extracted_data: ExtractedProfile = ExtractedProfile()
