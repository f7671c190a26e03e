"""Pydantic contracts shared by the extraction, scoring and matching services."""

from models.schemas.job import JobDescription, JobRequirements, JobSkill
from models.schemas.match_result import (
    BulkMatchReport,
    MatchError,
    MatchResult,
    MatchStatistics,
)
from models.schemas.profile import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ExtractedProfile,
    ParsedResume,
    ResumeMetadata,
    ResumeRecord,
    Skill,
)
from models.schemas.scoring import (
    DetailedScoring,
    EducationMatch,
    ExperienceMatch,
    RelevantExperience,
    SkillMatchDetail,
    SkillsMatch,
)
from models.schemas.verdict import LLMVerdict

__all__ = [
    "BulkMatchReport",
    "CertificationEntry",
    "DetailedScoring",
    "EducationEntry",
    "EducationMatch",
    "ExperienceEntry",
    "ExperienceMatch",
    "ExtractedProfile",
    "JobDescription",
    "JobRequirements",
    "JobSkill",
    "LLMVerdict",
    "MatchError",
    "MatchResult",
    "MatchStatistics",
    "ParsedResume",
    "RelevantExperience",
    "ResumeMetadata",
    "ResumeRecord",
    "Skill",
    "SkillMatchDetail",
    "SkillsMatch",
]
