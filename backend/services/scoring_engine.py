"""Deterministic rule-based scoring of a candidate profile against a job.

Same inputs always produce the same outputs; no LLM is used here. The
scores feed the explainable channel stored next to the LLM verdict.
"""

import logging
import math

from models.schemas.job import JobRequirements, JobSkill
from models.schemas.profile import EducationEntry, ExperienceEntry, ExtractedProfile, Skill
from models.schemas.scoring import (
    DetailedScoring,
    EducationMatch,
    ExperienceMatch,
    RelevantExperience,
    SkillMatchDetail,
    SkillsMatch,
)
from services.taxonomy import LENIENT_EDUCATION_REQUIREMENTS, QUALIFYING_DEGREES

logger = logging.getLogger(__name__)

# Returned when the job states no requirement for a dimension
NEUTRAL_SCORE = 8
EDUCATION_MISS_SCORE = 5
PLACEHOLDER_RELEVANCE = 7


def _round1(value: float) -> float:
    """Round half up to one decimal."""
    return math.floor(value * 10 + 0.5) / 10


def _find_candidate_skill(required: JobSkill, candidate_skills: list[Skill]) -> Skill | None:
    required_name = required.name.lower()
    for skill in candidate_skills:
        name = skill.name.lower()
        if required_name in name or name in required_name:
            return skill
    return None


def calculate_skills_match(
    candidate_skills: list[Skill], required_skills: list[JobSkill]
) -> SkillsMatch:
    """Score 2-10 from the share of required skills the candidate has.

    Matching is case-insensitive substring containment in either direction.
    No required skills -> neutral 8.
    """
    if not required_skills:
        return SkillsMatch(score=NEUTRAL_SCORE)

    matched: list[SkillMatchDetail] = []
    missing: list[str] = []
    for required in required_skills:
        match = _find_candidate_skill(required, candidate_skills)
        if match:
            matched.append(SkillMatchDetail(
                skill=required.name,
                candidate_level=match.proficiency_level,
                required_level="required",
                match=True,
            ))
        else:
            missing.append(required.name)

    match_percentage = len(matched) / len(required_skills)
    score = min(10, match_percentage * 8 + 2)
    logger.debug("Skills: %d/%d matched", len(matched), len(required_skills))

    return SkillsMatch(
        score=_round1(score),
        matched_skills=matched,
        missing_skills=missing,
    )


def calculate_experience_match(
    candidate_experience: float,
    required_experience: float,
    experience_details: list[ExperienceEntry] | None = None,
) -> ExperienceMatch:
    """Score 1-10 comparing years of experience to the requirement.

    Meeting the requirement scores 7 plus 0.5 per extra year (max 10);
    each missing year costs 1.5 (min 1). No requirement -> neutral 8.
    """
    if required_experience == 0:
        return ExperienceMatch(
            score=NEUTRAL_SCORE,
            candidate_experience=candidate_experience,
            required_experience=0,
        )

    if candidate_experience >= required_experience:
        score = min(10, 7 + (candidate_experience - required_experience) * 0.5)
    else:
        deficit = required_experience - candidate_experience
        score = max(1, 7 - deficit * 1.5)

    relevant = [
        RelevantExperience(
            company=exp.company or "Unknown",
            position=exp.position or "Unknown",
            relevance_score=PLACEHOLDER_RELEVANCE,
        )
        for exp in experience_details or []
    ]

    return ExperienceMatch(
        score=_round1(score),
        candidate_experience=candidate_experience,
        required_experience=required_experience,
        relevant_experience=relevant,
    )


def calculate_education_match(
    candidate_education: list[EducationEntry],
    required_education: str | None,
) -> EducationMatch:
    """8 if the requirement is met, else 5. No requirement -> met, 8."""
    if not required_education:
        return EducationMatch(score=NEUTRAL_SCORE, meets=True)

    education_string = " ".join(
        f"{edu.degree} {edu.field_of_study}".lower() for edu in candidate_education
    )
    required_lower = required_education.lower()
    meets = any(d in education_string for d in QUALIFYING_DEGREES) or any(
        phrase in required_lower for phrase in LENIENT_EDUCATION_REQUIREMENTS
    )

    return EducationMatch(
        score=NEUTRAL_SCORE if meets else EDUCATION_MISS_SCORE,
        candidate_education=(
            candidate_education[0].degree if candidate_education else "Not specified"
        ),
        required_education=required_education,
        meets=meets,
    )


def calculate_detailed_scoring(
    profile: ExtractedProfile, requirements: JobRequirements
) -> DetailedScoring:
    """Score a profile against job requirements on all three dimensions."""
    return DetailedScoring(
        skills_match=calculate_skills_match(profile.skills, requirements.required_skills),
        experience_match=calculate_experience_match(
            profile.total_experience_years,
            requirements.minimum_experience,
            profile.experience,
        ),
        education_match=calculate_education_match(
            profile.education, requirements.education_requirement
        ),
    )
