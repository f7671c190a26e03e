"""Rule-based, explainable scoring channel stored alongside the LLM verdict."""

from pydantic import BaseModel


class SkillMatchDetail(BaseModel):
    skill: str
    candidate_level: str
    required_level: str = "required"
    match: bool = True


class SkillsMatch(BaseModel):
    score: float = 0.0  # 0-10
    matched_skills: list[SkillMatchDetail] = []
    missing_skills: list[str] = []


class RelevantExperience(BaseModel):
    company: str = "Unknown"
    position: str = "Unknown"
    relevance_score: float = 7  # placeholder slot, no relevance model yet


class ExperienceMatch(BaseModel):
    score: float = 0.0  # 0-10
    candidate_experience: float = 0.0
    required_experience: float = 0.0
    relevant_experience: list[RelevantExperience] = []


class EducationMatch(BaseModel):
    score: float = 0.0  # 0-10
    candidate_education: str = "Not specified"
    required_education: str = "Not specified"
    meets: bool = False


class DetailedScoring(BaseModel):
    """Per-dimension scores for one (resume, job) pair.

    Not averaged into the overall score; the overall score comes from
    the LLM verdict.
    """
    skills_match: SkillsMatch = SkillsMatch()
    experience_match: ExperienceMatch = ExperienceMatch()
    education_match: EducationMatch = EducationMatch()
