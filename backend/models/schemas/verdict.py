"""Structured verdict parsed from the external model's free-text response."""

from pydantic import BaseModel


class LLMVerdict(BaseModel):
    """Always fully populated, even when the model output was unusable."""
    prompt: str = ""  # retained for audit
    response: str = ""  # raw model output
    reasoning: str = ""  # <= 500 chars
    overall_score: float = 5  # 1-10
    skills_score: float = 5
    experience_score: float = 5
    education_score: float = 5
    strengths: list[str] = []
    weaknesses: list[str] = []
    recommendations: list[str] = []
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    experience_highlights: list[str] = []
    risk_factors: list[str] = []
