"""Job description and its requirements (read-only to the core)."""

from typing import Literal

from pydantic import BaseModel


class JobSkill(BaseModel):
    name: str
    category: str | None = None
    importance: Literal["must-have", "nice-to-have"] = "must-have"


class JobRequirements(BaseModel):
    required_skills: list[JobSkill] = []
    preferred_skills: list[JobSkill] = []
    minimum_experience: float = 0.0  # years
    education_requirement: str | None = None
    certifications: list[str] = []


class JobDescription(BaseModel):
    id: str
    title: str = ""
    company: str = ""
    experience_level: str = ""  # entry, mid, senior, executive
    description: str = ""
    responsibilities: list[str] = []
    requirements: JobRequirements = JobRequirements()
