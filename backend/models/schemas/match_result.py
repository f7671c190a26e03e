"""Persisted match record and bulk-matching report."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from models.schemas.scoring import DetailedScoring
from models.schemas.verdict import LLMVerdict

MatchStatus = Literal["excellent", "good", "average", "poor"]


class MatchResult(BaseModel):
    job_id: str
    resume_id: str
    overall_score: float  # 0-10, from the LLM verdict
    detailed_scoring: DetailedScoring
    llm_analysis: LLMVerdict
    match_status: MatchStatus
    is_shortlisted: bool = False
    matched_at: datetime = Field(default_factory=datetime.now)
    processed_by: str = "ai-system"


class MatchError(BaseModel):
    resume_id: str
    candidate_name: str = ""
    error: str


class BulkMatchReport(BaseModel):
    """Outcome of matching many resumes against one job.

    Partial success is always distinguishable from total failure via
    ``error_count`` and ``errors``.
    """
    job_id: str
    job_title: str = ""
    matches: list[MatchResult] = []
    total_resumes: int = 0
    processed_count: int = 0
    matches_found: int = 0
    error_count: int = 0
    errors: list[MatchError] = []


class MatchStatistics(BaseModel):
    total_matches: int = 0
    average_score: float = 0.0
    shortlisted_count: int = 0
    shortlist_rate: int = 0  # percent
    score_distribution: dict[str, int] = {
        "excellent": 0, "good": 0, "average": 0, "poor": 0,
    }
