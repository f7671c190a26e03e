from pydantic import BaseModel, Field

from models.schemas.job import JobDescription
from models.schemas.profile import ResumeRecord


class MatchRequest(BaseModel):
    resume: ResumeRecord
    job: JobDescription
    force_reprocess: bool = False


class BulkMatchRequest(BaseModel):
    resumes: list[ResumeRecord] = Field(..., max_length=500)
    job: JobDescription
    min_score: float = Field(0, ge=0, le=10)
    limit: int | None = Field(None, ge=1)
    force_reprocess: bool = False


class StatisticsRequest(BaseModel):
    job_id: str
