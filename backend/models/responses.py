from pydantic import BaseModel

from models.schemas.match_result import MatchResult


class HealthResponse(BaseModel):
    status: str = "ok"
    llm_configured: bool = False


class MatchResponse(BaseModel):
    match: MatchResult
    is_existing: bool = False


class ErrorResponse(BaseModel):
    error_type: str
    error_code: str
    message: str
    details: dict = {}
