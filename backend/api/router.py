from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_llm, get_match_store
from config import settings
from models.requests import BulkMatchRequest, MatchRequest, StatisticsRequest
from models.responses import HealthResponse, MatchResponse
from models.schemas.match_result import BulkMatchReport, MatchStatistics
from models.schemas.profile import ParsedResume
from services import matcher, resume_parser
from services.file_parser import file_type_from_name
from services.llm_client import LLMClient
from services.matcher import MatchStore

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", llm_configured=bool(settings.gemini_api_key))


@router.post("/resumes/parse", response_model=ParsedResume)
@limiter.limit("30/minute")
async def parse_resume(request: Request, resume_file: UploadFile = File(...)):
    file_name = resume_file.filename or ""
    file_type = file_type_from_name(file_name)

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    # UnsupportedFileTypeError / ResumeParsingError are mapped to 400 in main
    return resume_parser.parse_resume(content, file_name, file_type)


@router.post("/match", response_model=MatchResponse)
@limiter.limit("10/minute")
async def match(
    request: Request,
    body: MatchRequest,
    llm: LLMClient = Depends(get_llm),
    store: MatchStore = Depends(get_match_store),
):
    result, is_existing = await matcher.find_or_create_match(
        body.resume, body.job, llm, store=store, force_reprocess=body.force_reprocess
    )
    return MatchResponse(match=result, is_existing=is_existing)


@router.post("/match/bulk", response_model=BulkMatchReport)
@limiter.limit("5/minute")
async def match_bulk(
    request: Request,
    body: BulkMatchRequest,
    llm: LLMClient = Depends(get_llm),
    store: MatchStore = Depends(get_match_store),
):
    return await matcher.match_all_resumes_with_job(
        body.resumes,
        body.job,
        llm,
        store=store,
        min_score=body.min_score,
        limit=body.limit,
        force_reprocess=body.force_reprocess,
    )


@router.post("/match/statistics", response_model=MatchStatistics)
async def match_statistics(
    body: StatisticsRequest,
    store: MatchStore = Depends(get_match_store),
):
    return matcher.compute_match_statistics(store.list_for_job(body.job_id))
