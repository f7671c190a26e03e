import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from models.responses import ErrorResponse
from services.exceptions import LLMServiceError, ResumeScreenerError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Resume Screener API",
    description="Resume parsing and rule-based + LLM job matching",
    version="1.0.0",
    debug=settings.debug,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(ResumeScreenerError)
async def screener_error_handler(request: Request, exc: ResumeScreenerError):
    # Provider failures are upstream errors; everything else is bad input
    status_code = 502 if isinstance(exc, LLMServiceError) else 400
    logger.warning("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(**exc.to_dict()).model_dump(),
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
