"""Resume/job matching: rule-based scoring + one LLM verdict per pair.

Bulk matching runs sequentially with a fixed delay between LLM calls to
stay under provider rate limits. A failure on one resume is recorded and
the batch carries on.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime

from config import settings
from models.schemas.job import JobDescription, JobSkill
from models.schemas.match_result import (
    BulkMatchReport,
    MatchError,
    MatchResult,
    MatchStatistics,
)
from models.schemas.profile import ResumeRecord, Skill
from models.schemas.scoring import DetailedScoring
from models.schemas.verdict import LLMVerdict
from services import prompt_builder
from services.exceptions import LLMServiceError
from services.llm_client import LLMClient
from services.llm_response_parser import parse_response
from services.match_policy import determine_match_status, should_shortlist
from services.scoring_engine import calculate_detailed_scoring

logger = logging.getLogger(__name__)

SKILL_GAP_UNAVAILABLE = "Skill gap analysis not available at this time."


class MatchStore(ABC):
    """Where match results live; one record per (resume, job) pair."""

    @abstractmethod
    def get(self, resume_id: str, job_id: str) -> MatchResult | None:
        """Return the stored match for the pair, if any."""

    @abstractmethod
    def save(self, match: MatchResult) -> None:
        """Insert the match, replacing any previous record for the same pair."""

    @abstractmethod
    def list_for_job(self, job_id: str) -> list[MatchResult]:
        """All stored matches for a job."""


class InMemoryMatchStore(MatchStore):
    def __init__(self) -> None:
        self._matches: dict[tuple[str, str], MatchResult] = {}

    def get(self, resume_id: str, job_id: str) -> MatchResult | None:
        return self._matches.get((resume_id, job_id))

    def save(self, match: MatchResult) -> None:
        self._matches[(match.resume_id, match.job_id)] = match

    def list_for_job(self, job_id: str) -> list[MatchResult]:
        return [m for (_, jid), m in self._matches.items() if jid == job_id]

    def clear(self) -> None:
        self._matches.clear()


async def analyze_with_llm(
    resume: ResumeRecord, job: JobDescription, llm: LLMClient
) -> LLMVerdict:
    """One LLM call for the pair; the response always parses into a verdict.

    Transport/provider failures propagate as LLMServiceError.
    """
    prompt = prompt_builder.build_comparison_prompt(resume, job)
    content = await llm.generate(prompt_builder.SYSTEM_PROMPT, prompt)
    return parse_response(content, prompt)


def score_resume(resume: ResumeRecord, job: JobDescription) -> DetailedScoring:
    return calculate_detailed_scoring(resume.extracted_data, job.requirements)


def build_match_result(
    resume: ResumeRecord, job: JobDescription, verdict: LLMVerdict
) -> MatchResult:
    """Combine the verdict with rule-based scores and the decision policy."""
    status = determine_match_status(verdict.overall_score)
    return MatchResult(
        job_id=job.id,
        resume_id=resume.id,
        overall_score=verdict.overall_score,
        detailed_scoring=score_resume(resume, job),
        llm_analysis=verdict,
        match_status=status,
        is_shortlisted=should_shortlist(verdict.overall_score, status),
        matched_at=datetime.now(),
    )


async def find_or_create_match(
    resume: ResumeRecord,
    job: JobDescription,
    llm: LLMClient,
    store: MatchStore | None = None,
    force_reprocess: bool = False,
) -> tuple[MatchResult, bool]:
    """Match a single resume with a job, returning ``(match, is_existing)``.

    An existing stored match is returned untouched unless
    ``force_reprocess`` is set, in which case it is replaced.
    """
    if store is not None and not force_reprocess:
        existing = store.get(resume.id, job.id)
        if existing is not None:
            logger.info("Match already exists for resume %s / job %s", resume.id, job.id)
            return existing, True

    verdict = await analyze_with_llm(resume, job, llm)
    match = build_match_result(resume, job, verdict)
    if store is not None:
        store.save(match)

    logger.info(
        "Matched resume %s with job %s: %.1f (%s)",
        resume.id, job.id, match.overall_score, match.match_status,
    )
    return match, False


async def match_resume_with_job(
    resume: ResumeRecord,
    job: JobDescription,
    llm: LLMClient,
    store: MatchStore | None = None,
    force_reprocess: bool = False,
) -> MatchResult:
    """Match a single resume with a job; see :func:`find_or_create_match`."""
    match, _ = await find_or_create_match(resume, job, llm, store, force_reprocess)
    return match


async def match_all_resumes_with_job(
    resumes: list[ResumeRecord],
    job: JobDescription,
    llm: LLMClient,
    store: MatchStore | None = None,
    min_score: float = 0,
    limit: int | None = None,
    force_reprocess: bool = False,
    delay_seconds: float | None = None,
) -> BulkMatchReport:
    """Match every resume (up to ``limit``) against one job, one at a time.

    Existing matches are reused unless ``force_reprocess``. Verdicts below
    ``min_score`` count as processed but produce no match. Any per-resume
    exception is recorded in ``errors`` and the loop continues.
    """
    limit = settings.bulk_match_limit if limit is None else limit
    delay = settings.bulk_match_delay_seconds if delay_seconds is None else delay_seconds

    matches: list[MatchResult] = []
    errors: list[MatchError] = []
    processed_count = 0
    llm_calls = 0

    for resume in resumes[:limit]:
        try:
            existing = store.get(resume.id, job.id) if store is not None else None
            if existing is not None and not force_reprocess:
                if existing.overall_score >= min_score:
                    matches.append(existing)
                continue

            # Throttle: fixed pause between consecutive LLM calls
            if llm_calls and delay > 0:
                await asyncio.sleep(delay)
            llm_calls += 1

            verdict = await analyze_with_llm(resume, job, llm)
            if verdict.overall_score < min_score:
                processed_count += 1
                continue

            match = build_match_result(resume, job, verdict)
            if store is not None:
                store.save(match)
            matches.append(match)
            processed_count += 1

        except Exception as e:
            logger.warning("Error processing resume %s: %s", resume.id, e)
            errors.append(MatchError(
                resume_id=resume.id,
                candidate_name=resume.candidate_name,
                error=str(e),
            ))

    matches.sort(key=lambda m: m.overall_score, reverse=True)
    logger.info(
        "Bulk matching for job %s: %d processed, %d matches, %d errors",
        job.id, processed_count, len(matches), len(errors),
    )

    return BulkMatchReport(
        job_id=job.id,
        job_title=job.title,
        matches=matches,
        total_resumes=len(resumes),
        processed_count=processed_count,
        matches_found=len(matches),
        error_count=len(errors),
        errors=errors,
    )


async def analyze_skill_gaps(
    candidate_skills: list[Skill], required_skills: list[JobSkill], llm: LLMClient
) -> str:
    """Free-text skill-gap analysis; a canned message if the LLM is unavailable."""
    prompt = prompt_builder.build_skill_gap_prompt(candidate_skills, required_skills)
    try:
        return await llm.generate(prompt_builder.SKILL_GAP_SYSTEM_PROMPT, prompt)
    except LLMServiceError as e:
        logger.error("Skill gap analysis error: %s", e)
        return SKILL_GAP_UNAVAILABLE


def _distribution_bucket(score: float) -> str:
    # Coarser buckets than determine_match_status, kept for reporting
    if score >= 8:
        return "excellent"
    if score >= 6:
        return "good"
    if score >= 4:
        return "average"
    return "poor"


def compute_match_statistics(matches: list[MatchResult]) -> MatchStatistics:
    """Aggregate totals, average score, shortlist rate and score distribution."""
    distribution = {"excellent": 0, "good": 0, "average": 0, "poor": 0}
    if not matches:
        return MatchStatistics(score_distribution=distribution)

    for match in matches:
        distribution[_distribution_bucket(match.overall_score)] += 1

    total = len(matches)
    shortlisted = sum(1 for m in matches if m.is_shortlisted)
    average = sum(m.overall_score for m in matches) / total

    return MatchStatistics(
        total_matches=total,
        average_score=round(average, 2),
        shortlisted_count=shortlisted,
        shortlist_rate=round(shortlisted / total * 100),
        score_distribution=distribution,
    )
