"""Turn a free-text/JSON model response into a fully populated LLMVerdict.

Order of attempts:
1. First ``{...}`` span parsed as JSON, each field validated on its own
2. Text heuristics (score phrases, reasoning paragraph, bulleted lists)
   for whatever JSON did not provide
3. Fixed defaults (score 5, empty lists, canned narrative)

Never raises for malformed model output.
"""

import json
import logging
import math
import re
from typing import Any

from models.schemas.verdict import LLMVerdict

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 5.0
MIN_SCORE = 1.0
MAX_SCORE = 10.0
MAX_REASONING_LEN = 500
MAX_LIST_ITEMS = 5
MIN_LIST_ITEM_LEN = 5
MAX_LIST_ITEM_LEN = 199
MIN_PARAGRAPH_LEN = 50

DEFAULT_REASONING = "Analysis completed successfully."
FALLBACK_REASONING = (
    "Analysis completed but parsing encountered issues. "
    "Please review the full response."
)
FALLBACK_STRENGTHS = ["Analysis available in full response"]
FALLBACK_WEAKNESSES = ["Manual review recommended"]
FALLBACK_RECOMMENDATIONS = ["Review detailed analysis in response"]

_JSON_BLOCK_RE = re.compile(r"\{[\s\S]*\}")

_REASONING_PATTERNS = [
    re.compile(rf"{label}[:\s]+(.*?)(?=\n\n|\n[A-Z]|\Z)", re.IGNORECASE | re.DOTALL)
    for label in ("reasoning", "explanation", "analysis")
]

_SCORE_PATTERNS = [
    re.compile(r"overall\s*score[:\s]*(\d+(?:\.\d+)?)", re.IGNORECASE),
    re.compile(r"score[:\s]*(\d+(?:\.\d+)?)", re.IGNORECASE),
    re.compile(r"rate[:\s]*(\d+(?:\.\d+)?)", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?)\s*/\s*10", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?)\s*out\s*of\s*10", re.IGNORECASE),
]

_LIST_ITEM_RE = re.compile(r"^[-•*]\s|^\d+\.\s")
_LIST_MARKER_RE = re.compile(r"^[-•*\d+.\s]+")
_NEW_HEADER_RE = re.compile(r"^[A-Z][A-Za-z\s]+:")


def validate_score(value: Any) -> float | None:
    """Return the value as a float if it is a score in [1, 10], else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        score = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(score) or score < MIN_SCORE or score > MAX_SCORE:
        return None
    return score


def find_score(text: str) -> float | None:
    """First in-range score found by the score phrase patterns, in order."""
    for pattern in _SCORE_PATTERNS:
        match = pattern.search(text)
        if match:
            score = float(match.group(1))
            if MIN_SCORE <= score <= MAX_SCORE:
                return score
    return None


def extract_score(text: str) -> float:
    score = find_score(text)
    return score if score is not None else DEFAULT_SCORE


def extract_reasoning(text: str) -> str:
    """Labelled reasoning block, else the first substantial paragraph."""
    for pattern in _REASONING_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()[:MAX_REASONING_LEN]

    for paragraph in text.split("\n\n"):
        if len(paragraph) > MIN_PARAGRAPH_LEN:
            return paragraph[:MAX_REASONING_LEN]
    return DEFAULT_REASONING


def extract_list(text: str, keyword: str) -> list[str]:
    """Collect bullet items following the first line that mentions ``keyword``.

    Stops at the next "Header:" line that does not mention the keyword.
    """
    items: list[str] = []
    keyword_re = re.compile(re.escape(keyword), re.IGNORECASE)
    in_section = False

    for line in text.split("\n"):
        trimmed = line.strip()

        if keyword_re.search(trimmed):
            in_section = True
            continue
        if not in_section:
            continue

        if _NEW_HEADER_RE.match(trimmed):
            break

        if _LIST_ITEM_RE.match(trimmed):
            item = _LIST_MARKER_RE.sub("", trimmed).strip()
            if MIN_LIST_ITEM_LEN <= len(item) <= MAX_LIST_ITEM_LEN:
                items.append(item)

    return items[:MAX_LIST_ITEMS]


def extract_data_from_text(text: str) -> dict[str, Any]:
    """Heuristic extraction used when the response holds no parseable JSON."""
    return {
        "reasoning": extract_reasoning(text),
        "overallScore": extract_score(text),
        "strengths": extract_list(text, "strength"),
        "weaknesses": extract_list(text, "weakness"),
        "recommendations": extract_list(text, "recommend"),
    }


def extract_json(content: str) -> dict[str, Any] | None:
    """Parse the outermost ``{...}`` span, or None if absent or invalid."""
    match = _JSON_BLOCK_RE.search(content)
    if not match:
        return None
    try:
        data = json.loads(match.group())
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse JSON from LLM response, using text analysis: %s", e)
        return None
    return data if isinstance(data, dict) else None


def _string_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [str(item) for item in value if item is not None]


def _list_field(parsed: dict[str, Any], key: str, content: str, keyword: str) -> list[str]:
    items = _string_list(parsed.get(key))
    if items is None:
        return extract_list(content, keyword)
    return items[:MAX_LIST_ITEMS]


def _fallback_verdict(content: str, original_prompt: str) -> LLMVerdict:
    return LLMVerdict(
        prompt=original_prompt,
        response=content,
        reasoning=FALLBACK_REASONING,
        overall_score=extract_score(content),
        strengths=list(FALLBACK_STRENGTHS),
        weaknesses=list(FALLBACK_WEAKNESSES),
        recommendations=list(FALLBACK_RECOMMENDATIONS),
    )


def parse_response(content: str, original_prompt: str = "") -> LLMVerdict:
    """Build an LLMVerdict from raw model output.

    ``original_prompt`` is stored for audit only.
    """
    content = content or ""
    try:
        parsed = extract_json(content)
        structured = parsed is not None
        if parsed is None:
            parsed = extract_data_from_text(content)

        reasoning = parsed.get("reasoning")
        if not isinstance(reasoning, str) or not reasoning.strip():
            reasoning = extract_reasoning(content)

        overall = validate_score(parsed.get("overallScore"))
        if overall is None:
            overall = extract_score(content)

        verdict = LLMVerdict(
            prompt=original_prompt,
            response=content,
            reasoning=reasoning[:MAX_REASONING_LEN],
            overall_score=overall,
            skills_score=validate_score(parsed.get("skillsScore")) or DEFAULT_SCORE,
            experience_score=validate_score(parsed.get("experienceScore")) or DEFAULT_SCORE,
            education_score=validate_score(parsed.get("educationScore")) or DEFAULT_SCORE,
            strengths=_list_field(parsed, "strengths", content, "strength"),
            weaknesses=_list_field(parsed, "weaknesses", content, "weakness"),
            recommendations=_list_field(parsed, "recommendations", content, "recommend"),
            matched_skills=_string_list(parsed.get("matchedSkills")) or [],
            missing_skills=_string_list(parsed.get("missingSkills")) or [],
            experience_highlights=_string_list(parsed.get("experienceHighlights")) or [],
            risk_factors=_string_list(parsed.get("riskFactors")) or [],
        )
    except Exception:
        logger.exception("Error parsing LLM response, using fallback verdict")
        return _fallback_verdict(content, original_prompt)

    if not structured and find_score(content) is None:
        # Nothing usable at all: keep the narrative fields non-empty
        verdict = verdict.model_copy(update={
            "strengths": verdict.strengths or list(FALLBACK_STRENGTHS),
            "weaknesses": verdict.weaknesses or list(FALLBACK_WEAKNESSES),
            "recommendations": verdict.recommendations or list(FALLBACK_RECOMMENDATIONS),
        })

    return verdict
