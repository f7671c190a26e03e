"""Job-entry parsing and total-years-of-experience estimation."""

import logging
import re
from datetime import date, datetime

from models.schemas.profile import ExperienceEntry
from services.section_parser import extract_sections, find_first_section
from services.taxonomy import (
    EXPERIENCE_HEADERS,
    EXPERIENCE_YEARS_HEADERS,
    MONTH_NAMES,
    ROLE_INDICATORS,
)

logger = logging.getLogger(__name__)

MAX_TOTAL_YEARS = 50
MAX_YEARS_PER_ROLE = 20
MIN_EXPERIENCE_SECTION_LEN = 50
MIN_DESCRIPTION_LINE_LEN = 10

# "Senior Engineer at Acme", "Senior Engineer - Acme", "Senior Engineer | Acme"
_TITLE_SPLIT_RE = re.compile(r"\sat\s|\s-\s|\s\|\s", re.IGNORECASE)
_DATE_LINE_RE = re.compile(
    rf"\b(?:{'|'.join(MONTH_NAMES)}|\d{{1,2}}/\d{{1,4}}|\d{{4}})\b", re.IGNORECASE
)
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
_ONGOING_RE = re.compile(r"present|current", re.IGNORECASE)

# "5+ years of experience", "3 years exp"
EXP_YEARS_RE = re.compile(
    r"(\d+)\+?\s*years?\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE
)
# "2018 - 2020", "2021 – present"
DATE_RANGE_RE = re.compile(
    r"\b(20\d{2})\s*[-–—]\s*(20\d{2}|present|current)", re.IGNORECASE
)
_RECENT_YEAR_RE = re.compile(r"\b20\d{2}\b")


def is_job_title_line(line: str) -> bool:
    lower = line.lower()
    return any(indicator in lower for indicator in ROLE_INDICATORS)


def parse_job_title_line(line: str) -> dict:
    """Split a title line into position and company on the first separator."""
    parts = _TITLE_SPLIT_RE.split(line)
    if len(parts) >= 2:
        return {"position": parts[0].strip(), "company": parts[1].strip()}
    return {"position": line.strip(), "company": "Unknown"}


def is_date_line(line: str) -> bool:
    return bool(_DATE_LINE_RE.search(line))


def parse_dates(line: str, now: datetime | None = None) -> dict:
    """Pull start/end dates out of a date line. The raw line is kept as duration."""
    now = now or datetime.now()
    result: dict = {"duration": line.strip()}

    years = _YEAR_RE.findall(line)
    if len(years) >= 2:
        result["start_date"] = date(int(years[0]), 1, 1)
        result["end_date"] = date(int(years[1]), 1, 1)
    elif len(years) == 1:
        result["start_date"] = date(int(years[0]), 1, 1)
        if _ONGOING_RE.search(line):
            result["is_current"] = True
            result["end_date"] = now.date()

    return result


def parse_experience_section(section: str, now: datetime | None = None) -> list[ExperienceEntry]:
    """Classify each line as title, date or description and group into jobs."""
    jobs: list[ExperienceEntry] = []
    current: dict | None = None

    for line in section.split("\n"):
        line = line.strip()
        if not line:
            continue

        if is_job_title_line(line):
            if current:
                jobs.append(ExperienceEntry(**current))
            current = parse_job_title_line(line)
        elif current is not None and is_date_line(line):
            current.update(parse_dates(line, now))
        elif current is not None and len(line) > MIN_DESCRIPTION_LINE_LEN:
            current["description"] = " ".join(
                part for part in (current.get("description", ""), line) if part
            )

    if current:
        jobs.append(ExperienceEntry(**current))

    return jobs


def extract_experience(text: str, now: datetime | None = None) -> list[ExperienceEntry]:
    """Parse job entries from every experience section in the text."""
    jobs: list[ExperienceEntry] = []
    for section in extract_sections(text, EXPERIENCE_HEADERS):
        jobs.extend(parse_experience_section(section, now))
    logger.debug("Extracted %d experience entries", len(jobs))
    return jobs


def _explicit_years(text: str) -> int | None:
    """Largest "N years of experience" claim, or None if there is none."""
    claims = [int(m.group(1)) for m in EXP_YEARS_RE.finditer(text)]
    return max(claims) if claims else None


def calculate_total_experience(
    text: str,
    section_source: str | None = None,
    now: datetime | None = None,
) -> float:
    """Estimate total years of experience.

    First applicable strategy wins:
    1. Explicit claims anywhere in ``text`` ("5+ years of experience").
       Claims over 50 are unreliable and yield 0.
    2. Sum of YYYY-YYYY/present ranges inside the experience section,
       each range accepted only if 0-20 years, total capped at 50.
    3. Current year minus the earliest bare 20xx year in that section,
       when at least two years are present.

    ``section_source`` is the text the experience section is located in
    (defaults to ``text``); the earliest header matching any synonym opens
    it. A missing or very short section means no experience.
    """
    now = now or datetime.now()

    explicit = _explicit_years(text)
    if explicit is not None:
        if explicit > MAX_TOTAL_YEARS:
            logger.debug("Ignoring implausible experience claim: %d years", explicit)
            return 0.0
        return float(explicit)

    found = find_first_section(
        section_source if section_source is not None else text,
        EXPERIENCE_YEARS_HEADERS,
    )
    block, section = found if found else ("", "")
    # Length is measured with the header line included
    if len(block) < MIN_EXPERIENCE_SECTION_LEN:
        # No usable experience section, assume fresh graduate
        return 0.0

    ranges = list(DATE_RANGE_RE.finditer(section))
    if ranges:
        total = 0
        for match in ranges:
            start = int(match.group(1))
            end_token = match.group(2)
            end = now.year if _ONGOING_RE.fullmatch(end_token) else int(end_token)
            duration = end - start
            if 0 <= duration <= MAX_YEARS_PER_ROLE:
                total += duration
        return float(min(total, MAX_TOTAL_YEARS))

    years = [int(y) for y in _RECENT_YEAR_RE.findall(section)]
    if len(years) >= 2:
        calculated = now.year - min(years)
        if 0 <= calculated <= MAX_TOTAL_YEARS:
            return float(calculated)

    return 0.0
