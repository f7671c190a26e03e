"""Taxonomy + skills-section skill extraction with proficiency estimation.

Two passes, unioned and deduplicated by lowercase name (first wins):
1. Taxonomy pass: every known skill literal searched in the normalized text
2. Section pass: comma/bullet separated items under a "Skills" header
"""

import logging
import re

from models.schemas.profile import Skill
from services.section_parser import extract_sections
from services.taxonomy import (
    PROFICIENCY_CUES,
    PROFICIENCY_WINDOW,
    SKILL_CATEGORIES,
    SKILLS_HEADERS,
)

logger = logging.getLogger(__name__)

_SECTION_ITEM_SPLIT_RE = re.compile(r"[,;•\n]")
_LEADING_BULLET_RE = re.compile(r"^[-•]\s*")
MIN_SECTION_SKILL_LEN = 2
MAX_SECTION_SKILL_LEN = 49


def _skill_pattern(skill: str) -> re.Pattern:
    """Word-boundary pattern for a skill literal.

    Uses alphanumeric lookarounds instead of ``\\b`` so literals that start
    or end with punctuation (c++, c#, .net) still match.
    e.g. "java" must NOT match inside "javascript"
    """
    escaped = re.escape(skill)
    return re.compile(rf"(?<![a-z0-9]){escaped}(?![a-z0-9])", re.IGNORECASE)


_TAXONOMY_COMPILED: list[tuple[str, str, re.Pattern]] = [
    (category, skill, _skill_pattern(skill))
    for category, skills in SKILL_CATEGORIES.items()
    for skill in skills
]


def _capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def get_skill_context(text: str, skill: str) -> str:
    """Concatenate the +/-50 char windows around every mention of a skill."""
    escaped = re.escape(skill)
    window = PROFICIENCY_WINDOW
    pattern = re.compile(
        rf".{{0,{window}}}(?<![a-z0-9]){escaped}(?![a-z0-9]).{{0,{window}}}",
        re.IGNORECASE,
    )
    return " ".join(pattern.findall(text)).lower()


def estimate_proficiency(text: str, skill: str) -> str:
    """Estimate proficiency from cue words near the skill mention."""
    context = get_skill_context(text, skill)
    for level, cues in PROFICIENCY_CUES:
        if any(cue in context for cue in cues):
            return level
    return "beginner"


def categorize_skill(skill: str) -> str:
    """Bucket a free-text skill by substring containment against the taxonomy."""
    lower_skill = skill.lower()
    for category, skills in SKILL_CATEGORIES.items():
        if any(s in lower_skill or lower_skill in s for s in skills):
            return category
    return "other"


def extract_taxonomy_skills(text: str) -> list[Skill]:
    """Find every taxonomy skill mentioned in the (normalized) text."""
    found: list[Skill] = []
    for category, skill, pattern in _TAXONOMY_COMPILED:
        if pattern.search(text):
            found.append(Skill(
                name=_capitalize_first(skill),
                category=category,
                proficiency_level=estimate_proficiency(text, skill),
            ))
    return found


def parse_skill_section(section: str) -> list[Skill]:
    """Split a skills-section body into individual skill entries."""
    skills: list[Skill] = []
    for item in _SECTION_ITEM_SPLIT_RE.split(section):
        name = _LEADING_BULLET_RE.sub("", item.strip())
        if MIN_SECTION_SKILL_LEN <= len(name) <= MAX_SECTION_SKILL_LEN:
            skills.append(Skill(
                name=_capitalize_first(name),
                category=categorize_skill(name),
                proficiency_level="intermediate",
            ))
    return skills


def extract_skills(normalized_text: str, original_text: str | None = None) -> list[Skill]:
    """Extract skills from a resume.

    The taxonomy pass runs over ``normalized_text``; skills sections are
    located in ``original_text`` (defaults to the normalized text).
    Returns skills unique by case-insensitive name, in discovery order.
    """
    skills: list[Skill] = []
    seen: set[str] = set()

    def _add(skill: Skill) -> None:
        key = skill.name.lower()
        if key not in seen:
            seen.add(key)
            skills.append(skill)

    for skill in extract_taxonomy_skills(normalized_text):
        _add(skill)

    source = original_text if original_text is not None else normalized_text
    for section in extract_sections(source, SKILLS_HEADERS):
        for skill in parse_skill_section(section):
            _add(skill)

    logger.debug("Extracted %d skills", len(skills))
    return skills
