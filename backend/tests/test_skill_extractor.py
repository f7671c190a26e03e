"""Tests for taxonomy and skills-section skill extraction."""

import pytest

from services.section_parser import normalize_text
from services.skill_extractor import (
    categorize_skill,
    estimate_proficiency,
    extract_skills,
    extract_taxonomy_skills,
    get_skill_context,
    parse_skill_section,
)
from services.taxonomy import SKILL_CATEGORIES

TAXONOMY_ENTRIES = [
    (category, skill)
    for category, skills in SKILL_CATEGORIES.items()
    for skill in skills
]


@pytest.mark.parametrize("category,skill", TAXONOMY_ENTRIES)
def test_every_taxonomy_entry_is_found_once(category, skill):
    skills = extract_skills(normalize_text(f"I know {skill} well"))
    assert len(skills) == 1
    assert skills[0].name.lower() == skill
    assert skills[0].category == category


def test_java_not_in_javascript():
    names = [s.name.lower() for s in extract_taxonomy_skills("proficient in javascript and typescript")]
    assert "javascript" in names
    assert "typescript" in names
    assert "java" not in names


def test_short_skill_needs_word_boundary():
    names = [s.name.lower() for s in extract_taxonomy_skills("good knowledge of algorithms")]
    assert "go" not in names
    assert "git" not in names


def test_punctuated_skills_match():
    names = [s.name.lower() for s in extract_taxonomy_skills("c++, c# and .net services")]
    assert {"c++", "c#", ".net"} <= set(names)


def test_names_capitalize_first_letter_only():
    skills = extract_taxonomy_skills("built apis with node.js and postgresql")
    assert [s.name for s in skills] == ["Node.js", "Postgresql"]


def test_duplicate_casings_collapse_to_one_skill():
    text = "JavaScript developer\nSkills: javascript, JAVASCRIPT"
    skills = extract_skills(normalize_text(text), text)
    assert [s.name.lower() for s in skills].count("javascript") == 1


def test_section_pass_adds_unknown_skills():
    text = "Summary\nBackend work\n\nSkills\n- Python\n- GraphQL; Apollo"
    skills = extract_skills(normalize_text(text), text)
    by_name = {s.name: s for s in skills}
    assert "Python" in by_name
    assert by_name["GraphQL"].category == "other"
    assert by_name["GraphQL"].proficiency_level == "intermediate"


def test_parse_skill_section_drops_tiny_and_huge_items():
    section = "R, Python, " + "x" * 60
    assert [s.name for s in parse_skill_section(section)] == ["Python"]


def test_no_skills():
    assert extract_skills("") == []


class TestProficiency:
    def test_expert_cue(self):
        assert estimate_proficiency("expert in python and sql", "python") == "expert"

    def test_advanced_cue(self):
        assert estimate_proficiency("proficient with django", "django") == "advanced"

    def test_intermediate_cue(self):
        assert estimate_proficiency("working knowledge of rust", "rust") == "intermediate"

    def test_no_cue_is_beginner(self):
        assert estimate_proficiency("used docker once", "docker") == "beginner"

    def test_cue_outside_window_is_ignored(self):
        text = "expert " + "a" * 60 + " docker"
        assert estimate_proficiency(text, "docker") == "beginner"

    def test_context_joins_every_mention(self):
        context = get_skill_context("python here\nand python there", "python")
        assert context.count("python") == 2


class TestCategorize:
    def test_technical_by_containment(self):
        assert categorize_skill("React Native") == "technical"

    def test_soft(self):
        assert categorize_skill("Team Leadership") == "soft"

    def test_domain(self):
        assert categorize_skill("Applied Machine Learning") == "domain"

    def test_unknown(self):
        assert categorize_skill("Public speaking") == "other"
