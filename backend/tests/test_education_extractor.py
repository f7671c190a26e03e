"""Tests for education, certification and summary extraction."""

from services.education_extractor import (
    extract_certifications,
    extract_education,
    extract_summary,
    is_degree,
    parse_degree,
)


def test_extract_education(sample_resume):
    education = extract_education(sample_resume)
    assert len(education) == 1
    entry = education[0]
    assert entry.degree.startswith("Bachelor of Science in Computer Science")
    assert entry.graduation_year == 2018
    assert entry.gpa == "3.8"
    assert entry.institution == "Unknown"
    assert entry.field_of_study == "Unknown"


def test_non_degree_lines_are_skipped():
    text = "Education\nHarvard University\nMBA, 2016\nDean's list"
    education = extract_education(text)
    assert [e.degree for e in education] == ["MBA, 2016"]


def test_parse_degree_without_year_or_gpa():
    entry = parse_degree("PhD in Physics")
    assert entry.graduation_year is None
    assert entry.gpa is None


def test_is_degree():
    assert is_degree("Master of Engineering")
    assert not is_degree("Harvard University")


def test_alternate_education_header():
    text = "Academic Background\nBachelor of Arts, 2012"
    assert len(extract_education(text)) == 1


def test_certifications(sample_resume):
    certifications = extract_certifications(sample_resume)
    assert [c.name for c in certifications] == ["AWS Certified Solutions Architect"]
    assert certifications[0].issuer == "Unknown"


def test_short_certification_lines_dropped():
    text = "Licenses\nCPA\nCertified Kubernetes Administrator"
    assert [c.name for c in extract_certifications(text)] == [
        "Certified Kubernetes Administrator"
    ]


def test_summary(sample_resume):
    assert extract_summary(sample_resume) == (
        "Experienced software engineer building web applications with Python and React."
    )


def test_summary_truncated():
    text = "Objective\n" + "word " * 200
    assert len(extract_summary(text)) == 500


def test_summary_missing():
    assert extract_summary("Skills\nPython") == ""
