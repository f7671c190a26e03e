"""Tests for job-entry parsing and total-experience estimation."""

from datetime import date

from services.experience_extractor import (
    calculate_total_experience,
    extract_experience,
    is_date_line,
    is_job_title_line,
    parse_dates,
    parse_job_title_line,
)


def test_extract_experience_groups_lines_into_jobs(sample_resume, now):
    jobs = extract_experience(sample_resume, now)
    assert len(jobs) == 2

    current, previous = jobs
    assert current.position == "Senior Software Engineer"
    assert current.company == "TechCorp"
    assert current.start_date == date(2021, 1, 1)
    assert current.is_current
    assert current.end_date == now.date()
    assert current.description == "Led a team of five building REST APIs in Python"

    assert previous.position == "Software Engineer"
    assert previous.company == "StartupXYZ"
    assert previous.start_date == date(2018, 1, 1)
    assert previous.end_date == date(2020, 1, 1)
    assert previous.duration == "2018 - 2020"
    assert not previous.is_current


def test_extract_experience_without_section():
    assert extract_experience("Skills\nPython, Go") == []


def test_lines_before_first_title_are_ignored(now):
    text = "Experience\nFreelance projects for local shops\nData Analyst - Shopify\n2019 - 2021"
    jobs = extract_experience(text, now)
    assert len(jobs) == 1
    assert jobs[0].description == ""


def test_parse_job_title_line_separators():
    assert parse_job_title_line("Backend Developer at Acme") == {
        "position": "Backend Developer", "company": "Acme",
    }
    assert parse_job_title_line("QA Analyst - Globex")["company"] == "Globex"
    assert parse_job_title_line("Data Engineer | Initech")["company"] == "Initech"
    assert parse_job_title_line("Lead Engineer") == {
        "position": "Lead Engineer", "company": "Unknown",
    }


def test_title_and_date_lines():
    assert is_job_title_line("Product Manager")
    assert not is_job_title_line("Built dashboards")
    assert is_date_line("March 2019 - June 2020")
    assert is_date_line("06/2019")
    assert not is_date_line("Improved latency by half")


def test_parse_dates_single_year_without_ongoing_marker(now):
    result = parse_dates("Since 2017", now)
    assert result["start_date"] == date(2017, 1, 1)
    assert "end_date" not in result


class TestTotalExperience:
    def test_explicit_claim_wins(self, now):
        text = (
            "Summary\nDeveloper with 5+ years of experience.\n\n"
            "Experience\nEngineer at Foo Corporation\n2005 - 2015\nEngineer at Bar Limited\n2016 - 2024\n"
        )
        assert calculate_total_experience(text, now=now) == 5.0

    def test_implausible_claim_means_zero(self, now):
        assert calculate_total_experience("60 years of experience", now=now) == 0.0

    def test_sums_ranges_including_present(self, now):
        text = (
            "Experience\nDeveloper at Acme Corp\n2018-2020\n"
            "Engineer at Beta Inc\n2021-present\n"
        )
        # 2 years + (2025 - 2021)
        assert calculate_total_experience(text, now=now) == 6.0

    def test_range_over_twenty_years_is_excluded(self, now):
        text = (
            "Experience\nConsultant at Old Firm Limited\n2000 - 2024\n"
            "Analyst at New Firm Limited\n2022 - 2024\n"
        )
        assert calculate_total_experience(text, now=now) == 2.0

    def test_ranges_located_in_work_history_header(self, now):
        text = (
            "Work History\nSupport Specialist at Helpdesk Co\n2015 – 2019\n"
            "Systems Consultant at Infra Ltd\n2019 – current\n"
        )
        assert calculate_total_experience(text, now=now) == 10.0

    def test_earliest_experience_header_wins(self, now):
        text = (
            "Career History\nSoftware Engineer at Alpha Systems Inc\n2016 - 2020\n"
            "Data Engineer at Beta Analytics Ltd\n2020 - 2024\n"
            "Employment\nOpen to remote roles\n"
        )
        assert calculate_total_experience(text, now=now) == 8.0

    def test_minimum_length_counts_header_line(self, now):
        # Body alone is 40 chars; with the header line it clears the minimum
        text = "Experience\nSoftware Engineer at Acme Co\n2020 - 2024"
        assert calculate_total_experience(text, now=now) == 4.0

    def test_earliest_year_fallback(self, now):
        text = (
            "Experience\nDeveloper at Acme Corporation since 2019, "
            "promoted in 2022 to senior engineer\n"
        )
        assert calculate_total_experience(text, now=now) == 6.0

    def test_single_year_without_range_is_zero(self, now):
        text = "Experience\nDeveloper at Acme Corporation, joined in 2019 as a junior\n"
        assert calculate_total_experience(text, now=now) == 0.0

    def test_short_section_means_fresh_graduate(self, now):
        assert calculate_total_experience("Experience\nIntern 2023-2024", now=now) == 0.0

    def test_no_section(self, now):
        assert calculate_total_experience("Skills\nPython", now=now) == 0.0

    def test_sample_resume(self, sample_resume, now):
        assert calculate_total_experience(sample_resume, now=now) == 6.0
