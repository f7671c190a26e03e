"""Shared test configuration, fixtures and fakes."""

from datetime import datetime

import pytest

from services.exceptions import LLMServiceError
from services.llm_client import LLMClient


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: talks to a real LLM provider (needs GEMINI_API_KEY)"
    )


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567
linkedin.com/in/johndoe

Summary
Experienced software engineer building web applications with Python and React.

Experience
Senior Software Engineer at TechCorp
Jan 2021 - Present
Led a team of five building REST APIs in Python
Software Engineer | StartupXYZ
2018 - 2020
Developed React frontend components and CI pipelines

Education
Bachelor of Science in Computer Science, State University, 2018, GPA: 3.8

Skills
Python, JavaScript, React, Docker, PostgreSQL, GraphQL

Certifications
AWS Certified Solutions Architect
"""


class FakeLLMClient(LLMClient):
    """Returns canned responses in order; an Exception instance is raised instead."""

    provider = "fake"

    def __init__(self, responses=None, default='{"overallScore": 7}'):
        self.responses = list(responses or [])
        self.default = default
        self.calls: list[tuple[str, str]] = []

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        response = self.responses.pop(0) if self.responses else self.default
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def now() -> datetime:
    """Fixed reference date so year arithmetic is deterministic."""
    return datetime(2025, 6, 1)


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def fake_llm():
    def _make(responses=None, default='{"overallScore": 7}') -> FakeLLMClient:
        return FakeLLMClient(responses, default)
    return _make


@pytest.fixture
def llm_error() -> LLMServiceError:
    return LLMServiceError("LLM analysis failed: connection reset", provider="fake")
