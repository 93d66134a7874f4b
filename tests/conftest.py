"""Pytest configuration and shared fixtures."""

import pytest

SAMPLE_RESUME = """Jane Doe
jane.doe@example.com | (415) 555-0100
linkedin.com/in/janedoe | github.com/janedoe

Summary
Backend engineer with eight years of experience building reliable services.

Skills: Python, Django, js, Docker
Experience
Senior Engineer - Acme Corp
2019 - Present
• Built payment APIs serving two million requests per day
• Led migration to Kubernetes
Engineer @ Globex
2015 - 2019
Maintained internal tooling for the data platform team
Education
Bachelor of Science in Computer Science, 2015, GPA: 3.8
Stanford University
Projects
Resume Parser: Heuristic resume extraction library
Supports PDF and plain text inputs
• Budget App
"""


@pytest.fixture
def sample_resume_text() -> str:
    """A small but complete resume in plain text."""
    return SAMPLE_RESUME


@pytest.fixture
def sample_job_text() -> str:
    """A job posting that overlaps partially with the sample resume."""
    return (
        "Backend engineer wanted. We build reliable payment services with "
        "Python and Django on AWS and Kubernetes."
    )


@pytest.fixture(autouse=True)
def _reset_config_singletons():
    """Keep configuration singletons and logging state from leaking between tests."""
    from resumefit.config.settings import reset_settings
    from resumefit.parsing.config import reset_parsing_config
    from resumefit.scoring.config import reset_scoring_config
    from resumefit.utils.logging import reset_logging

    yield
    reset_settings()
    reset_parsing_config()
    reset_scoring_config()
    reset_logging()
