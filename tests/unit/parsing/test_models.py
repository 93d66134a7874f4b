"""Tests for parsed resume models."""


class TestParsedResume:
    """Test ParsedResume serialization."""

    def test_defaults_are_empty(self):
        """A default ParsedResume has empty collections and strings."""
        from resumefit.parsing.models import ParsedResume

        resume = ParsedResume()

        assert resume.skills == []
        assert resume.experience == []
        assert resume.summary == ""
        assert resume.contact.is_empty()
        assert resume.raw_text == ""

    def test_to_dict_omits_absent_optional_fields(self):
        """None-valued fields are left out rather than emitted as null."""
        from resumefit.parsing.models import (
            ContactInfo,
            EducationEntry,
            ExperienceEntry,
            ParsedResume,
        )

        resume = ParsedResume(
            experience=[ExperienceEntry(role="Dev", company="Acme")],
            education=[EducationEntry(degree="B.S. Physics")],
            contact=ContactInfo(email="a@b.io"),
        )

        data = resume.to_dict()

        assert data["contact"] == {"email": "a@b.io"}
        assert data["experience"] == [{"role": "Dev", "company": "Acme", "description": []}]
        assert data["education"] == [{"degree": "B.S. Physics"}]

    def test_from_dict_restores_nested_models(self):
        """from_dict accepts the output of to_dict."""
        from resumefit.parsing.models import ParsedResume, ProjectEntry

        original = ParsedResume(
            skills=["Python"],
            projects=[ProjectEntry(name="Tool", description="CLI")],
            raw_text="Python",
        )

        restored = ParsedResume.from_dict(original.to_dict())

        assert restored == original
        assert isinstance(restored.projects[0], ProjectEntry)


    def test_skills_are_deduplicated_case_insensitively(self):
        """Stored skill lists lose case-variant duplicates."""
        from resumefit.parsing.models import ParsedResume

        resume = ParsedResume.from_dict({"skills": ["Python", "python", "Go", "PYTHON"]})

        assert resume.skills == ["Python", "Go"]

    def test_skills_are_capped(self):
        """Stored skill lists are truncated to the configured maximum."""
        from resumefit.parsing.models import ParsedResume

        resume = ParsedResume(skills=[f"Skill{i}" for i in range(30)])

        assert len(resume.skills) == 20
        assert resume.skills[-1] == "Skill19"


class TestContactInfo:
    """Test ContactInfo."""

    def test_is_empty(self):
        """Any populated field makes the contact non-empty."""
        from resumefit.parsing.models import ContactInfo

        assert ContactInfo().is_empty() is True
        assert ContactInfo(github="https://github.com/x").is_empty() is False


class TestResumeStats:
    """Test ResumeStats."""

    def test_to_dict(self):
        """Stats serialize every field."""
        from resumefit.parsing.models import ResumeStats

        stats = ResumeStats(skills_count=3, has_summary=True)

        assert stats.to_dict() == {
            "skills_count": 3,
            "experience_count": 0,
            "education_count": 0,
            "projects_count": 0,
            "has_summary": True,
            "has_contact": False,
        }
