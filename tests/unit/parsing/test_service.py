"""Tests for ResumeParser."""

import json

import pytest


class TestParseText:
    """Test ResumeParser.parse_text on a complete resume."""

    def test_skills(self, sample_resume_text):
        """Vocabulary skills come first, then header-only aliases."""
        from resumefit.parsing.service import ResumeParser

        parsed = ResumeParser().parse_text(sample_resume_text)

        assert parsed.skills == ["Python", "Django", "Docker", "Kubernetes", "JavaScript"]

    def test_experience(self, sample_resume_text):
        """Both positions are parsed in document order."""
        from resumefit.parsing.service import ResumeParser

        parsed = ResumeParser().parse_text(sample_resume_text)

        first, second = parsed.experience
        assert (first.role, first.company, first.duration) == (
            "Senior Engineer",
            "Acme Corp",
            "2019 - Present",
        )
        assert first.description == [
            "Built payment APIs serving two million requests per day",
            "Led migration to Kubernetes",
        ]
        assert (second.role, second.company, second.duration) == (
            "Engineer",
            "Globex",
            "2015 - 2019",
        )
        assert second.description == ["Maintained internal tooling for the data platform team"]

    def test_education_summary_contact_projects(self, sample_resume_text):
        """Remaining entities are parsed from their sections."""
        from resumefit.parsing.service import ResumeParser

        parsed = ResumeParser().parse_text(sample_resume_text)

        [degree] = parsed.education
        assert degree.institution == "Stanford University"
        assert degree.year == "2015"
        assert degree.gpa == "3.8"
        assert parsed.summary == (
            "Backend engineer with eight years of experience building reliable services."
        )
        assert parsed.contact.email == "jane.doe@example.com"
        assert parsed.contact.phone == "(415) 555-0100"
        assert parsed.contact.linkedin == "https://linkedin.com/in/janedoe"
        assert parsed.contact.github == "https://github.com/janedoe"
        assert [p.name for p in parsed.projects] == ["Resume Parser", "Budget App"]

    def test_raw_text_is_preserved(self, sample_resume_text):
        """The source text is kept verbatim."""
        from resumefit.parsing.service import ResumeParser

        parsed = ResumeParser().parse_text(sample_resume_text)

        assert parsed.raw_text == sample_resume_text

    def test_parsing_is_deterministic(self, sample_resume_text):
        """Parsing the same text twice gives equal results."""
        from resumefit.parsing.service import ResumeParser

        parser = ResumeParser()

        assert parser.parse_text(sample_resume_text) == parser.parse_text(sample_resume_text)

    def test_empty_text(self):
        """Empty input parses to an empty resume."""
        from resumefit.parsing.service import ResumeParser

        parsed = ResumeParser().parse_text("")

        assert parsed.skills == []
        assert parsed.experience == []
        assert parsed.summary == ""
        assert parsed.contact.is_empty()

    def test_config_caps_are_applied(self, sample_resume_text):
        """Caps come from the injected ParsingConfig."""
        from resumefit.parsing.config import ParsingConfig
        from resumefit.parsing.service import ResumeParser

        config = ParsingConfig(_env_file=None, max_skills=2, max_experience_entries=1)

        parsed = ResumeParser(config).parse_text(sample_resume_text)

        assert parsed.skills == ["Python", "Django"]
        assert len(parsed.experience) == 1

    def test_line_budget_truncates_input(self, sample_resume_text, caplog):
        """max_lines drops trailing lines and logs a warning."""
        from resumefit.parsing.config import ParsingConfig
        from resumefit.parsing.service import ResumeParser

        config = ParsingConfig(_env_file=None, max_lines=3)

        with caplog.at_level("WARNING", logger="resumefit.parsing.service"):
            parsed = ResumeParser(config).parse_text(sample_resume_text)

        assert parsed.experience == []
        assert parsed.contact.email == "jane.doe@example.com"
        assert parsed.raw_text == sample_resume_text
        assert "truncated" in caplog.text

    def test_rejects_non_string_input(self):
        """Bytes are not accepted in place of text."""
        from resumefit.parsing.service import ResumeParser

        with pytest.raises(TypeError):
            ResumeParser().parse_text(b"Jane Doe")


class TestParseDocument:
    """Test ResumeParser.parse_document."""

    def test_parses_text_file(self, tmp_path, sample_resume_text):
        """Documents are read and parsed."""
        from resumefit.parsing.service import ResumeParser

        path = tmp_path / "resume.txt"
        path.write_text(sample_resume_text, encoding="utf-8")

        parsed = ResumeParser().parse_document(path)

        assert "Python" in parsed.skills

    def test_propagates_extraction_failure(self, tmp_path):
        """Unreadable documents surface ExtractionFailure."""
        from resumefit.parsing.document import ExtractionFailure
        from resumefit.parsing.service import ResumeParser

        with pytest.raises(ExtractionFailure):
            ResumeParser().parse_document(tmp_path / "missing.pdf")


class TestStats:
    """Test ResumeParser.stats."""

    def test_counts_and_flags(self, sample_resume_text):
        """Stats reflect the parsed resume."""
        from resumefit.parsing.service import ResumeParser

        parser = ResumeParser()
        stats = parser.stats(parser.parse_text(sample_resume_text))

        assert stats.skills_count == 5
        assert stats.experience_count == 2
        assert stats.education_count == 1
        assert stats.projects_count == 2
        assert stats.has_summary is True
        assert stats.has_contact is True

    def test_empty_resume(self):
        """An empty resume has zero counts and no flags."""
        from resumefit.parsing.models import ParsedResume
        from resumefit.parsing.service import ResumeParser

        stats = ResumeParser().stats(ParsedResume())

        assert stats.skills_count == 0
        assert stats.has_summary is False
        assert stats.has_contact is False


class TestLoadParsed:
    """Test ResumeParser.load_parsed."""

    def test_loads_json(self, tmp_path, sample_resume_text):
        """A stored JSON resume round-trips through load_parsed."""
        from resumefit.parsing.service import ResumeParser

        parser = ResumeParser()
        parsed = parser.parse_text(sample_resume_text)
        path = tmp_path / "parsed.json"
        path.write_text(json.dumps(parsed.to_dict()), encoding="utf-8")

        assert parser.load_parsed(path) == parsed

    def test_loads_yaml(self, tmp_path):
        """YAML files are accepted."""
        from resumefit.parsing.service import ResumeParser

        path = tmp_path / "parsed.yaml"
        path.write_text(
            "skills:\n  - Python\n  - Go\nsummary: Backend engineer\n",
            encoding="utf-8",
        )

        loaded = ResumeParser().load_parsed(path)

        assert loaded.skills == ["Python", "Go"]
        assert loaded.summary == "Backend engineer"

    def test_empty_yaml_is_empty_resume(self, tmp_path):
        """An empty YAML file loads as an empty resume."""
        from resumefit.parsing.service import ResumeParser

        path = tmp_path / "parsed.yml"
        path.write_text("", encoding="utf-8")

        assert ResumeParser().load_parsed(path).skills == []

    def test_unknown_extension_is_sniffed(self, tmp_path):
        """JSON content is detected without a .json suffix."""
        from resumefit.parsing.service import ResumeParser

        path = tmp_path / "parsed.data"
        path.write_text('{"skills": ["Rust"]}', encoding="utf-8")

        assert ResumeParser().load_parsed(path).skills == ["Rust"]

    def test_invalid_json(self, tmp_path):
        """Malformed JSON raises ValueError."""
        from resumefit.parsing.service import ResumeParser

        path = tmp_path / "parsed.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            ResumeParser().load_parsed(path)

    def test_non_mapping(self, tmp_path):
        """A top-level list is rejected."""
        from resumefit.parsing.service import ResumeParser

        path = tmp_path / "parsed.yaml"
        path.write_text("- Python\n- Go\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            ResumeParser().load_parsed(path)

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        from resumefit.parsing.service import ResumeParser

        with pytest.raises(FileNotFoundError):
            ResumeParser().load_parsed(tmp_path / "missing.json")
