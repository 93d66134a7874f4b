"""Main entry point for resumefit."""

import argparse
import json
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from resumefit import __version__
from resumefit.config.settings import Settings
from resumefit.parsing.document import ExtractionFailure, extract_text
from resumefit.parsing.models import ParsedResume
from resumefit.parsing.service import ResumeParser
from resumefit.scoring.models import JobPosting
from resumefit.utils.logging import configure_logging, get_logger

_STRUCTURED_SUFFIXES = {".json", ".yaml", ".yml"}


def _write_json(payload: object, out: Path | None) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        return str(value)

    rendered = json.dumps(payload, indent=2, default=_default)
    if out is None:
        print(rendered)
    else:
        out.write_text(rendered + "\n", encoding="utf-8")
        print(f"Wrote: {out}")


def _load_resume(parser: ResumeParser, path: Path, parsed: bool) -> ParsedResume:
    if parsed:
        return parser.load_parsed(path)
    return parser.parse_document(path)


def _load_job(path: Path) -> JobPosting:
    """Load a job posting from JSON/YAML fields or from plain text."""
    if path.suffix.lower() in _STRUCTURED_SUFFIXES:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid job posting file: {path}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Job posting must be a mapping/dict: {path}")
        return JobPosting.model_validate(data)
    return JobPosting(title=path.stem, description=extract_text(path))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="resumefit",
        description="resumefit: parse resumes and score them against job postings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m resumefit parse resume.pdf
  python -m resumefit match resume.pdf job.txt
  python -m resumefit rank --parsed parsed.json jobs/*.yaml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    resume_options = argparse.ArgumentParser(add_help=False)
    resume_options.add_argument(
        "resume",
        type=Path,
        help="Resume document (.pdf/.txt), or a stored parsed resume with --parsed",
    )
    resume_options.add_argument(
        "--parsed",
        action="store_true",
        help="Treat the resume argument as a stored ParsedResume (JSON/YAML)",
    )
    resume_options.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write JSON output to this file instead of stdout",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    subparsers.add_parser(
        "parse",
        parents=[resume_options],
        help="Parse a resume into structured JSON",
    )
    subparsers.add_parser(
        "stats",
        parents=[resume_options],
        help="Show counts for a parsed resume",
    )

    match_parser = subparsers.add_parser(
        "match",
        parents=[resume_options],
        help="Score a resume against one job posting",
    )
    match_parser.add_argument("job", type=Path, help="Job posting (.txt or JSON/YAML)")

    suggest_parser = subparsers.add_parser(
        "suggest",
        parents=[resume_options],
        help="Suggest resume improvements for one job posting",
    )
    suggest_parser.add_argument("job", type=Path, help="Job posting (.txt or JSON/YAML)")

    rank_parser = subparsers.add_parser(
        "rank",
        parents=[resume_options],
        help="Rank several job postings by match score",
    )
    rank_parser.add_argument(
        "jobs", type=Path, nargs="+", help="Job postings (.txt or JSON/YAML)"
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    configure_logging(level=parsed.log_level or settings.log_level)
    logger = get_logger("cli")

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"resumefit v{__version__} running '{parsed.mode}'")
    resume_parser = ResumeParser()

    try:
        resume = _load_resume(resume_parser, parsed.resume, parsed.parsed)

        if parsed.mode == "parse":
            _write_json(resume.to_dict(), parsed.out)
            return 0

        if parsed.mode == "stats":
            _write_json(resume_parser.stats(resume).to_dict(), parsed.out)
            return 0

        from resumefit.scoring.service import MatchScorer
        from resumefit.scoring.suggestions import SuggestionEngine

        if parsed.mode == "match":
            job = _load_job(parsed.job)
            result = MatchScorer().match(resume, job.text)
            _write_json(result.to_dict(), parsed.out)
            return 0

        if parsed.mode == "suggest":
            job = _load_job(parsed.job)
            suggestions = SuggestionEngine().suggest(resume, job.text)
            _write_json([s.to_dict() for s in suggestions], parsed.out)
            return 0

        if parsed.mode == "rank":
            postings = [_load_job(path) for path in parsed.jobs]
            ranked = MatchScorer().rank(resume, postings)
            payload = [
                {**item.to_dict(), "path": str(parsed.jobs[item.index])}
                for item in ranked
            ]
            _write_json(payload, parsed.out)
            return 0
    except (ExtractionFailure, FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
