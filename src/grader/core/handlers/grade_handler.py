# src/grader/core/handlers/grade_handler.py
import argparse
import asyncio
import logging
import os
from typing import List, Optional

from checker.controllers.check_controller import CheckController
from checker.model import GraderError, GradeReport
from checker.services.report_service import report
from fetcher.utils.url_utils import UrlUtils

logger = logging.getLogger(__name__)

CHECKSFILE_DEFAULT = "checks.json"
HTMLFILE_DEFAULT = "index.html"
URL_DEFAULT = "http://google.com"

EXIT_OK = 0
EXIT_INVALID_ARGS = 1
EXIT_GRADING_FAILED = 2

# --- HELP TEXT ---

grade_help_text = f"""
  html-grader [-c <check_file>] [-f <html_file> | -u [<url>]] [--log-level <level>]

  -c, --checks <check_file>   Path to a JSON array of CSS selectors (default: {CHECKSFILE_DEFAULT})
  -f, --file <html_file>      Local HTML file to grade (default: {HTMLFILE_DEFAULT})
  -u, --url [<url>]           Grade a remote page instead of a file (default URL: {URL_DEFAULT})
  --log-level <level>         Override debug.level from settings.json

  Prints a JSON object mapping every selector to true (present) or false (absent).
""".strip()


class ArgumentValidationError(GraderError):
    """A user-supplied path or URL that cannot be used."""


# --- VALIDATORS ---

def assert_file_exists(infile: str) -> str:
    instr = str(infile)
    if not os.path.exists(instr):
        raise ArgumentValidationError(f"{instr} does not exist. Exiting.")
    return instr


def assert_url_valid(in_url: str) -> str:
    if not UrlUtils.is_valid_url(in_url):
        raise ArgumentValidationError(f"{in_url} is not a valid URL. Exiting.")
    return in_url


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="html-grader", description="Grade HTML for required selectors.",
                                     add_help=False)
    parser.add_argument("-c", "--checks", default=CHECKSFILE_DEFAULT)
    parser.add_argument("-f", "--file", default=HTMLFILE_DEFAULT)
    # None when absent: URL mode is chosen only if the flag is on the command line.
    parser.add_argument("-u", "--url", nargs="?", const=URL_DEFAULT, default=None)
    parser.add_argument("--log-level", dest="log_level", default=None)
    return parser


# --- HANDLERS ---

def _run_grade(args: argparse.Namespace) -> GradeReport:
    controller = CheckController()
    if args.url is not None:
        return asyncio.run(controller.grade_url(args.url, args.checks))
    return controller.grade_file(args.file, args.checks)


def _validate(args: argparse.Namespace) -> None:
    assert_file_exists(args.checks)
    if args.url is not None:
        assert_url_valid(args.url)
    else:
        assert_file_exists(args.file)


def handle_grade_args(args: argparse.Namespace) -> int:
    """Validates already parsed arguments, grades the document and prints the report."""
    try:
        _validate(args)
    except ArgumentValidationError as e:
        print(e)
        return EXIT_INVALID_ARGS

    try:
        grade_report = _run_grade(args)
    except (GraderError, ValueError, OSError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError, OSError unreadable paths
        logger.error(f"Grading failed: {e}", exc_info=logger.isEnabledFor(logging.DEBUG))
        print(f"❌ Grading failed: {e}")
        return EXIT_GRADING_FAILED

    logger.info(
        "%s: %d of %d checks present", grade_report.source, grade_report.passed, len(grade_report.results)
    )
    if grade_report.missing:
        logger.info("Missing selectors: %s", ", ".join(grade_report.missing))
    report(grade_report.results)
    return EXIT_OK


def handle_grade(args: List[str], _stdin: Optional[str] = None) -> int:
    """
    Main entry point for a grading run.
    Parses the command line and dispatches to the file or URL flow.
    """
    if args and args[0] in ["help", "-h", "--help"]:
        print(grade_help_text)
        return EXIT_OK

    try:
        parsed_args = build_parser().parse_args(args)
    except SystemExit:
        # Argparse calls sys.exit() on error; show our help instead
        print(grade_help_text)
        return EXIT_INVALID_ARGS

    return handle_grade_args(parsed_args)
