from __future__ import annotations

import logging
from typing import Dict, Optional

from bs4 import BeautifulSoup

from checker.model import GradeReport
from checker.services.checks_loader_service import load_checks
from checker.services.document_parse_service import load_html_file, parse_html
from checker.services.selector_evaluation_service import evaluate
from fetcher.services.generate_default_user_agent_service import generate_default_user_agent
from fetcher.services.http_request_service import HttpRequestService
from grader.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)


class CheckController:
    """
    Orchestrates one grading run: load the checks, obtain the document
    (from disk or over HTTP) and evaluate every selector against it.
    """

    def __init__(self, *, sort_checks: Optional[bool] = None, config: Optional[Dict] = None) -> None:
        if sort_checks is None:
            sort_checks = bool(config_manager.get_nested("checks.sort", True))
        self.sort_checks = sort_checks
        self.config = config if config is not None else {
            "session": config_manager.get_nested("session", {})
        }

    def check_html(self, document: BeautifulSoup, checks_file: str) -> Dict[str, bool]:
        checks = load_checks(checks_file)
        return evaluate(document, checks, sort_checks=self.sort_checks)

    def grade_file(self, html_file: str, checks_file: str) -> GradeReport:
        """Grades a local HTML file."""
        logger.info("Grading file %s against %s", html_file, checks_file)
        document = load_html_file(html_file)
        results = self.check_html(document, checks_file)
        return GradeReport(source=str(html_file), mode="file", results=results)

    async def grade_url(self, url: str, checks_file: str) -> GradeReport:
        """Fetches `url` (one retry on network errors) and grades the response body."""
        logger.info("Grading URL %s against %s", url, checks_file)
        async with HttpRequestService(self.config, generate_default_user_agent()) as service:
            html = await service.fetch_html(url)
        results = self.check_html(parse_html(html), checks_file)
        return GradeReport(source=url, mode="url", results=results)


def check_html_file(html_file: str, checks_file: str) -> Dict[str, bool]:
    """Library entry point: the result mapping for a local HTML file."""
    return CheckController().grade_file(html_file, checks_file).results


async def check_url(url: str, checks_file: str) -> Dict[str, bool]:
    """Library entry point: the result mapping for a remote page."""
    report = await CheckController().grade_url(url, checks_file)
    return report.results
