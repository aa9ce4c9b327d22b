# tests/grading/test_check_controller.py
import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from checker.controllers.check_controller import CheckController, check_html_file, check_url
from checker.model import FetchError, InvalidSelectorError


@pytest.fixture
def files(tmp_path):
    html = tmp_path / "index.html"
    html.write_text("<html><body><h1>title</h1><img src='x.png'></body></html>", encoding="utf-8")
    checks = tmp_path / "checks.json"
    checks.write_text(json.dumps(["img[alt]", "h2", "h1"]), encoding="utf-8")
    return html, checks


def _mock_service(mock_service_class, html=None, error=None):
    service = MagicMock()
    service.fetch_html = AsyncMock(return_value=html, side_effect=error)
    mock_service_class.return_value.__aenter__.return_value = service
    return service


def test_grade_file_builds_report(files):
    html, checks = files
    report = CheckController(sort_checks=True).grade_file(str(html), str(checks))

    assert report.mode == "file"
    assert report.source == str(html)
    assert list(report.results) == ["h1", "h2", "img[alt]"]
    assert report.results == {"h1": True, "h2": False, "img[alt]": False}
    assert report.passed == 1
    assert report.missing == ["h2", "img[alt]"]


def test_grade_file_without_sorting(files):
    html, checks = files
    report = CheckController(sort_checks=False).grade_file(str(html), str(checks))
    assert list(report.results) == ["img[alt]", "h2", "h1"]


def test_check_html_file_returns_mapping(files):
    html, checks = files
    assert check_html_file(str(html), str(checks)) == {"h1": True, "h2": False, "img[alt]": False}


def test_grade_file_reads_non_utf8_bytes(tmp_path, files):
    _, checks = files
    html = tmp_path / "latin.html"
    html.write_bytes('<meta charset="latin-1"><h2>café</h2>'.encode("latin-1"))
    report = CheckController(sort_checks=True).grade_file(str(html), str(checks))
    assert report.results["h2"] is True


def test_grade_file_propagates_invalid_selector(tmp_path, files):
    html, _ = files
    checks = tmp_path / "bad.json"
    checks.write_text('["h1", "a[href"]', encoding="utf-8")
    with pytest.raises(InvalidSelectorError):
        CheckController().grade_file(str(html), str(checks))


@patch("checker.controllers.check_controller.HttpRequestService")
def test_grade_url_parses_fetched_body(mock_service_class, files):
    _, checks = files
    service = _mock_service(mock_service_class, html="<h2>Remote</h2><img alt='logo'>")

    controller = CheckController(sort_checks=True, config={"session": {"retry_delay": 0}})
    report = asyncio.run(controller.grade_url("http://example.com", str(checks)))

    service.fetch_html.assert_awaited_once_with("http://example.com")
    assert report.mode == "url"
    assert report.source == "http://example.com"
    assert report.results == {"h1": False, "h2": True, "img[alt]": True}
    assert mock_service_class.call_args.args[0] == {"session": {"retry_delay": 0}}


@patch("checker.controllers.check_controller.HttpRequestService")
def test_check_url_propagates_fetch_error(mock_service_class, files):
    _, checks = files
    _mock_service(mock_service_class, error=FetchError("http://example.com", "refused", 2))

    with pytest.raises(FetchError):
        asyncio.run(check_url("http://example.com", str(checks)))
