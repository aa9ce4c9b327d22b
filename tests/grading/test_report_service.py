# tests/grading/test_report_service.py
import io
import json

from checker.services.report_service import format_report, report


def test_format_uses_four_space_indent():
    text = format_report({"h1": True, "h2": False})
    assert text == '{\n    "h1": true,\n    "h2": false\n}'


def test_report_writes_to_stdout_with_newline(capsys):
    report({"h1": True})
    captured = capsys.readouterr()
    assert captured.out == '{\n    "h1": true\n}\n'
    assert captured.err == ""


def test_report_keeps_insertion_order():
    stream = io.StringIO()
    report({"z": False, "a": True, "m": True}, stream=stream)
    assert list(json.loads(stream.getvalue())) == ["z", "a", "m"]


def test_report_round_trip():
    results = {"h1": True, "img[alt]": False, "#nav li": True, 'a[title="café"]': False}
    assert json.loads(format_report(results)) == results


def test_non_ascii_is_not_escaped():
    assert '"a[title=\\"café\\"]"' in format_report({'a[title="café"]': True})


def test_empty_mapping():
    assert format_report({}) == "{}"
