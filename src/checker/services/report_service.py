import sys
from typing import Dict, Optional, TextIO

from grader.core.services.json_service import to_json


def format_report(results: Dict[str, bool]) -> str:
    """Renders the result mapping as 4-space indented JSON, keys in insertion order."""
    return to_json(results, indent=4)


def report(results: Dict[str, bool], stream: Optional[TextIO] = None) -> None:
    """Writes the formatted report plus a trailing newline to stdout (or `stream`)."""
    out = stream if stream is not None else sys.stdout
    out.write(format_report(results) + "\n")
    out.flush()
