from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from grader.core.handlers.grade_handler import handle_grade
from grader.core.managers.config_manager import config_manager
from grader.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def _resolve_log_level(argv: List[str]) -> str:
    """--log-level on the command line overrides debug.level from settings.json."""
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--log-level", dest="log_level", default=None)
    known, _ = pre_parser.parse_known_args(argv)
    if known.log_level:
        config_manager.set_nested("debug.level", known.log_level.upper())
    return config_manager.get_nested("debug.level", "WARNING")


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point: grade one HTML document and print the JSON report."""
    argv = list(sys.argv[1:] if argv is None else argv)
    configure_logger(_resolve_log_level(argv))
    logger.debug("Starting html-grader with arguments: %s", argv)
    return handle_grade(argv)


if __name__ == "__main__":
    sys.exit(main())
