# src/checker/services/checks_loader_service.py
import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from checker.model import ChecksFormatError, ChecksList

logger = logging.getLogger(__name__)


def load_checks(checks_file: Union[str, Path]) -> List[str]:
    """
    Reads a checks file and returns its selectors in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ChecksFormatError: If the JSON is not an array of strings.
    """
    with open(checks_file, "r", encoding="utf-8") as f:
        raw = json.load(f)

    try:
        checks = ChecksList.model_validate(raw).root
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "root"
        raise ChecksFormatError(str(checks_file), f"{first.get('msg')} (at {location})") from e

    logger.debug("Loaded %d checks from %s", len(checks), checks_file)
    return checks
