# src/checker/model.py (Check Layer)
import logging
from typing import Dict, List, Literal

from pydantic import BaseModel, Field, RootModel, StrictStr

logger = logging.getLogger(__name__)


class GraderError(Exception):
    """Base class for all errors raised while grading a document."""


class ChecksFormatError(GraderError, ValueError):
    """Raised when a checks file holds valid JSON that is not an array of strings."""

    def __init__(self, checks_file: str, detail: str):
        self.checks_file = checks_file
        self.detail = detail
        super().__init__(f"{checks_file} must contain a JSON array of selector strings: {detail}")


class InvalidSelectorError(GraderError, ValueError):
    """Raised when a check is not a valid CSS selector."""

    def __init__(self, selector: str, detail: str):
        self.selector = selector
        self.detail = detail
        super().__init__(f"Invalid selector {selector!r}: {detail}")


class FetchError(GraderError):
    """Raised when a URL could not be fetched, even after the retry."""

    def __init__(self, url: str, detail: str, attempts: int):
        self.url = url
        self.detail = detail
        self.attempts = attempts
        super().__init__(f"Could not fetch {url} after {attempts} attempt(s): {detail}")


class ChecksList(RootModel[List[StrictStr]]):
    """The contents of a checks file: an ordered list of selector strings."""


class GradeReport(BaseModel):
    source: str
    mode: Literal["file", "url"]
    results: Dict[str, bool] = Field(default_factory=dict)

    @property
    def passed(self) -> int:
        return sum(1 for present in self.results.values() if present)

    @property
    def missing(self) -> List[str]:
        return [selector for selector, present in self.results.items() if not present]
