# src/checker/services/selector_evaluation_service.py
import logging
from typing import Dict, Iterable

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from checker.model import InvalidSelectorError

logger = logging.getLogger(__name__)


def is_present(document: BeautifulSoup, selector: str) -> bool:
    """True if at least one node in the document matches the selector."""
    try:
        return document.select_one(selector) is not None
    except (SelectorSyntaxError, NotImplementedError) as e:
        # soupsieve raises NotImplementedError for pseudo-elements such as ::before
        raise InvalidSelectorError(selector, str(e)) from e


def evaluate(document: BeautifulSoup, checks: Iterable[str], sort_checks: bool = True) -> Dict[str, bool]:
    """
    Checks every selector against the document.

    Args:
        document: The parsed HTML document. It is only read, never modified.
        checks: The selectors to look for.
        sort_checks: Evaluate (and therefore report) in lexicographic order
            instead of the order given.

    Returns:
        Dict[str, bool]: selector -> presence. Repeated selectors share one key.

    Raises:
        InvalidSelectorError: On the first selector that is not valid CSS.
    """
    ordered = sorted(checks) if sort_checks else list(checks)

    out: Dict[str, bool] = {}
    for selector in ordered:
        out[selector] = is_present(document, selector)

    logger.debug("Evaluated %d selectors, %d present", len(out), sum(out.values()))
    return out
