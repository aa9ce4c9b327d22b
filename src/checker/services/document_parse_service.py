from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# html.parser ships with Python and accepts any markup without raising.
HTML_BUILDER = "html.parser"


def parse_html(markup: Union[str, bytes]) -> BeautifulSoup:
    """Builds a queryable document from raw HTML. Empty input gives an empty document."""
    return BeautifulSoup(markup or "", HTML_BUILDER)


def load_html_file(html_file: Union[str, Path]) -> BeautifulSoup:
    """
    Reads the raw bytes of a local HTML file and parses them.
    BeautifulSoup sniffs the encoding from the bytes (meta charset, BOM).
    """
    raw = Path(html_file).read_bytes()
    logger.debug("Read %d bytes from %s", len(raw), html_file)
    return parse_html(raw)
