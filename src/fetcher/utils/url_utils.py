# src/fetcher/utils/url_utils.py
import logging
import re

logger = logging.getLogger(__name__)

# scheme, optional user[:password]@, host, optional :port, optional path
URL_PATTERN = re.compile(
    r"(ftp|http|https)://(\w+:{0,1}\w*@)?(\S+)(:[0-9]+)?(/|/([\w#!:.?+=&%@!\-/]))?"
)


class UrlUtils:
    """A collection of static methods for URL validation."""

    @staticmethod
    def is_valid_url(url: str) -> bool:
        """
        Checks a user-supplied URL against the accepted syntax
        (ftp, http or https scheme followed by a host).
        """
        if not isinstance(url, str):
            logger.debug(f"Invalid URL check: not a string ({type(url).__name__}).")
            return False
        return URL_PATTERN.search(url) is not None

