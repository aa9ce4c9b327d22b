# src/fetcher/services/http_request_service.py
import asyncio
import logging
import time
from typing import Dict, Optional

import aiohttp

from checker.model import FetchError

logger = logging.getLogger(__name__)

DEFAULT_RETRY_DELAY = 5.0


class HttpRequestService:
    """
    Fetches HTML pages over HTTP(S).
    Manages the aiohttp session and retries a failed request exactly once
    after a fixed delay.
    """

    def __init__(self, config: Dict, user_agent: str):
        self.config = config
        self.user_agent = user_agent

        session_config = config.get('session', {})
        self.timeout = float(session_config.get('time_out', 30))
        self.max_redirects = int(session_config.get('max_redirects', 10))
        self.retry_delay = float(session_config.get('retry_delay', DEFAULT_RETRY_DELAY))

        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self):
        if not self.session or self.session.closed:
            timeout_obj = aiohttp.ClientTimeout(total=self.timeout)
            default_headers = {
                'Accept-Encoding': 'gzip, deflate',
                'User-Agent': self.user_agent
            }
            self.session = aiohttp.ClientSession(
                timeout=timeout_obj, headers=default_headers
            )
            logger.debug("HttpRequestService: Session initialized.")

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
            logger.debug("HttpRequestService: Session closed.")

    async def perform_request(self, url: str) -> dict:
        """
        Sends a single GET request.
        Transport errors are returned as status -1 and unusable URLs as -2
        instead of being raised.
        """
        start_time = time.perf_counter()

        if not self.session or self.session.closed:
            await self.initialize()

        response_data = None
        try:
            async with self.session.get(
                    url,
                    allow_redirects=True,
                    max_redirects=self.max_redirects
            ) as response:
                content = await self._read_content(response)
                response_data = {
                    "status": response.status,
                    "headers": dict(response.headers),
                    "content": content,
                    "final_url": str(response.url)
                }
        except aiohttp.InvalidURL as e:
            # A malformed or non-HTTP URL fails identically on every attempt
            response_data = {"status": -2, "error": f"Invalid URL: {e}"}
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            # TimeoutError carries no message of its own
            response_data = {"status": -1, "error": str(e) or type(e).__name__}
        finally:
            if response_data is not None:
                response_data["elapsed_time"] = round(time.perf_counter() - start_time, 4)

        return response_data

    async def fetch_html(self, url: str) -> str:
        """
        Returns the body of `url`. Any HTTP status counts as a completed response.

        On a transport error the request is retried once after `retry_delay`
        seconds; if that attempt fails too, FetchError is raised. An unusable
        URL raises FetchError straight away.
        """
        result = await self.perform_request(url)
        attempts = 1

        if result["status"] == -2:
            raise FetchError(url, result["error"], attempts)

        if result["status"] == -1:
            logger.error("Error: %s", result["error"])
            logger.info("Retrying %s in %ss", url, self.retry_delay)
            await asyncio.sleep(self.retry_delay)
            result = await self.perform_request(url)
            attempts += 1

        if result["status"] < 0:
            raise FetchError(url, result["error"], attempts)

        logger.debug(
            "Fetched %s (status %s, %ss, %d attempt(s))",
            result["final_url"], result["status"], result["elapsed_time"], attempts
        )
        return result["content"] or ""

    @staticmethod
    async def _read_content(response) -> str:
        """Helper to read response body text safely."""
        try:
            return await response.text()
        except UnicodeDecodeError:
            content_bytes = await response.read()
            return content_bytes.decode('utf-8', errors='replace')
