# fetcher.py
import asyncio
import logging
from typing import Optional

import aiohttp

from google_search_scraper.exceptions import CaptchaException, TransportError
from google_search_scraper.models import PageRequest
from google_search_scraper.utils import detect_captcha, get_random_user_agent


class Fetcher:
    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None, detect_captcha: bool = True):
        """
        Initializes the Fetcher.

        Args:
            timeout (float, optional): Total timeout per request in seconds. None keeps the session's timeout.
            user_agent (str, optional): Fixed User-Agent header. Defaults to a random one per request.
            detect_captcha (bool): Raise CaptchaException for CAPTCHA pages. Defaults to True.

        """
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout
        self.user_agent = user_agent
        self.detect_captcha = detect_captcha

    def _request_args(self, page_request: PageRequest) -> dict:
        headers = {"User-Agent": self.user_agent or get_random_user_agent()}
        request_args = {
            "params": page_request.params,
            "headers": headers,
            "allow_redirects": page_request.allow_redirects,
        }
        if self.timeout is not None:
            request_args["timeout"] = aiohttp.ClientTimeout(total=self.timeout)
        if page_request.proxy_agent is not None:
            request_args.update(page_request.proxy_agent.request_kwargs())
        return request_args

    async def fetch_page(self, session: aiohttp.ClientSession, page_request: PageRequest) -> str:
        """Fetches one results page and returns its body.

        Raises:
            TransportError: On connection errors, timeouts, a malformed proxy URI or a non-2xx status.
            CaptchaException: If CAPTCHA detection is enabled and the page is a CAPTCHA challenge.
        """
        url = page_request.url
        request_args = self._request_args(page_request)
        proxy = request_args.get("proxy")
        self.logger.debug(f"GET {url} start={page_request.offset} (proxy: {proxy})")

        try:
            async with session.get(url, **request_args) as response:
                if not 200 <= response.status < 300:
                    self.logger.warning(
                        f"HTTP error {response.status} for {url} start={page_request.offset} with proxy {proxy}."
                    )
                    raise TransportError(
                        f"HTTP {response.status} {response.reason} for {response.url}",
                        url=str(response.url),
                        status=response.status,
                    )
                html_content = await response.text(errors="replace")
                served_url = str(response.url)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            self.logger.warning(f"Request failed for {url} start={page_request.offset}: {type(e).__name__}: {e} with proxy {proxy}")
            raise TransportError(f"Request to {url} failed: {type(e).__name__}: {e}", url=url) from e

        if self.detect_captcha and detect_captcha(html_content, served_url):
            self.logger.warning(f"CAPTCHA detected for {url} start={page_request.offset}. HTML snippet: {html_content[:500]}...")
            raise CaptchaException(f"CAPTCHA detected for {url}", url=url, status=response.status)
        return html_content
