# client.py
import asyncio
import logging
from typing import Any, List, Mapping, Optional, Union

import aiohttp
from tqdm import tqdm

from google_search_scraper.fetcher import Fetcher
from google_search_scraper.models import ClientConfig, PageRequest, SearchPage
from google_search_scraper.parser import Parser
from google_search_scraper.query_builder import QueryBuilder


class SearchClient:
    def __init__(
        self,
        options: Union[ClientConfig, Mapping[str, Any], None] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initializes the SearchClient.

        Args:
            options (ClientConfig or Mapping, optional): Settings, merged over the defaults
                (host, path, limit, proxied, proxy, timeout, user_agent, detect_captcha, show_progress).
            session (aiohttp.ClientSession, optional): A caller-owned session to reuse. It is never
                closed by the client. Defaults to a fresh session per search.

        Raises:
            ConfigurationError: If ``limit`` is not positive or ``proxied`` is enabled without a proxy URI.

        """
        self.config = options if isinstance(options, ClientConfig) else ClientConfig.from_options(options)
        self.session = session
        self.logger = logging.getLogger(__name__)
        self.query_builder = QueryBuilder(self.config)
        self.fetcher = Fetcher(
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
            detect_captcha=self.config.detect_captcha,
        )
        self.parser = Parser()

    async def search(self, term: str, limit: Optional[int] = None) -> List[str]:
        """
        Searches for ``term`` and returns the text of every citation link found.

        One page is requested per 10 results up to ``limit``. Links are returned in
        ascending page order, then in document order within a page. Duplicates are kept.

        Args:
            term (str): The search query.
            limit (int, optional): Number of results to cover. Defaults to the configured limit.

        Returns:
            List[str]: The flattened link texts, possibly empty.

        Raises:
            TransportError: If any page request fails. No partial results are returned.
            ParseError: If any page body cannot be parsed.

        """
        pages = await self.search_pages(term, limit)
        return [link for page in pages for link in page.links]

    async def search_pages(self, term: str, limit: Optional[int] = None) -> List[SearchPage]:
        """Like ``search`` but keeps the links grouped per page, ordered by offset."""
        size = self.config.limit if limit is None else limit
        page_requests = self.query_builder.build_page_requests(term, size)
        if not page_requests:
            self.logger.info(f"Nothing to fetch for '{term}' with limit {size}.")
            return []

        self.logger.info(f"Searching '{term}' across {len(page_requests)} page(s) of {self.config.target_url}")
        if self.session is not None:
            pages = await self._gather_pages(self.session, page_requests)
        else:
            async with aiohttp.ClientSession() as session:
                pages = await self._gather_pages(session, page_requests)

        self.logger.info(f"Collected {sum(len(page.links) for page in pages)} links for '{term}'.")
        return pages

    async def _scrape_page(self, session: aiohttp.ClientSession, page_request: PageRequest, pbar: tqdm) -> SearchPage:
        html_content = await self.fetcher.fetch_page(session, page_request)
        links = self.parser.parse_links(html_content)
        pbar.update(1)
        return SearchPage(offset=page_request.offset, links=links)

    async def _gather_pages(self, session: aiohttp.ClientSession, page_requests: List[PageRequest]) -> List[SearchPage]:
        """Fetches all pages concurrently; the first failure cancels the rest and propagates."""
        with tqdm(
            total=len(page_requests), desc="Fetching pages", unit="page", disable=not self.config.show_progress
        ) as pbar:
            # Tasks are created in ascending offset order; gather returns results in that order.
            tasks = [asyncio.ensure_future(self._scrape_page(session, request, pbar)) for request in page_requests]
            try:
                return await asyncio.gather(*tasks)
            except Exception:
                for task in tasks:
                    if not task.done():
                        task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
