from typing import List

from google_search_scraper.models import PAGE_SIZE, START_AT_PAGE, ClientConfig, PageRequest
from google_search_scraper.proxy_manager import build_proxy_agent


class QueryBuilder:
    """Builds the per-page requests of a paginated search.

    Attributes:
        config (ClientConfig): Settings providing the target URL and proxy.

    """

    def __init__(self, config: ClientConfig):
        """Initializes the QueryBuilder with a client configuration.

        Args:
            config (ClientConfig): The client settings.

        """
        self.config = config

    @staticmethod
    def page_offsets(limit: int) -> List[int]:
        """Returns the ``start`` offsets needed to cover ``limit`` results.

        Offsets step by the engine's page size and stop before reaching ``limit``,
        so a limit of 25 gives ``[0, 10, 20]`` and a limit of 0 or less gives ``[]``.

        Args:
            limit (int): Number of results wanted.

        Returns:
            List[int]: Ascending page offsets.

        """
        return list(range(START_AT_PAGE, limit, PAGE_SIZE))

    def build_page_request(self, term, offset=0):
        """Builds the request for one results page.

        Args:
            term (str): The search query, sent as-is (empty terms are allowed).
            offset (int, optional): The starting result index. Defaults to 0.

        Returns:
            PageRequest: The request, with redirects disabled and a proxy agent
                attached when the client is proxied.

        """
        proxy_agent = build_proxy_agent(self.config.proxy) if self.config.proxied else None
        return PageRequest(
            url=self.config.target_url,
            params={"q": term, "start": offset},
            proxy_agent=proxy_agent,
        )

    def build_page_requests(self, term, limit):
        return [self.build_page_request(term, offset) for offset in self.page_offsets(limit)]
