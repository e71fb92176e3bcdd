# parser.py
import logging
from typing import List

from lxml import etree
from parsel import Selector

from google_search_scraper.exceptions import ParseError
from google_search_scraper.models import URL_ELEMENT


class Parser:
    def __init__(self, url_element=URL_ELEMENT):
        self.logger = logging.getLogger(__name__)
        self.url_element = url_element

    def parse(self, html_content: str) -> Selector:
        """
        Parses a results page into a traversable document.

        Raises:
            ParseError: If the body is not text or lxml rejects it.
        """
        if not isinstance(html_content, str):
            raise ParseError(f"Expected HTML text, got {type(html_content).__name__}.")
        try:
            return Selector(text=html_content)
        except (TypeError, ValueError, etree.LxmlError) as e:
            self.logger.warning(f"Could not parse response body: {e}")
            raise ParseError(f"Error during parsing: {e}") from e

    def extract_links(self, selector: Selector) -> List[str]:
        """
        Returns the text of every citation element, in document order.

        The text of an element is the concatenation of all its descendant text
        nodes, so ``<cite>https://a.com<span> › docs</span></cite>`` gives
        ``"https://a.com › docs"``. Text is not stripped.
        """
        links = []
        for element in selector.css(self.url_element):
            links.append("".join(element.xpath(".//text()").getall()))
        return links

    def parse_links(self, html_content: str) -> List[str]:
        links = self.extract_links(self.parse(html_content))
        self.logger.debug(f"Extracted {len(links)} <{self.url_element}> links.")
        return links
