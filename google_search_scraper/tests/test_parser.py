"""
Tests for the Parser module.
"""

import unittest

from parsel import Selector

from google_search_scraper.exceptions import ParseError
from google_search_scraper.parser import Parser


def build_results_page(links):
    cites = "".join(f'<div class="g"><cite>{link}</cite></div>' for link in links)
    return f'<html><body><div id="search">{cites}</div></body></html>'


class TestParser(unittest.TestCase):
    """Test cases for Parser class"""

    def setUp(self):
        """Set up test environment"""
        self.parser = Parser()

    def test_parse_returns_selector(self):
        selector = self.parser.parse("<html><body><cite>https://a.com</cite></body></html>")
        self.assertIsInstance(selector, Selector)

    def test_parse_rejects_non_text(self):
        """Test parse raises ParseError for bodies that are not text"""
        with self.assertRaises(ParseError):
            self.parser.parse(None)
        with self.assertRaises(ParseError):
            self.parser.parse(b"<html></html>")

    def test_parse_links_in_document_order(self):
        html = build_results_page(["https://a.com", "https://b.com", "https://c.com"])
        self.assertEqual(self.parser.parse_links(html), ["https://a.com", "https://b.com", "https://c.com"])

    def test_parse_links_keeps_duplicates(self):
        html = build_results_page(["https://a.com", "https://a.com"])
        self.assertEqual(self.parser.parse_links(html), ["https://a.com", "https://a.com"])

    def test_extract_links_includes_nested_text(self):
        """Test the full text content of a cite element is collected, like jQuery's .text()"""
        html = (
            "<html><body>"
            '<cite>https://docs.python.org<span class="dyjrff"> › 3 › library</span></cite>'
            "<cite><b>www.example.com</b>/path</cite>"
            "</body></html>"
        )
        links = self.parser.extract_links(self.parser.parse(html))
        self.assertEqual(links, ["https://docs.python.org › 3 › library", "www.example.com/path"])

    def test_extract_links_does_not_strip(self):
        links = self.parser.parse_links("<html><body><cite>  https://a.com </cite></body></html>")
        self.assertEqual(links, ["  https://a.com "])

    def test_empty_cite_gives_empty_string(self):
        self.assertEqual(self.parser.parse_links("<html><body><cite></cite></body></html>"), [""])

    def test_no_cite_elements(self):
        """Test a page without citation elements yields no links"""
        html = "<html><body><div class='g'><a href='https://a.com'>A</a></div></body></html>"
        self.assertEqual(self.parser.parse_links(html), [])

    def test_empty_body(self):
        self.assertEqual(self.parser.parse_links(""), [])

    def test_malformed_markup_is_tolerated(self):
        """lxml recovers from unclosed tags; links before the breakage are still found"""
        html = "<html><body><div><cite>https://a.com</cite><p><span>unterminated"
        self.assertEqual(self.parser.parse_links(html), ["https://a.com"])

    def test_custom_url_element(self):
        parser = Parser(url_element="a.result")
        html = '<html><body><a class="result">https://x.com</a><a>ignored</a></body></html>'
        self.assertEqual(parser.parse_links(html), ["https://x.com"])


if __name__ == "__main__":
    unittest.main()
