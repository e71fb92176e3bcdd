"""
Test configuration for Google Search Scraper tests.
Contains fixtures and configuration for pytest.
"""
import sys
from pathlib import Path

import pytest

# The package lives at google_search_scraper/google_search_scraper, so put the
# outer directory on sys.path to allow imports when the project isn't installed.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def build_results_page(links, extra=""):
    """Builds a minimal search results page with one <cite> per link."""
    items = "\n".join(
        f'<div class="g"><a href="{link}"><h3>Result</h3></a><div><cite>{link}</cite></div></div>' for link in links
    )
    return f"<html><head><title>results</title></head><body><div id=\"search\">{items}</div>{extra}</body></html>"


@pytest.fixture
def results_page():
    """Factory fixture returning the HTML of a results page for the given links."""
    return build_results_page


@pytest.fixture
def captcha_page():
    """A Google "unusual traffic" interstitial."""
    return (
        "<html><body><div>Our systems have detected unusual traffic from your computer network.</div>"
        '<form id="captcha-form" action="index" method="post"><div class="g-recaptcha"></div></form>'
        "</body></html>"
    )
