# utils.py
from typing import Optional

from fake_useragent import UserAgent
from parsel import Selector

from google_search_scraper.models import URL_ELEMENT


def get_random_user_agent():
    """
    Returns a random user agent string using the fake-useragent library.

    Sending a browser-like and varying User-Agent keeps the search engine from
    serving its stripped-down page for unknown clients.

    Returns:
        str: A random user agent string.

    """
    ua = UserAgent()
    return ua.random


CAPTCHA_URL_MARKERS = ("/sorry/",)
CAPTCHA_SELECTORS = (
    "form#captcha-form",
    "div.g-recaptcha",
    "iframe[src*='google.com/recaptcha/api']",
)


def detect_captcha(html_content: Optional[str], url: Optional[str] = None) -> bool:
    """
    Detects a CAPTCHA interstitial from the page structure.

    Search engines answer suspicious traffic with an interstitial page (for Google,
    the ``/sorry/`` page) instead of results. A page only counts as blocked when it
    carries no ``cite`` elements and either was served from a ``/sorry/`` URL or
    contains a CAPTCHA form or widget. Free text is never matched, so results about
    CAPTCHAs are not mistaken for a block.

    Args:
        html_content (Optional[str]): The HTML content to analyze.
        url (Optional[str]): The URL the page was served from.

    Returns:
        bool: True if the page is a CAPTCHA challenge, False otherwise.

    """
    if not html_content:
        return False
    selector = Selector(text=html_content)
    if selector.css(URL_ELEMENT):
        return False
    if url and any(marker in url for marker in CAPTCHA_URL_MARKERS):
        return True
    return any(selector.css(css) for css in CAPTCHA_SELECTORS)
