from typing import Iterable, Optional

from bs4 import BeautifulSoup

from sitecheck.config import STRIP_SELECTORS


class HtmlNormalizer:
    """
    Reduces a built page to its content surface.
    Dev and prod builds legitimately differ in injected scripts, styles and
    security tokens; everything else must survive untouched and in order.
    """

    def __init__(self, strip_selectors: Optional[Iterable[str]] = None):
        self.strip_selectors = list(strip_selectors or STRIP_SELECTORS)

    def normalize(self, html: str) -> str:
        """Returns the body markup with all stripped elements removed."""
        soup = BeautifulSoup(html or "", "lxml")

        for selector in self.strip_selectors:
            for element in soup.select(selector):
                element.decompose()

        if soup.body is None:
            return ""
        return soup.body.decode_contents()


def normalize_html(html: str) -> str:
    return HtmlNormalizer().normalize(html)
