"""
Table of contents for rendered posts.
Lists every h2 as an in-page link.
"""

import re
from html import escape

from bs4 import BeautifulSoup


def heading_id(text):
    """'Getting Started' -> 'getting-started'. Each whitespace character becomes one dash."""
    return re.sub(r"\s", "-", text.lower())


def _headings(soup):
    return soup.find_all("h2")


def build_toc(content):
    """
    Returns a <ul> of links to the h2 headings in content,
    or an empty string when the post has none.
    """
    soup = BeautifulSoup(content or "", "html.parser")
    headings = _headings(soup)

    if not headings:
        return ""

    items = []
    for heading in headings:
        text = heading.get_text()
        items.append(f'<li><a href="#{escape(heading_id(text))}">{escape(text, quote=False)}</a></li>')

    return "<ul>" + "".join(items) + "</ul>"


def add_heading_ids(content):
    """Applies the ids build_toc links to, so its anchors resolve."""
    soup = BeautifulSoup(content or "", "html.parser")
    for heading in _headings(soup):
        heading["id"] = heading_id(heading.get_text())
    return str(soup)
