import re

import htmlmin
from bs4 import BeautifulSoup, NavigableString

from sitecheck.config import HTML_MINIFY_OPTIONS
from sitecheck.errors import MinifyError

# Whitespace next to these is not rendered and is dropped on collapse
BLOCK_TAGS = {
    "html", "head", "body", "title", "meta", "link", "base", "script", "style",
    "address", "article", "aside", "blockquote", "dd", "details", "dialog",
    "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form",
    "h1", "h2", "h3", "h4", "h5", "h6", "header", "hgroup", "hr", "li",
    "main", "nav", "ol", "p", "pre", "section", "summary", "table", "tbody",
    "td", "tfoot", "th", "thead", "tr", "ul", "noscript", "option", "select",
}

# Text inside these is kept verbatim
PRESERVE_TAGS = {"pre", "textarea", "script", "style"}

WHITESPACE = re.compile(r"\s+")


def _is_block(node):
    return getattr(node, "name", None) in BLOCK_TAGS


def _collapse_whitespace(soup):
    """
    Collapse every whitespace run to one space, then trim it where it meets
    a block boundary. Whitespace between inline elements survives as a space.
    """
    for node in list(soup.find_all(string=True)):
        if type(node) is not NavigableString:
            continue
        if node.parent is None or any(p.name in PRESERVE_TAGS for p in node.parents):
            continue

        text = WHITESPACE.sub(" ", str(node))
        prev, nxt = node.previous_sibling, node.next_sibling
        block_parent = _is_block(node.parent)

        if (prev is None and block_parent) or _is_block(prev):
            text = text.lstrip(" ")
        if (nxt is None and block_parent) or _is_block(nxt):
            text = text.rstrip(" ")

        if not text:
            node.extract()
        elif text != str(node):
            node.replace_with(text)


def canonicalize(html):
    """
    Sort class names and attributes so that string comparisons are reliable,
    and collapse whitespace the way the production minifier does.
    """
    soup = BeautifulSoup(html, "lxml")
    for tag in soup.find_all(True):
        if tag.attrs:
            if "class" in tag.attrs and isinstance(tag.attrs["class"], list):
                tag.attrs["class"] = sorted(tag.attrs["class"])
            tag.attrs = dict(sorted(tag.attrs.items()))
    _collapse_whitespace(soup)
    return str(soup)


def minify_html(html, options=HTML_MINIFY_OPTIONS):
    """
    Bring dev HTML to the shape production HTML has after its own processing.
    Optional end tags need no handling: the parser restores them on both sides.
    """
    try:
        minified = htmlmin.minify(html, **options)
    except Exception as e:
        raise MinifyError(f"Failed to minify Dev HTML for comparison: {e}") from e
    return canonicalize(minified)
