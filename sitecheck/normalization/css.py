"""
CSS side of the dev/prod comparison.
Turns the development stylesheet into what production is expected to inline,
and pulls the inlined stylesheet back out of production HTML.
"""

import re

import csscompressor

from sitecheck.config import FONT_DISPLAY
from sitecheck.errors import ExtractionError, MinifyError

FONT_FACE_OPEN = re.compile(r"@font-face\s*\{")

# First inlined stylesheet only; production inlines exactly one.
STYLE_BLOCK = re.compile(r"<style[^>]*>(.*?)</style>", re.DOTALL | re.IGNORECASE)


def patch_font_face(css: str, display: str = FONT_DISPLAY) -> str:
    """Declare font-display at the start of every @font-face block."""
    return FONT_FACE_OPEN.sub(f"@font-face {{font-display:{display};", css)


def minify_css(css: str) -> str:
    try:
        return csscompressor.compress(css)
    except Exception as e:
        raise MinifyError(f"Failed to minify CSS: {e}") from e


def expected_production_css(source_css: str) -> str:
    """
    Apply the transformations the production pipeline is known to make:
    font-display injection, then minification.
    """
    return minify_css(patch_font_face(source_css))


def extract_inline_style(html: str) -> str:
    match = STYLE_BLOCK.search(html)
    if not match:
        raise ExtractionError("No <style> tag found in production HTML!")
    return match.group(1)
