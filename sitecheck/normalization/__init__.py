from sitecheck.normalization.css import (
    patch_font_face,
    minify_css,
    expected_production_css,
    extract_inline_style,
)
from sitecheck.normalization.engine import HtmlNormalizer, normalize_html
from sitecheck.normalization.minify import canonicalize, minify_html
