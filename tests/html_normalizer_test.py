import unittest
from unittest.mock import patch

from sitecheck.errors import MinifyError
from sitecheck.normalization.engine import HtmlNormalizer, normalize_html
from sitecheck.normalization.minify import canonicalize, minify_html

NOISY_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="csrf-token" content="abc123">
  <link rel="stylesheet" href="/css/site.css">
  <link rel="icon" href="/favicon.ico">
  <style>.a{color:red}</style>
  <script src="/js/app.js"></script>
</head><body><h1>Title</h1><script>track()</script><p>First</p><style>.b{}</style><p>Second</p><link rel="stylesheet" href="/x.css"></body></html>"""


class TestHtmlNormalizer(unittest.TestCase):
    def setUp(self):
        self.normalizer = HtmlNormalizer()

    def test_strips_volatile_elements(self):
        normalized = self.normalizer.normalize(NOISY_PAGE)
        self.assertEqual(normalized, "<h1>Title</h1><p>First</p><p>Second</p>")
        for marker in ("<script", "<style", "stylesheet", "csrf-token"):
            self.assertNotIn(marker, normalized)

    def test_preserves_order_and_text(self):
        html = "<html><body><div class='x'>One</div><span>Two</span> Three</body></html>"
        self.assertEqual(
            normalize_html(html),
            '<div class="x">One</div><span>Two</span> Three',
        )

    def test_keeps_other_links_and_meta(self):
        html = '<html><body><link rel="preload" href="/f.woff2"><meta name="description" content="d"><p>x</p></body></html>'
        normalized = normalize_html(html)
        self.assertIn('rel="preload"', normalized)
        self.assertIn('name="description"', normalized)

    def test_scripts_removed_from_dev_output(self):
        dev = "<html><body><script>x</script><p>Hi</p></body></html>"
        prod = "<html><body><p>Hi</p></body></html>"
        self.assertEqual(normalize_html(dev), normalize_html(prod))

    def test_empty_document(self):
        self.assertEqual(normalize_html(""), "")

    def test_custom_selectors(self):
        normalizer = HtmlNormalizer(strip_selectors=["aside"])
        self.assertEqual(
            normalizer.normalize("<html><body><aside>ad</aside><p>x</p></body></html>"),
            "<p>x</p>",
        )


class TestMinifyHtml(unittest.TestCase):
    def test_removes_comments_and_blank_space(self):
        html = "<html>\n  <body>\n    <!-- nav -->\n    <p>Hi</p>\n  </body>\n</html>"
        self.assertEqual(normalize_html(minify_html(html)), "<p>Hi</p>")

    def test_sorts_classes_and_attributes(self):
        html = '<html><body><a title="t" href="/" class="z a m">x</a></body></html>'
        self.assertEqual(
            normalize_html(canonicalize(html)),
            '<a class="a m z" href="/" title="t">x</a>',
        )

    def test_matches_prod_after_canonical_ordering(self):
        dev = '<html><body>\n<p class="b a" id="p">Hi</p>\n</body></html>'
        prod = '<html><body><p class="a b" id="p">Hi</p></body></html>'
        self.assertEqual(normalize_html(minify_html(dev)), normalize_html(prod))

    def test_keeps_space_between_inline_elements(self):
        html = "<html><body><p>Hello <b>bold</b>\n<i>it</i></p></body></html>"
        self.assertEqual(normalize_html(minify_html(html)), "<p>Hello <b>bold</b> <i>it</i></p>")

    def test_trims_space_at_block_boundaries(self):
        html = "<html><body>\n  <div>\n    <p>  Hi   there </p>\n  </div>\n</body></html>"
        self.assertEqual(normalize_html(minify_html(html)), "<div><p>Hi there</p></div>")

    def test_preformatted_text_untouched(self):
        html = "<html><body><pre>a\n    b</pre></body></html>"
        self.assertEqual(normalize_html(minify_html(html)), "<pre>a\n    b</pre>")

    def test_explicit_empty_options_use_htmlmin_defaults(self):
        html = "<html><body><!-- keep --><p>x</p></body></html>"
        self.assertIn("<!-- keep -->", minify_html(html, {}))
        self.assertNotIn("<!-- keep -->", minify_html(html))

    def test_minifier_error_is_fatal(self):
        with patch("sitecheck.normalization.minify.htmlmin.minify", side_effect=RuntimeError("boom")):
            with self.assertRaises(MinifyError) as cm:
                minify_html("<p>x</p>")
        self.assertIn("boom", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
