import unittest

from sitecheck.content import add_heading_ids, build_toc, heading_id

POST = """
<h1>Post title</h1>
<h2>Getting Started</h2>
<p>...</p>
<h2>Next  steps</h2>
<h3>Not listed</h3>
"""


class TestToc(unittest.TestCase):
    def test_lists_h2_headings(self):
        self.assertEqual(
            build_toc(POST),
            '<ul><li><a href="#getting-started">Getting Started</a></li>'
            '<li><a href="#next--steps">Next  steps</a></li></ul>',
        )

    def test_no_headings(self):
        self.assertEqual(build_toc("<h1>Only</h1><p>text</p>"), "")
        self.assertEqual(build_toc(""), "")

    def test_heading_id(self):
        self.assertEqual(heading_id("Why\tPython"), "why-python")

    def test_add_heading_ids(self):
        html = add_heading_ids(POST)
        self.assertIn('<h2 id="getting-started">Getting Started</h2>', html)
        self.assertIn('<h2 id="next--steps">', html)
        self.assertNotIn("<h3 id=", html)


if __name__ == "__main__":
    unittest.main()
