import unittest

from sitecheck.hasher import fingerprint


class TestFingerprint(unittest.TestCase):
    def test_deterministic(self):
        self.assertEqual(fingerprint(".a{color:red}"), fingerprint(".a{color:red}"))

    def test_default_length_is_eight_hex_chars(self):
        value = fingerprint("<p>Hi</p>")
        self.assertEqual(len(value), 8)
        int(value, 16)

    def test_matches_truncated_md5(self):
        # md5("") = d41d8cd98f00b204e9800998ecf8427e
        self.assertEqual(fingerprint(""), "d41d8cd9")

    def test_distinct_inputs(self):
        self.assertNotEqual(fingerprint("<p>Hi</p>"), fingerprint("<p>Bye</p>"))

    def test_wider_fingerprint(self):
        self.assertEqual(len(fingerprint("x", length=32)), 32)
        self.assertTrue(fingerprint("x", length=32).startswith(fingerprint("x")))


if __name__ == "__main__":
    unittest.main()
