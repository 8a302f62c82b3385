# Fingerprints for equality checks between two known strings.
# Input: CSS or HTML text
# Output: truncated hex digest
#
# Not an integrity check. At 8 characters a collision is possible and would
# read as a false pass; that risk is accepted, widen FINGERPRINT_LENGTH if needed.

import hashlib

from sitecheck.config import FINGERPRINT_LENGTH


def fingerprint(content, length=FINGERPRINT_LENGTH):
    md5 = hashlib.md5()
    md5.update(content.encode("utf-8"))
    # Convert string to bytes before hashing
    return md5.hexdigest()[:length]
