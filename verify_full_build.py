import sys

from sitecheck.verification.runner import verify_full_build

if __name__ == "__main__":
    sys.exit(verify_full_build())
