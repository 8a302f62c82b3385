import sys

from sitecheck.verification.runner import verify_production_css

if __name__ == "__main__":
    sys.exit(verify_production_css())
