"""
Entry points for the two verification scripts.

verify_full_build:      dev build + prod build, then CSS and HTML checks.
verify_production_css:  prod build only, then the CSS check. A faster pre-check.

Both return a process exit code: 0 only when every check passed.
"""

from typing import Optional

from sitecheck.build.orchestrator import (
    BuildOrchestrator,
    full_build_steps,
    production_build_steps,
)
from sitecheck.config import Settings
from sitecheck.errors import BuildError, VerificationError
from sitecheck.logger import setup_logger
from sitecheck.verification.comparator import Comparator

logger = setup_logger("sitecheck.runner")


def _build(steps, settings: Settings):
    try:
        BuildOrchestrator(steps, cwd=settings.root).run()
    except BuildError as e:
        logger.error(f"❌ Build process failed! {e}")
        raise


def verify_full_build(settings: Optional[Settings] = None) -> int:
    settings = settings or Settings()
    logger.info("🔍 Starting Full Build Verification (CSS + HTML)...")

    try:
        steps = full_build_steps(settings)
        logger.info(f"1️⃣  Building Development Version (to {settings.dev_dir})...")
        _build(steps[:2], settings)

        logger.info(f"2️⃣  Building Production Version (to {settings.prod_dir})...")
        _build(steps[2:], settings)

        comparator = Comparator(settings)

        logger.info("3️⃣  Verifying CSS...")
        css_report = comparator.run(checks=("css",))
        if not css_report.passed:
            return css_report.exit_code

        logger.info("4️⃣  Verifying HTML Content...")
        html_report = comparator.run(checks=("html",))
        if not html_report.passed:
            return html_report.exit_code
    except BuildError:
        return 1
    except VerificationError as e:
        logger.error(f"❌ {e}")
        return 1

    logger.info("✨ All Verifications Passed!")
    return 0


def verify_production_css(settings: Optional[Settings] = None) -> int:
    settings = settings or Settings()
    logger.info("🔍 Starting Build Verification Process...")

    try:
        logger.info("1️⃣  Running Production Build...")
        _build(production_build_steps(settings), settings)

        # Both inputs must exist before any analysis starts
        for label, path in (
            ("Source CSS", settings.source_css_path),
            ("Production HTML", settings.prod_html_path),
        ):
            if not path.exists():
                logger.error(f"❌ {label} missing: {path}")
                return 1

        logger.info("2️⃣  Analyzing CSS Integrity...")
        report = Comparator(settings).run(checks=("css",))
    except BuildError:
        return 1
    except VerificationError as e:
        logger.error(f"❌ {e}")
        return 1

    logger.info("3️⃣  Comparison Results:")
    if report.passed:
        logger.info("✅ SUCCESS: Production inlined CSS exactly matches the processed development CSS.")
        logger.info("   The build pipeline is consistent.")
    else:
        logger.error("❌ FAILURE: Hashes do not match.")
    return report.exit_code


def main_full():
    raise SystemExit(verify_full_build())


def main_css():
    raise SystemExit(verify_production_css())
