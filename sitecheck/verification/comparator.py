import dataclasses
import logging
from pathlib import Path
from typing import Optional, Sequence

from sitecheck.config import (
    Settings,
    DEBUG_EXPECTED_CSS,
    DEBUG_ACTUAL_CSS,
    DEBUG_DEV_HTML,
    DEBUG_PROD_HTML,
    SIMILAR_SIZE_THRESHOLD,
)
from sitecheck.errors import MissingFileError, UnreadableFileError
from sitecheck.hasher import fingerprint
from sitecheck.logger import setup_logger
from sitecheck.normalization.css import expected_production_css, extract_inline_style
from sitecheck.normalization.engine import HtmlNormalizer
from sitecheck.normalization.minify import minify_html
from sitecheck.verification.models import CheckResult, CheckState, VerificationReport

logger = setup_logger("sitecheck.verification")
css_log = logging.LoggerAdapter(logger, {"context": "css"})
html_log = logging.LoggerAdapter(logger, {"context": "html"})


def _read(path: Path, label: str) -> str:
    if not path.exists():
        raise MissingFileError(label, path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFileError(label, path, e) from e


class Comparator:
    """
    Compares the two build outputs.
    States: CSS_CHECK -> HTML_CHECK -> DONE, or FAILED from either check.
    Missing files, extraction and minify failures raise; content mismatches
    write their debug artifacts and end the run in FAILED.
    """

    def __init__(self, settings: Optional[Settings] = None, normalizer: Optional[HtmlNormalizer] = None):
        self.settings = settings or Settings()
        self.normalizer = normalizer or HtmlNormalizer()

    def _hash(self, content: str) -> str:
        return fingerprint(content, self.settings.fingerprint_length)

    def _write_debug(self, log, *artifacts) -> tuple:
        written = []
        for name, content in artifacts:
            path = self.settings.debug_path(name)
            path.write_text(content, encoding="utf-8")
            written.append(path)
        log.info(
            "   📝 Debug files written: "
            + " & ".join(f"'{path.name}'" for path in written)
        )
        return tuple(written)

    def check_css(self) -> CheckResult:
        """Production inlined CSS must equal the processed development CSS."""
        raw_css = _read(self.settings.source_css_path, "Source CSS")
        prod_html = _read(self.settings.prod_html_path, "Production HTML")

        expected_css = expected_production_css(raw_css)
        expected_hash = self._hash(expected_css)
        css_log.info(f"   Expected CSS Hash (Dev Logic + Minify): {expected_hash}")
        css_log.info(f"   Expected Size: {len(expected_css) / 1024:.2f} KB")

        actual_css = extract_inline_style(prod_html)
        actual_hash = self._hash(actual_css)
        css_log.info(f"   Actual Inlined CSS Hash:               {actual_hash}")
        css_log.info(f"   Actual Size:   {len(actual_css) / 1024:.2f} KB")

        result = CheckResult(
            name="css",
            expected_hash=expected_hash,
            actual_hash=actual_hash,
            expected_size=len(expected_css),
            actual_size=len(actual_css),
        )
        if result.matched:
            css_log.info(f"✅ CSS Verified! Hash: {actual_hash}")
            return result

        css_log.error(f"❌ CSS Mismatch! Expected: {expected_hash}, Actual: {actual_hash}")
        if result.length_delta < SIMILAR_SIZE_THRESHOLD:
            css_log.warning("   ⚠️  Size is very similar. Likely a minor formatting/minification difference.")
        else:
            css_log.warning("   ⚠️  Significant size difference. Major processing mismatch.")

        debug_files = self._write_debug(
            css_log,
            (DEBUG_EXPECTED_CSS, expected_css),
            (DEBUG_ACTUAL_CSS, actual_css),
        )
        return dataclasses.replace(result, debug_files=debug_files)

    def check_html(self) -> CheckResult:
        """Dev and prod pages must carry the same content once scripts and styles are stripped."""
        dev_html = _read(self.settings.dev_html_path, "Development HTML")
        prod_html = _read(self.settings.prod_html_path, "Production HTML")

        dev_normalized = self.normalizer.normalize(minify_html(dev_html))
        prod_normalized = self.normalizer.normalize(prod_html)

        dev_hash = self._hash(dev_normalized)
        prod_hash = self._hash(prod_normalized)

        if dev_hash == prod_hash:
            html_log.info(f"✅ HTML Content Verified! Hash: {prod_hash}")
            html_log.info("   (Comparison matched after stripping scripts, styles, and normalizing structure)")
            return CheckResult(
                name="html",
                expected_hash=dev_hash,
                actual_hash=prod_hash,
                expected_size=len(dev_normalized),
                actual_size=len(prod_normalized),
            )

        html_log.error("❌ HTML Content Mismatch!")
        html_log.info(f"   Dev Hash:  {dev_hash}")
        html_log.info(f"   Prod Hash: {prod_hash}")

        debug_files = self._write_debug(
            html_log,
            (DEBUG_DEV_HTML, dev_normalized),
            (DEBUG_PROD_HTML, prod_normalized),
        )
        result = CheckResult(
            name="html",
            expected_hash=dev_hash,
            actual_hash=prod_hash,
            expected_size=len(dev_normalized),
            actual_size=len(prod_normalized),
            debug_files=debug_files,
        )
        html_log.info(f"   Length Diff: {result.length_delta} chars")
        return result

    def run(self, checks: Sequence[str] = ("css", "html")) -> VerificationReport:
        report = VerificationReport(state=CheckState.CSS_CHECK)

        if "css" in checks:
            result = self.check_css()
            report.results.append(result)
            if not result.matched:
                report.state = CheckState.FAILED
                return report

        if "html" in checks:
            report.state = CheckState.HTML_CHECK
            result = self.check_html()
            report.results.append(result)
            if not result.matched:
                report.state = CheckState.FAILED
                return report

        report.state = CheckState.DONE
        return report
