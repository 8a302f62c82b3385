import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv

# Configuration for the build verifier.
# This file defines where the two builds land and how they are produced.
# No hashing, normalization, or comparison logic here.

load_dotenv()

# Development source CSS (output of the CSS build, before inlining)
SOURCE_CSS = os.getenv("SITECHECK_SOURCE_CSS", "css/redesign.tmp.css")

# Output trees of the two builds
DEV_DIR = os.getenv("SITECHECK_DEV_DIR", "_site_dev")
PROD_DIR = os.getenv("SITECHECK_PROD_DIR", "_site")
TARGET_FILE = os.getenv("SITECHECK_TARGET_FILE", "index.html")

# External build commands
CSS_BUILD_COMMAND = os.getenv("SITECHECK_CSS_BUILD_COMMAND", "npm run build:css")
DEV_BUILD_COMMAND = os.getenv(
    "SITECHECK_DEV_BUILD_COMMAND", f"npx eleventy --output={DEV_DIR}"
)
PROD_BUILD_COMMAND = os.getenv("SITECHECK_PROD_BUILD_COMMAND", "npm run build")

# The dev build simulates `eleventy --serve`
DEV_BUILD_ENV = {"ELEVENTY_RUN_MODE": "serve"}

# Truncated MD5 length. Collisions are an accepted false-pass risk.
FINGERPRINT_LENGTH = int(os.getenv("SITECHECK_FINGERPRINT_LENGTH", 8))

LOG_FILE = os.getenv("SITECHECK_LOG_FILE")

# Debug artifacts, written only on mismatch
DEBUG_EXPECTED_CSS = "debug_expected.css"
DEBUG_ACTUAL_CSS = "debug_actual.css"
DEBUG_DEV_HTML = "debug_dev_normalized.html"
DEBUG_PROD_HTML = "debug_prod_normalized.html"

# The production pipeline injects this into every @font-face rule
FONT_DISPLAY = "optional"

# Below this many characters of difference, a CSS mismatch is reported
# as a formatting difference rather than a processing one.
SIMILAR_SIZE_THRESHOLD = 50

# htmlmin options approximating the production HTML transform
HTML_MINIFY_OPTIONS = {
    "remove_comments": True,
    "remove_empty_space": False,
    "reduce_boolean_attributes": True,
    "remove_optional_attribute_quotes": True,
    "convert_charrefs": True,
}

# Elements that legitimately differ between dev and prod output
STRIP_SELECTORS = [
    "script",
    "style",
    'link[rel="stylesheet"]',
    'meta[name="csrf-token"]',
]


@dataclass
class Settings:
    """Resolves the configured paths and commands against a project root."""

    root: Path = field(default_factory=Path.cwd)
    source_css: str = SOURCE_CSS
    dev_dir: str = DEV_DIR
    prod_dir: str = PROD_DIR
    target_file: str = TARGET_FILE
    css_build_command: str = CSS_BUILD_COMMAND
    dev_build_command: str = DEV_BUILD_COMMAND
    prod_build_command: str = PROD_BUILD_COMMAND
    dev_build_env: Dict[str, str] = field(default_factory=lambda: dict(DEV_BUILD_ENV))
    fingerprint_length: int = FINGERPRINT_LENGTH

    def __post_init__(self):
        self.root = Path(self.root)

    @property
    def source_css_path(self) -> Path:
        return self.root / self.source_css

    @property
    def dev_html_path(self) -> Path:
        return self.root / self.dev_dir / self.target_file

    @property
    def prod_html_path(self) -> Path:
        return self.root / self.prod_dir / self.target_file

    def debug_path(self, name: str) -> Path:
        return self.root / name

    @staticmethod
    def split_command(command: str) -> List[str]:
        return shlex.split(command)
