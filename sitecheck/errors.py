class VerificationError(Exception):
    """Base verification failure. Always fatal: the run exits non-zero."""
    pass


class MissingFileError(VerificationError):
    """Raised when a build artifact or source file does not exist."""

    def __init__(self, label, path):
        self.path = path
        super().__init__(f"{label} missing: {path}")


class BuildError(VerificationError):
    """Raised when an external build command fails or cannot be started."""

    def __init__(self, step, message, returncode=None):
        self.step = step
        self.returncode = returncode
        super().__init__(f"Build step '{step}' failed: {message}")


class ExtractionError(VerificationError):
    """Raised when expected content cannot be located in build output."""
    pass


class MinifyError(VerificationError):
    """Raised when a minifier rejects its input."""
    pass


class UnreadableFileError(VerificationError):
    """Raised when a file exists but cannot be read as UTF-8 text."""

    def __init__(self, label, path, cause):
        self.path = path
        super().__init__(f"{label} unreadable: {path} ({cause})")
