from enum import Enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


class CheckState(Enum):
    CSS_CHECK = "CSS_CHECK"
    HTML_CHECK = "HTML_CHECK"
    DONE = "DONE"
    FAILED = "FAILED"


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of one fingerprint comparison.
    Only fingerprints and sizes are kept; the compared strings are not.
    """
    name: str
    expected_hash: str
    actual_hash: str
    expected_size: int
    actual_size: int
    debug_files: Tuple[Path, ...] = ()

    @property
    def matched(self) -> bool:
        return self.expected_hash == self.actual_hash

    @property
    def length_delta(self) -> int:
        return abs(self.expected_size - self.actual_size)


@dataclass
class VerificationReport:
    state: CheckState
    results: List[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.state is CheckState.DONE

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1
