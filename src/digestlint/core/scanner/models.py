"""
Data models for the directory scanner.
"""

from dataclasses import dataclass
from enum import Enum

from digestlint.core.digest import DigestAlgorithm
from digestlint.core.errors import FileReadError


class EntryKind(Enum):
    """Classification of a directory entry before any digest work."""

    DIRECTORY = "directory"
    REGULAR = "regular"
    NON_REGULAR = "non_regular"


class EntryOutcome(str, Enum):
    """Final outcome recorded for a non-directory entry."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    NON_REGULAR = "non_regular"
    ERRORED = "errored"


@dataclass(frozen=True)
class EntryResult:
    """
    Outcome of checking a single entry.

    Attributes:
        path: Root-qualified path of the entry
        outcome: Which report category the entry belongs to
        expected_digest: Digest extracted from the filename, if any
        actual_digest: Digest computed from the file content, if computed
        algorithm: Algorithm implied by the expected digest, if any
        error: Read failure for ERRORED outcomes, None otherwise
    """

    path: str
    outcome: EntryOutcome
    expected_digest: str | None = None
    actual_digest: str | None = None
    algorithm: DigestAlgorithm | None = None
    error: FileReadError | None = None

    def __post_init__(self) -> None:
        if (self.outcome is EntryOutcome.ERRORED) != (self.error is not None):
            raise ValueError("error must be set exactly when outcome is ERRORED")
