"""
Scan reports and their aggregation across several roots.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from digestlint.core.errors import FileReadError

from .models import EntryOutcome, EntryResult


@dataclass
class Report:
    """
    Classified paths from one directory scan.

    Attributes:
        passed: Files whose name contains a matching digest of their content
        skipped: Files whose name matched a skip pattern
        failed: Files without a digest in their name, or with a wrong one
        non_regular: Entries that are not regular files (never opened)
        file_errors: Files that could not be read, keyed by path
    """

    passed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    non_regular: list[str] = field(default_factory=list)
    file_errors: dict[str, FileReadError] = field(default_factory=dict)

    def record(self, result: EntryResult) -> None:
        """Add a single entry result to its category."""
        outcome = result.outcome
        if outcome is EntryOutcome.PASSED:
            self.passed.append(result.path)
        elif outcome is EntryOutcome.FAILED:
            self.failed.append(result.path)
        elif outcome is EntryOutcome.SKIPPED:
            self.skipped.append(result.path)
        elif outcome is EntryOutcome.NON_REGULAR:
            self.non_regular.append(result.path)
        elif outcome is EntryOutcome.ERRORED:
            self.file_errors[result.path] = result.error
        else:
            raise ValueError(f"Unknown outcome: {outcome!r}")

    def sort(self) -> "Report":
        """Sort every path list lexicographically, in place."""
        self.passed.sort()
        self.skipped.sort()
        self.failed.sort()
        self.non_regular.sort()
        return self

    @property
    def total_files(self) -> int:
        """Number of entries recorded, across all categories."""
        return (
            len(self.passed)
            + len(self.skipped)
            + len(self.failed)
            + len(self.non_regular)
            + len(self.file_errors)
        )

    @property
    def has_problems(self) -> bool:
        """True if any file failed, was non-regular, or could not be read."""
        return bool(self.failed or self.non_regular or self.file_errors)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "passed": list(self.passed),
            "skipped": list(self.skipped),
            "failed": list(self.failed),
            "non_regular": list(self.non_regular),
            "file_errors": {path: str(err) for path, err in sorted(self.file_errors.items())},
        }


def merge_reports(reports: Iterable[Report]) -> Report:
    """
    Concatenate reports from several roots, category by category.

    Paths are root-qualified, so no deduplication happens. The merged lists
    are sorted once at the end for presentation.
    """
    merged = Report()
    for report in reports:
        merged.passed.extend(report.passed)
        merged.skipped.extend(report.skipped)
        merged.failed.extend(report.failed)
        merged.non_regular.extend(report.non_regular)
        merged.file_errors.update(report.file_errors)
    return merged.sort()
