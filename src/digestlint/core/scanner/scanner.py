"""
Scanner implementation for digest-named directory trees.
"""

import errno
import logging
import os
import stat
from collections.abc import Iterable, Iterator
from pathlib import Path

from digestlint.core.digest import describe_digest, hash_file
from digestlint.core.errors import FileReadError, TraversalError
from digestlint.core.skip_patterns import SkipMatcher

from .interfaces import ScannerInterface
from .models import EntryKind, EntryOutcome, EntryResult
from .report import Report

logger = logging.getLogger(__name__)


def classify_entry(entry: os.DirEntry) -> EntryKind:
    """
    Classify a directory entry without following symlinks.

    Symlinks, devices, sockets and FIFOs are all NON_REGULAR.
    """
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryKind.REGULAR
    return EntryKind.NON_REGULAR


class Scanner(ScannerInterface):
    """
    Checks that files are named after a digest of their content.

    A Scanner holds only its compiled skip patterns and can be reused for
    any number of scans.
    """

    def __init__(self, skip_patterns: Iterable[str] | None = None):
        """
        Initialize the Scanner.

        Args:
            skip_patterns: Regular expressions for filenames to exempt

        Raises:
            ConfigurationError: If a skip pattern is invalid or too broad
        """
        self._skip_matcher = SkipMatcher.from_patterns(skip_patterns)

    def scan_directory(self, root_path: str | Path) -> Report:
        """Walk ``root_path`` and return a sorted Report of every entry."""
        report = Report()
        for result in self.iter_results(root_path):
            report.record(result)
        report.sort()

        logger.info(
            f"Scanned {root_path}: {len(report.passed)} passed, "
            f"{len(report.failed)} failed, {len(report.skipped)} skipped, "
            f"{len(report.non_regular)} non-regular, {len(report.file_errors)} unreadable"
        )
        return report

    def iter_results(self, root_path: str | Path) -> Iterator[EntryResult]:
        """
        Walk ``root_path`` depth-first, yielding one result per file.

        A root that is itself a symlink is reported as non-regular and not
        followed.
        """
        root = os.fspath(root_path)
        try:
            root_stat = os.lstat(root)
        except OSError as e:
            raise TraversalError(root, root, e) from e

        if stat.S_ISLNK(root_stat.st_mode):
            logger.debug(f"Root is a symlink, not following: {root}")
            yield EntryResult(path=root, outcome=EntryOutcome.NON_REGULAR)
            return

        if not stat.S_ISDIR(root_stat.st_mode):
            cause = NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), root)
            raise TraversalError(root, root, cause)

        yield from self._walk(root)

    def _walk(self, root: str) -> Iterator[EntryResult]:
        """Visit every entry beneath ``root`` in depth-first lexical order."""
        # One iterator of sorted entries per open directory level
        stack = [iter(self._list_directory(root, root))]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            kind = classify_entry(entry)
            if kind is EntryKind.DIRECTORY:
                stack.append(iter(self._list_directory(root, entry.path)))
            elif kind is EntryKind.NON_REGULAR:
                logger.debug(f"Non-regular entry, not opening: {entry.path}")
                yield EntryResult(path=entry.path, outcome=EntryOutcome.NON_REGULAR)
            else:
                yield self.check_file(entry.path)

    @staticmethod
    def _list_directory(root: str, path: str) -> list[os.DirEntry]:
        try:
            with os.scandir(path) as it:
                return sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise TraversalError(root, path, e) from e

    def check_file(self, path: str) -> EntryResult:
        """
        Check a single regular file.

        Args:
            path: Path of a regular file

        Returns:
            SKIPPED if the name matches a skip pattern, FAILED if the name has
            no digest or the wrong one, ERRORED if the file could not be read,
            PASSED otherwise
        """
        if self._skip_matcher.match_string(path):
            logger.debug(f"Skipping: {path}")
            return EntryResult(path=path, outcome=EntryOutcome.SKIPPED)

        descriptor = describe_digest(path)
        if descriptor is None:
            logger.debug(f"No digest in filename: {path}")
            return EntryResult(path=path, outcome=EntryOutcome.FAILED)

        try:
            actual_digests = hash_file(path, [descriptor.algorithm])
        except FileReadError as e:
            logger.warning(f"Error reading file: {path} - {e.cause}")
            return EntryResult(
                path=path,
                outcome=EntryOutcome.ERRORED,
                expected_digest=descriptor.digest,
                algorithm=descriptor.algorithm,
                error=e,
            )

        actual = actual_digests[0]
        if descriptor.digest in actual_digests:
            outcome = EntryOutcome.PASSED
        else:
            logger.debug(
                f"Digest mismatch: {path} - expected {descriptor.algorithm.value} "
                f"{descriptor.digest}, got {actual}"
            )
            outcome = EntryOutcome.FAILED

        return EntryResult(
            path=path,
            outcome=outcome,
            expected_digest=descriptor.digest,
            actual_digest=actual,
            algorithm=descriptor.algorithm,
        )
