"""
Abstract interfaces for digest scanning operations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from .models import EntryResult
from .report import Report


class ScannerInterface(ABC):
    """
    Abstract interface for digest-named file scanning.

    Implementations walk a single directory tree and classify every entry
    beneath it.
    """

    @abstractmethod
    def iter_results(self, root_path: str | Path) -> Iterator[EntryResult]:
        """
        Walk a directory and yield one EntryResult per non-directory entry.

        Args:
            root_path: Existing directory to scan

        Yields:
            EntryResult objects in depth-first lexical order

        Raises:
            TraversalError: If the walk cannot proceed
        """
        pass

    @abstractmethod
    def scan_directory(self, root_path: str | Path) -> Report:
        """
        Walk a directory and return its sorted Report.

        Args:
            root_path: Existing directory to scan

        Returns:
            Report with every path list sorted

        Raises:
            TraversalError: If the walk cannot proceed; no partial Report
                is returned
        """
        pass
