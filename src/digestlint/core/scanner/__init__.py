"""
Scanner module for digestlint.

Provides recursive directory scanning that classifies every entry and
checks that regular files are named after a digest of their content.
"""

from .interfaces import ScannerInterface
from .models import EntryKind, EntryOutcome, EntryResult
from .report import Report, merge_reports
from .scanner import Scanner, classify_entry

__all__ = [
    # Main classes
    "Scanner",
    "ScannerInterface",
    # Models
    "EntryKind",
    "EntryOutcome",
    "EntryResult",
    "Report",
    # Functions
    "classify_entry",
    "merge_reports",
]
