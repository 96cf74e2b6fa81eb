"""
Core Layer - Digest extraction, skip patterns, scanning and configuration.
"""

from digestlint.core.config import (
    DigestLintConfig,
    LoggingConfig,
    ReportConfig,
    ScanConfig,
    load_config,
)
from digestlint.core.digest import (
    DIGEST_LENGTHS,
    DigestAlgorithm,
    DigestDescriptor,
    compute_digests,
    describe_digest,
    extract_hex_digest,
    hash_file,
)
from digestlint.core.errors import (
    ConfigurationError,
    DigestLintError,
    FileReadError,
    TraversalError,
)
from digestlint.core.scanner import (
    EntryKind,
    EntryOutcome,
    EntryResult,
    Report,
    Scanner,
    ScannerInterface,
    merge_reports,
)
from digestlint.core.skip_patterns import FORBIDDEN_NAMES, SkipMatcher

__all__ = [
    # Config
    "DigestLintConfig",
    "ScanConfig",
    "ReportConfig",
    "LoggingConfig",
    "load_config",
    # Errors
    "DigestLintError",
    "ConfigurationError",
    "TraversalError",
    "FileReadError",
    # Digest
    "DIGEST_LENGTHS",
    "DigestAlgorithm",
    "DigestDescriptor",
    "extract_hex_digest",
    "describe_digest",
    "compute_digests",
    "hash_file",
    # Skip patterns
    "FORBIDDEN_NAMES",
    "SkipMatcher",
    # Scanner
    "Scanner",
    "ScannerInterface",
    "EntryKind",
    "EntryOutcome",
    "EntryResult",
    "Report",
    "merge_reports",
]
