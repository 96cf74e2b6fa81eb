"""Exception types for digestlint."""

from pathlib import Path


class DigestLintError(Exception):
    """Base exception for digestlint errors."""

    pass


class ConfigurationError(DigestLintError):
    """Invalid configuration (bad skip pattern, unsupported config file).

    Raised before any scanning begins; no partial configuration is accepted.
    """

    pass


class TraversalError(DigestLintError):
    """The directory walk for a root could not proceed.

    A scan that raises this error returns no Report: whatever had been
    classified for the root up to that point is discarded.
    """

    def __init__(self, root: str | Path, path: str | Path, cause: OSError):
        self.root = str(root)
        self.path = str(path)
        self.cause = cause
        super().__init__(f"failed to walk {self.path!r}: {cause}")


class FileReadError(DigestLintError):
    """A single file could not be opened or fully read.

    Recorded against the file's path in the Report; never aborts a scan.
    """

    def __init__(self, path: str | Path, cause: OSError):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"failed to read {self.path!r}: {cause}")
