"""
digestlint - checks that static assets are named after their content digest.
"""

from digestlint.core import (
    ConfigurationError,
    Report,
    Scanner,
    TraversalError,
    merge_reports,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Report",
    "Scanner",
    "TraversalError",
    "merge_reports",
    "__version__",
]
