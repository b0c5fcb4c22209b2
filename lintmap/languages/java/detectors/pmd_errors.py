"""Exceptions raised by the PMD adapter.

Messages are fixed strings: callers get no error codes and no partial results.
"""

from __future__ import annotations

PMD_RESULTS_ERROR = (
    "Failed to parse PMD results. Enable logging (STDOUT & STDERR) "
    "and submit an issue if this problem persists."
)
CONFIG_READ_ERROR = "Failed to read PMD Config."
CONFIG_XML_ERROR = "Failed to parse PMD Config as XML."
CONFIG_PARSE_ERROR = "Failed to parse PMD Config."
CONFIG_GENERATE_ERROR = "Failed to generate PMD Config"


class PMDError(Exception):
    """Base class for PMD adapter failures."""


class PMDConfigError(PMDError):
    """Raised when a PMD ruleset file cannot be read or parsed."""


class PMDResultsError(PMDError):
    """Raised when PMD's CSV report cannot be parsed, even after recovery."""

    def __init__(self, message: str = PMD_RESULTS_ERROR) -> None:
        super().__init__(message)
