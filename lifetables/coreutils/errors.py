"""
Error Taxonomy

Every failure the collector can report, grouped by kind so callers can tell
a network problem from a page whose layout could not be understood, or from
data that breaks a survivorship invariant.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    STRUCTURAL = "structural"
    VALIDATION = "validation"


class LifeTablesError(Exception):
    """Base class for all collector errors."""

    kind: ErrorKind

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class TransportError(LifeTablesError):
    """Connection failure, timeout or non-success HTTP status."""

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context=context)
        self.url = url
        self.status_code = status_code


class StructuralError(LifeTablesError):
    """The page layout did not allow the column roles to be established."""

    kind = ErrorKind.STRUCTURAL


class NoTableFound(StructuralError):
    """The document contains no <table> element."""


class AmbiguousColumns(StructuralError):
    """More than two cells in a row carry the radix sentinel."""


class UnpairedSeriesColumn(StructuralError):
    """Only one series column was found in the detection row."""


class MissingRowIndexColumn(StructuralError):
    """Both series columns were found but no row index column."""


class ValidationError(LifeTablesError):
    """Extracted data violates a survivorship invariant."""

    kind = ErrorKind.VALIDATION


class OutOfRangeValue(ValidationError):
    """A survivorship probability is greater than 1."""


class NonMonotonicSequence(ValidationError):
    """A series value is greater than the value at the previous age."""


class InsufficientData(ValidationError):
    """Series lengths differ or are too short to be a full life table."""


class UnparsableValue(ValidationError):
    """A series cell on an accepted data row is not an unsigned integer."""
