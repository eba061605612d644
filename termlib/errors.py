"""
Exceptions raised by term structure queries.

All of them except :class:`UnresolvedReferenceDateError` also derive from
``ValueError`` so callers that only catch ``ValueError`` keep working.
"""


class TermStructureError(Exception):
    """Base exception for term structure errors."""


class OutOfRangeError(TermStructureError, ValueError):
    """Date or time precedes the reference date or exceeds the curve's max."""


class InvalidQuoteError(TermStructureError, ValueError):
    """A quote feeding the curve has no valid value."""


class DomainError(TermStructureError, ValueError):
    """Input outside the mathematical domain of a computation."""


class UnresolvedReferenceDateError(TermStructureError, RuntimeError):
    """Reference date queried before it was set or could be derived."""
