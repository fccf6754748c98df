"""
# Errors raised by the enumeration engine.

All failures are synchronous usage errors or fixed capacity limits, so nothing
here is retryable.
"""


class SubgenError(Exception):
    """Base class for all enumeration errors."""


class InvalidUniverse(SubgenError, ValueError):
    """A universe size is negative or too large to enumerate."""


class IndexOutOfRange(SubgenError, IndexError):
    """An element index or cursor lies outside the valid range."""


class IteratorExhausted(SubgenError, StopIteration):
    """A subset source was advanced past its last subset."""
