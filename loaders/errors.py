"""
Failure types raised inside the data loaders.

Public loader methods catch these, log them, and hand callers either a
complete result or None. They never reach the scoring engine.
"""


class DataUnavailable(Exception):
    """Base class: a data source could not supply a complete reading."""


class NetworkFailure(DataUnavailable):
    """Service unreachable, timed out, or answered with a non-2xx status."""

    def __init__(self, message: str, transient: bool = True, status_code: int = None):
        super().__init__(message)
        self.transient = transient
        self.status_code = status_code


class NoResults(DataUnavailable):
    """The service answered but found nothing for the query."""


class MalformedResponse(DataUnavailable):
    """The payload did not have the expected shape."""
