"""Exception types raised by the record store."""

from __future__ import annotations


class MockServerError(Exception):
    """Base class for all mock server exceptions."""


class StorageIOError(MockServerError, OSError):
    """Raised when the backing file cannot be read or written."""


class DocumentParseError(MockServerError):
    """Raised when the document or a request body is not valid JSON."""


class MalformedRecordError(DocumentParseError):
    """Raised when a stored record is not an object or carries no numeric id."""


class InvalidIdError(MockServerError, ValueError):
    """Raised when an id path segment does not parse as a number."""


class NotFoundError(MockServerError, LookupError):
    """Raised when a collection or record does not exist."""
