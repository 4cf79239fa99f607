"""Custom exceptions for defect database queries."""

from __future__ import annotations

from typing import Any


class ApiQueryError(Exception):
    """Base exception for query failures."""


class ConfigurationError(ApiQueryError):
    """Raised when a required database handle is not configured."""


class TransportError(ApiQueryError):
    """Raised when the store is unreachable, times out or rejects the request."""


class DecodeError(ApiQueryError):
    """Raised when a stored document does not fit the entity shape."""

    def __init__(
        self,
        message: str,
        collection: str | None = None,
        document_id: Any = None,
    ):
        super().__init__(message)
        self.collection = collection
        self.document_id = document_id


class QueryCancelledError(ApiQueryError):
    """Raised when the caller cancels an in-flight query."""
