"""
Domain errors raised by repositories and translated to HTTP responses by the
exception handlers registered in src.api.main.
"""

from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base class for errors that carry an HTTP status and a machine-readable type."""

    status_code: int = 500
    error_type: str = "domain_error"

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(DomainError):
    """A referenced record does not exist."""

    status_code = 404
    error_type = "not_found"


class ConflictError(DomainError):
    """A write would violate a uniqueness constraint."""

    status_code = 400
    error_type = "conflict"
