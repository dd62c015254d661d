"""Domain errors raised by the service layer.

Each kind carries the HTTP status the API boundary answers with, so callers
can tell a bad request, a missing record and a blocked delete apart.
"""
from __future__ import annotations

from fastapi import status


class ServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationError(ServiceError):
    """Caller-supplied data violates a precondition."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """A referenced record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """The record still has dependents that block the operation."""

    status_code = status.HTTP_409_CONFLICT
