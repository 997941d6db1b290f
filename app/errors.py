"""Service-level error taxonomy.

Every service operation reports failure through one of these exceptions; the
handlers in ``app.error_handlers`` turn them into JSON responses.
"""

from typing import Any, List, Optional

from fastapi import status


class ServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message}


class ValidationError(ServiceError):
    """Malformed or missing input, including identifiers that are not UUIDs."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Validation Error", errors: Optional[List[dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_response(self) -> dict[str, Any]:
        body = super().to_response()
        body["errors"] = self.errors
        return body


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class StoreError(ServiceError):
    """Any persistence failure not covered by the other kinds."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error", details: str = "Database operation failed"):
        super().__init__(message)
        self.details = details

    def to_response(self) -> dict[str, Any]:
        body = super().to_response()
        body["details"] = self.details
        return body
