"""Domain errors raised by services and translated to HTTP responses by the API layer."""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors a service reports to its caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Malformed or missing required fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(ServiceError):
    """A slide, slideshow or other record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class BoundaryError(ServiceError):
    """Move up at the top or move down at the bottom of a slideshow."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ServiceError):
    """A uniqueness or capacity constraint would be violated."""

    status_code = status.HTTP_409_CONFLICT


class StorageError(ServiceError):
    """The database failed while running a transaction."""
