"""
Domain errors raised by the service layer.

Routers never build HTTP errors for these by hand; ``autoservice.main``
registers a handler that maps each class to its status code.
"""
from fastapi import status


class AutoServiceError(Exception):
    """Base class for errors surfaced to API callers"""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(AutoServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class NotFound(AutoServiceError):
    """Missing entity, or one owned by another user (same surface for both)"""
    status_code = status.HTTP_404_NOT_FOUND


class InvalidStatusTransition(AutoServiceError):
    status_code = status.HTTP_409_CONFLICT


class ReportAlreadyExists(AutoServiceError):
    status_code = status.HTTP_409_CONFLICT


class ConfigurationError(AutoServiceError):
    """A required external credential is missing. Not retryable."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class ProviderError(AutoServiceError):
    """The generative text provider failed or timed out"""
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message: str, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable
