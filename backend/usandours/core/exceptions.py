"""
Domain errors raised by services and translated to HTTP responses in main.py.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that map to an HTTP status code."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str = None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class InvalidCredentialsError(AppError):
    """Unknown email or wrong password. Never says which."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class UnauthorizedError(AppError):
    """Missing, expired or tampered session token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized"


class ForbiddenError(AppError):
    """Authenticated, but not entitled to the operation."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class AlreadyExistsError(ConflictError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class RoomFullError(ConflictError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Room is full"


class UpstreamError(AppError):
    """A third-party call (Google, Cloudinary) failed."""
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upstream service failed"
