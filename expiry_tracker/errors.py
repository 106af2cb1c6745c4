"""
Typed failures raised by the service layer.

Each error carries the HTTP status the API boundary answers with, so the
exception handler in main.py can map them without knowing every subclass.
"""

from typing import Optional


class AppError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateEmailError(AppError):
    status_code = 409
    default_message = "This email is already registered"


class InvalidCredentialsError(AppError):
    status_code = 401
    default_message = "Invalid email or password"


class InvalidOrExpiredTokenError(AppError):
    status_code = 400
    default_message = "Password reset token is invalid or has expired"


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid input"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found"


class UnauthenticatedError(AppError):
    status_code = 401
    default_message = "Access denied. Invalid or expired token"
