"""
Application errors.

Raised by the data-access layer for conditions a caller can act on.
Anything else (constraint violations, connection failures) is left to
propagate as the database driver raised it.
"""


class AppError(Exception):
    """Base error carrying a message and an HTTP-style status code."""

    status = 500

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class BadRequestError(AppError):
    """Raised when the request cannot be satisfied as given."""

    status = 400


class NotFoundError(AppError):
    """Raised when the requested row does not exist."""

    status = 404
