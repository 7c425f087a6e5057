"""
Application error types.

Services raise these; app.main renders them as {"detail": ...} with the
matching status code.
"""

from typing import Optional


class AppError(Exception):
    status_code: int = 500
    default_detail: str = "Internal server error"

    def __init__(self, detail: Optional[str] = None, code: Optional[str] = None):
        self.detail = detail or self.default_detail
        self.code = code
        super().__init__(self.detail)


class PersistenceError(AppError):
    """Any failure reported by the store: network, constraint, permission."""
    status_code = 500
    default_detail = "Database operation failed"


class NotFoundError(AppError):
    status_code = 404
    default_detail = "Not found"


class ConflictError(AppError):
    status_code = 409
    default_detail = "Conflict"


class InvalidInputError(AppError):
    status_code = 400
    default_detail = "Invalid input"


class AuthError(AppError):
    status_code = 401
    default_detail = "Authentication required"


class ForbiddenError(AppError):
    status_code = 403
    default_detail = "Forbidden"


class EmailDeliveryError(AppError):
    status_code = 502
    default_detail = "Failed to send email"
