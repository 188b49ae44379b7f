"""
Error taxonomy for the dojo backend.

Every error carries the HTTP status and the minimal message returned to the
caller. Internals are logged server-side only.
"""
from typing import Optional


class DojoError(Exception):
    status_code = 500
    detail = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.detail)
        if detail:
            self.detail = detail


# 401 - no session
class UnauthenticatedError(DojoError):
    status_code = 401
    detail = "Not authenticated"


# 403 - session presented but rejected
class ForbiddenError(DojoError):
    status_code = 403
    detail = "Forbidden"


class TokenExpiredError(ForbiddenError):
    detail = "Token expired"


class InvalidTokenError(ForbiddenError):
    detail = "Invalid token"


# 404 - also covers resources owned by another tenant
class NotFoundError(DojoError):
    status_code = 404
    detail = "Not found"


class UserNotFoundError(NotFoundError):
    detail = "User does not exist"


class StudentNotFoundError(NotFoundError):
    detail = "Student not found"


# 401 at login, before any session exists
class UnauthorizedError(DojoError):
    status_code = 401
    detail = "Unauthorized"


class IncorrectPasswordError(UnauthorizedError):
    detail = "Incorrect password"


class InternalError(DojoError):
    status_code = 500
    detail = "Internal server error"


class TransientFailureError(InternalError):
    pass


class PasswordVerificationError(InternalError):
    pass
