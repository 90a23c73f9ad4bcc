"""
Application Errors

Every error the API reports on purpose derives from AppError and carries the
HTTP status it maps to. Anything else is treated as an internal failure.
"""
from typing import Any, Optional


class AppError(Exception):
    """Base error with a user-facing message and HTTP status"""

    status_code: int = 500

    def __init__(self, message: Any = "Internal Server Error", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> dict:
        return {"error": {"message": self.message, "status": self.status_code}}


class BadRequestError(AppError):
    """400: the caller sent data we cannot act on"""

    status_code = 400

    def __init__(self, message: Any = "Bad Request"):
        super().__init__(message)


class UnauthorizedError(AppError):
    """401: missing, invalid or insufficient credentials"""

    status_code = 401

    def __init__(self, message: Any = "Unauthorized"):
        super().__init__(message)


class NotFoundError(AppError):
    """404: the requested resource does not exist"""

    status_code = 404

    def __init__(self, message: Any = "Not Found"):
        super().__init__(message)
