"""
Error Handlers

- AppError -> its own status with {"error": {"message", "status"}}
- RequestValidationError -> 400 with the validator messages
- anything else -> 500, details only in the log
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import AppError, BadRequestError
from app.core.logging import logger


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app"""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.warning(f"{exc.status_code} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = BadRequestError(validation_messages(exc.errors()))
        logger.warning(f"Validation error on {request.url.path}: {error.message}")
        return JSONResponse(status_code=error.status_code, content=error.to_response())

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=AppError().to_response(),
        )


def validation_messages(errors) -> list:
    """Flatten pydantic errors into "field: message" strings"""
    messages = []
    for e in errors:
        loc = ".".join(str(part) for part in e["loc"] if part not in ("body", "query", "path"))
        messages.append(f"{loc}: {e['msg']}" if loc else e["msg"])
    return messages
