"""Exception handlers for the FastAPI application."""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import AppException, ValidationFailedError

logger = structlog.get_logger()


def _field_error(error: dict[str, Any]) -> dict[str, Any]:
    """Flatten one pydantic error into ``{msg, param, location}``."""
    loc = [str(part) for part in error.get("loc", ())]
    location = loc[0] if loc else None
    param = loc[-1] if len(loc) > 1 else None

    if error.get("type") == "missing":
        msg = f"{param} is required" if param else "Field required"
    elif error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        msg = str(error["ctx"]["error"])
    else:
        msg = error.get("msg", "Invalid value")

    return {"msg": msg, "param": param, "location": location}


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(ValidationFailedError)
    async def validation_failed_handler(
        request: Request, exc: ValidationFailedError
    ) -> JSONResponse:
        """Handle input rejected by a service (duplicate e-mail, bad credentials)."""
        logger.info("validation_failed", error_code=exc.error_code.value, message=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"errors": exc.details})

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle custom application exceptions."""
        logger.warning(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": exc.message, "error_code": exc.error_code.value},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions from FastAPI/Starlette."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle Pydantic validation errors as 400 with field-level messages."""
        errors = [_field_error(error) for error in exc.errors()]
        logger.info("validation_error", errors=errors)
        return JSONResponse(status_code=400, content={"errors": errors})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        """Handle unexpected exceptions without leaking details."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=True,
        )
        return PlainTextResponse("Server Error", status_code=500)
