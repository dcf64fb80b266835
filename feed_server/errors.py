"""
Error responses: every failure leaves the API as {"message": ...}.

Unhandled exceptions (data store failures included) become 500 with a
"Server error:" message; validation problems become 400.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _validation_message(errors) -> str:
    details = ", ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()) if p not in ('query', 'body', 'path'))}: {err.get('msg')}"
        for err in errors
    )
    return f"Validation error: {details}"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": _validation_message(exc.errors())})


async def model_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": _validation_message(exc.errors())})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[errors] %s %s failed: %s", request.method, request.url.path, exc)
    message = str(exc) or "An unexpected error occurred"
    return JSONResponse(status_code=500, content={"message": f"Server error: {message}"})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the {"message": ...} error handlers to the app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, model_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
