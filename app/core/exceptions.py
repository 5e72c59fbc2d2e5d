"""
Domain exceptions and FastAPI exception handlers
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class JsaError(Exception):
    """Base class for errors raised while producing a JSA document"""


class DocumentRenderError(JsaError):
    """Raised when the PDF library fails to produce a document"""


class DocumentStorageError(JsaError):
    """Raised when a rendered document cannot be persisted or linked"""


def flatten_validation_errors(errors: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Group Pydantic errors by dotted field path.

    Errors without a field location (e.g. a body that is not an object)
    are collected under ``formErrors``.
    """
    form_errors: List[str] = []
    field_errors: Dict[str, List[str]] = {}

    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        message = error.get("msg", "Invalid value")
        if loc:
            field_errors.setdefault(".".join(loc), []).append(message)
        else:
            form_errors.append(message)

    return {"formErrors": form_errors, "fieldErrors": field_errors}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
        return JSONResponse(
            {"error": exc.detail},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        details = flatten_validation_errors(exc.errors())
        logger.info(
            "Validation error on %s: %s",
            request.url.path,
            list(details["fieldErrors"]) or details["formErrors"],
        )
        return JSONResponse(
            {"error": details}, status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(JsaError)
    async def jsa_exception_handler(request: Request, exc: JsaError):
        logger.error(
            "Failed to produce document on %s", request.url.path, exc_info=exc
        )
        return JSONResponse(
            {"error": "Server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s", request.url.path)
        return JSONResponse(
            {"error": "Server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
