"""
Exception handlers shaping every error response as ``{"message": ...}``.

* Request validation failures become 400 ``Validation error`` with a
  list of field level ``errors``.
* ``HTTPException`` keeps its status code; its detail becomes
  ``message``.
* Anything else is logged with its traceback and answered with a
  generic 500 so no internal detail reaches the caller.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def format_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors to ``{code, path, message}`` entries.

    The leading location segment (``body``, ``path``, ``query``) is
    dropped so ``path`` names the offending field directly.
    """
    errors = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        if loc and loc[0] in {"body", "path", "query"}:
            loc = loc[1:]
        errors.append({"code": error.get("type"), "path": loc, "message": error.get("msg")})
    return errors


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "errors": format_validation_errors(exc)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
