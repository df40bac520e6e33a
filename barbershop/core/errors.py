from __future__ import annotations

import logging
import re
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

_ERROR_CODE_PATTERN = re.compile(r"^[a-z_]+$")
_STATUS_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    429: "rate_limited",
}


def validation_fields(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    """Agrupa os erros do pydantic por campo.

    `("body", "email")` vira `email`; um corpo ausente ou JSON inválido fica
    sob `body`.
    """
    fields: Dict[str, List[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if error.get("type") == "json_invalid":
            key = "body"
        elif len(loc) > 1 and loc[0] in {"body", "path", "query"}:
            key = ".".join(loc[1:])
        else:
            key = ".".join(loc) or "body"
        fields.setdefault(key, []).append(error.get("msg", "invalid"))
    return fields


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    fields = validation_fields(list(exc.errors()))
    logger.info("validation failed path=%s fields=%s", request.url.path, sorted(fields))
    return JSONResponse(status_code=400, content={"error": "validation_error", "fields": fields})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if not isinstance(detail, str) or not _ERROR_CODE_PATTERN.match(detail):
        detail = _STATUS_CODES.get(exc.status_code, "error")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("constraint violation path=%s error=%s", request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"error": "conflict"})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error path=%s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "internal_error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
