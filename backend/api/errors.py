"""
Exception handlers.

Maps the RetailAuditError hierarchy to HTTP responses so routes can let
module exceptions propagate.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfirmationRequiredError,
    DataAccessError,
    NotFoundError,
    RetailAuditError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching class wins
STATUS_CODES: list[tuple[type[RetailAuditError], int]] = [
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConfirmationRequiredError, 400),
    (ValidationError, 422),
    (DataAccessError, 502),
]


def status_for(exc: RetailAuditError) -> int:
    for exc_type, status_code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def handle_retail_audit_error(request: Request, exc: RetailAuditError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.code}")
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RetailAuditError, handle_retail_audit_error)
