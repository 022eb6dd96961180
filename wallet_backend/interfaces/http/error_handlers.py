"""Translation of domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from wallet_backend.core.exceptions import (
    ElementAlreadyExistsError,
    ElementInUseError,
    InvalidSortPropertyError,
    NotFoundError,
    WalletAppError,
)
from wallet_backend.modules.wallets.exceptions import WalletError
from wallet_backend.schemas import ErrorResponse

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[WalletAppError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ElementAlreadyExistsError, status.HTTP_409_CONFLICT),
    (ElementInUseError, status.HTTP_409_CONFLICT),
    (InvalidSortPropertyError, status.HTTP_400_BAD_REQUEST),
    (WalletError, 422),
)


def status_for(exc: WalletAppError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(WalletAppError)
    async def wallet_app_error_handler(request: Request, exc: WalletAppError):
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        body = ErrorResponse(code=type(exc).__name__, message=exc.message)
        return JSONResponse(status_code=status_for(exc), content=body.model_dump())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        body = ErrorResponse(code="InternalError", message="An unexpected error occurred")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump())
