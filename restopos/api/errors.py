from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from restopos.core.exceptions import (
    ConfirmationRequired,
    EmptyCartError,
    NoPendingOrderError,
    NotFoundError,
    PermissionDenied,
)

STATUS_BY_ERROR = {
    EmptyCartError: 400,
    PermissionDenied: 403,
    NotFoundError: 404,
    ConfirmationRequired: 409,
    NoPendingOrderError: 409,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exc_class, status_code in STATUS_BY_ERROR.items():
        app.add_exception_handler(exc_class, _handler(status_code))


def _handler(status_code: int):
    async def handle(request: Request, exc: Exception):
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})
    return handle
