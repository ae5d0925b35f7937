"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the handlers registered in
``register_exception_handlers`` turn them into ``{"detail": ...}`` responses.
Store failures (SQLAlchemyError) are rendered as 500 with the driver message.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from libbook.core.logging import get_logger
from libbook.core.metrics import record_store_error

logger = get_logger(__name__)


class LibBookError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(LibBookError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.record_id = record_id


class ConflictError(LibBookError):
    status_code = status.HTTP_409_CONFLICT


async def libbook_error_handler(request: Request, exc: LibBookError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("store_failure", error=str(exc), error_type=type(exc).__name__)
    record_store_error(request.method.lower())
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LibBookError, libbook_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
