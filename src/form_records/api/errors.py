"""Exception types raised by the HTTP layer and their response mapping."""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RecordNotFoundError(Exception):
    """Raised when a request references a record id that is not stored."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Record {record_id} not found")
        self.record_id = record_id


class RecordIdMismatchError(Exception):
    """Raised when an update body carries a different id than the path."""

    def __init__(self, path_id: int, body_id: int | None) -> None:
        super().__init__(f"Body id {body_id} does not match path id {path_id}")
        self.path_id = path_id
        self.body_id = body_id


def validation_errors_by_field(exc: RequestValidationError) -> dict[str, str]:
    """Map each invalid field name to the first message reported for it."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        location = error.get("loc") or ("body",)
        field = str(location[-1])
        errors.setdefault(field, _error_message(error))
    return errors


def _error_message(error: dict) -> str:
    # Custom validators surface as "Value error, <message>"; keep the message.
    context = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in context:
        return str(context["error"])
    return str(error.get("msg", "invalid value"))


def install_error_handlers(app: FastAPI) -> None:
    """Register the exception-to-response mapping on the app."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=validation_errors_by_field(exc),
        )

    @app.exception_handler(RecordNotFoundError)
    async def handle_not_found(
        request: Request, exc: RecordNotFoundError
    ) -> Response:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(RecordIdMismatchError)
    async def handle_id_mismatch(
        request: Request, exc: RecordIdMismatchError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"id": "must match the id in the path"},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )
