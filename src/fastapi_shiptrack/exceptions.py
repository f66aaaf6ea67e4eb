"""Error kinds and their HTTP exception handlers."""

from enum import StrEnum

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class ErrorKind(StrEnum):
    ALREADY_REGISTERED = "already_registered"
    NOT_REGISTERED = "not_registered"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    INVALID_STATE = "invalid_state"
    SHIPMENT_ERROR = "shipment_error"


class ShiptrackError(Exception):
    """Base class for every failure a core operation can report."""

    kind = ErrorKind.SHIPMENT_ERROR


class AlreadyRegisteredError(ShiptrackError):
    kind = ErrorKind.ALREADY_REGISTERED


class NotRegisteredError(ShiptrackError):
    kind = ErrorKind.NOT_REGISTERED


class UnauthorizedError(ShiptrackError):
    kind = ErrorKind.UNAUTHORIZED


class InvalidStateError(ShiptrackError):
    kind = ErrorKind.INVALID_STATE


class NotFoundError(ShiptrackError):
    kind = ErrorKind.NOT_FOUND


class ShipmentNotFoundError(NotFoundError):
    def __init__(self, shipment_id: str) -> None:
        self.shipment_id = shipment_id
        super().__init__("Shipment not found")


class ReturnRequestNotFoundError(NotFoundError):
    def __init__(self, return_id: str) -> None:
        self.return_id = return_id
        super().__init__("Return request not found")


class UserNotFoundError(NotFoundError):
    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__("User not found")


def _error_response(status_code: int, exc: ShiptrackError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": str(exc),
            "code": str(exc.kind),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register shipping exception handlers on a FastAPI app.

    More specific handlers must be registered first so FastAPI
    matches them before the generic ShiptrackError handler.

    Handler order (most specific first):
    1. NotFoundError → 404
    2. AlreadyRegisteredError → 409
    3. InvalidStateError → 409
    4. NotRegisteredError → 403
    5. UnauthorizedError → 403
    6. ShiptrackError → 400 (catch-all)
    """

    @app.exception_handler(NotFoundError)
    async def _not_found(
        request: Request,
        exc: NotFoundError,
    ) -> JSONResponse:
        return _error_response(404, exc)

    @app.exception_handler(AlreadyRegisteredError)
    async def _already_registered(
        request: Request,
        exc: AlreadyRegisteredError,
    ) -> JSONResponse:
        return _error_response(409, exc)

    @app.exception_handler(InvalidStateError)
    async def _invalid_state(
        request: Request,
        exc: InvalidStateError,
    ) -> JSONResponse:
        return _error_response(409, exc)

    @app.exception_handler(NotRegisteredError)
    async def _not_registered(
        request: Request,
        exc: NotRegisteredError,
    ) -> JSONResponse:
        return _error_response(403, exc)

    @app.exception_handler(UnauthorizedError)
    async def _unauthorized(
        request: Request,
        exc: UnauthorizedError,
    ) -> JSONResponse:
        return _error_response(403, exc)

    @app.exception_handler(ShiptrackError)
    async def _shiptrack_error(
        request: Request,
        exc: ShiptrackError,
    ) -> JSONResponse:
        return _error_response(400, exc)
