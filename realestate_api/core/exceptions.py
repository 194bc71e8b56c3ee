# realestate_api/core/exceptions.py
from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from realestate_api.schemas.envelope import Envelope, ErrorKind, fail

logger = logging.getLogger(__name__)

# starlette renamed the 422 constant; keep the number
HTTP_422_UNPROCESSABLE = 422


class RealEstateError(Exception):
    """Base for errors the API maps to an envelope."""
    kind = ErrorKind.internal
    status_code = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RealEstateError):
    kind = ErrorKind.not_found
    status_code = HTTP_404_NOT_FOUND


def envelope_response(status_code: int, envelope: Envelope) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope.model_dump(by_alias=True)),
    )


async def realestate_exception_handler(request: Request, exc: RealEstateError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return envelope_response(exc.status_code, fail(exc.kind, exc.message))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    logger.info("Validation error on %s %s: %s", request.method, request.url.path, errors)
    return envelope_response(
        HTTP_422_UNPROCESSABLE,
        fail(ErrorKind.validation, "Invalid request parameters", data=errors),
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    # Driver text stays in the log only
    logger.exception("Storage failure on %s %s", request.method, request.url.path)
    return envelope_response(
        HTTP_500_INTERNAL_SERVER_ERROR,
        fail(ErrorKind.internal, "The data store is unavailable"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return envelope_response(
        HTTP_500_INTERNAL_SERVER_ERROR,
        fail(ErrorKind.internal, "Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RealEstateError, realestate_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
