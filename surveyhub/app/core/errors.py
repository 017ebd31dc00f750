"""Service errors and their conversion to JSON responses.

Services raise `SurveyHubError` subclasses; the handlers registered by
`register_exception_handlers` turn them (and store failures) into
`{"detail": ...}` bodies with the matching HTTP status.
"""
# app/core/errors.py
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from surveyhub.app.core.logging import get_logs_writer_logger

logger = get_logs_writer_logger()


class SurveyHubError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidPayload(SurveyHubError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class MissingEmail(SurveyHubError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "User email not found"


class NotAuthenticated(SurveyHubError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"


class NotSurveyOwner(SurveyHubError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not authorized"


class SurveyNotFound(SurveyHubError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Survey not found"


async def survey_hub_error_handler(request: Request, exc: SurveyHubError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, NotAuthenticated) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Missing or invalid fields", "errors": jsonable_encoder(exc.errors())},
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Store failure"},
    )


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unexpected failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SurveyHubError, survey_hub_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
