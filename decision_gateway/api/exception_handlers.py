"""Exception handlers keeping every error in the DecisionResponse shape"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from decision_gateway.api.dependencies import get_request_id
from decision_gateway.api.loan.decision import UNEXPECTED_ERROR_MESSAGE, decision_response
from decision_gateway.api.loan.schemas import DecisionResponse

logger = logging.getLogger(__name__)

INVALID_PAYLOAD_MESSAGE = "Invalid request payload"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are bad requests, not 422s"""
    fields = [".".join(str(loc) for loc in error["loc"]) for error in exc.errors()]
    logger.warning(
        f"Validation error on {request.url.path}: {fields}",
        extra={"request_id": get_request_id(request)},
    )

    return decision_response(
        status.HTTP_400_BAD_REQUEST,
        DecisionResponse(error_message=INVALID_PAYLOAD_MESSAGE),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a message that leaks no detail"""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        extra={"request_id": get_request_id(request)},
        exc_info=True,
    )

    return decision_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        DecisionResponse(error_message=UNEXPECTED_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
