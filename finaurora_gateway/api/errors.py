"""Exception handlers mapping domain errors to HTTP responses"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from finaurora_gateway.api.dependencies import get_request_id
from finaurora_gateway.domain.exceptions import InvalidArgumentError
from finaurora_gateway.infrastructure.observability.metrics import invalid_argument_counter


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    """Invalid loan terms or applicant figures → 422 with the domain message"""
    operation = request.url.path.rstrip("/").rsplit("/", 1)[-1]
    invalid_argument_counter.labels(operation=operation).inc()
    logging.warning(f"Invalid {operation} request: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.error(f"Unexpected error: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
