"""
FastAPI application setup and configuration.

Architecture:
- create_api_app(application) builds one FastAPI app bound to one Application
- All routes live under /api
- Errors use a JSON envelope {"error": CODE, ...}; NavhubError subclasses
  carry their own code and are mapped to a status code here
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from navhub.__version__ import __version__
from navhub.helpers.dto.validation_dto import VALIDATION_ERROR
from navhub.helpers.exceptions import (
    ForbiddenError,
    InvalidIntervalError,
    NavhubError,
    NavigationValidationError,
    NotFoundError,
    RegistrationRequestError,
    RouteRegistrationError,
    UnauthorizedError,
)
from navhub.helpers.logging_helper import clear_log_context, set_log_context
from navhub.interfaces.api.web.router import router

if TYPE_CHECKING:
    from navhub.app import Application

logger = logging.getLogger(__name__)

# First match wins; anything unlisted is a 500
_STATUS_BY_ERROR: tuple[tuple[type[NavhubError], int], ...] = (
    (UnauthorizedError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (NavigationValidationError, 400),
    (RegistrationRequestError, 400),
    (RouteRegistrationError, 400),
    (InvalidIntervalError, 400),
)


def status_for(exc: NavhubError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


# ----------------------------------------------------------------------
#  Exception handlers
# ----------------------------------------------------------------------
async def navhub_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, NavhubError)
    status = status_for(exc)
    if status >= 500:
        logger.error(f"[API] {request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"[API] {request.method} {request.url.path} -> {status} {exc.code}")
    return JSONResponse(status_code=status, content=jsonable_encoder(exc.to_dict()))


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(
            {
                "error": VALIDATION_ERROR,
                "message": "Request is malformed",
                "details": exc.errors(),
            }
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[API] Exception: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


# ----------------------------------------------------------------------
#  App factory
# ----------------------------------------------------------------------
def create_api_app(application: Application) -> FastAPI:
    """
    Build the FastAPI app for an already-started Application.

    Args:
        application: Application whose services back the endpoints

    Returns:
        Configured FastAPI instance
    """

    @asynccontextmanager
    async def lifespan(_app_instance: FastAPI):
        logger.info("[API] FastAPI starting (Application already initialized)")
        try:
            yield
        finally:
            logger.info("[API] FastAPI shutting down...")
            application.stop()

    api_app = FastAPI(title="navhub", version=__version__, lifespan=lifespan)
    api_app.state.application = application

    @api_app.middleware("http")
    async def request_log_context(request: Request, call_next):
        set_log_context(method=request.method, path=request.url.path)
        try:
            return await call_next(request)
        finally:
            clear_log_context()

    api_app.add_exception_handler(NavhubError, navhub_error_handler)
    api_app.add_exception_handler(RequestValidationError, request_validation_handler)
    api_app.add_exception_handler(Exception, unhandled_error_handler)
    api_app.include_router(router)
    return api_app
