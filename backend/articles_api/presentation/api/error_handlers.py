"""Global exception handlers.

Domain outcomes (not-found, validation) are translated inside the
endpoints. What reaches this module are storage failures, which become a
generic 500 without leaking driver details, and request bodies FastAPI
could not decode at all.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

ARTICLES_PATH = "/articles"


def _is_article_body_error(request: Request, exc: RequestValidationError) -> bool:
    path = request.url.path
    if path != ARTICLES_PATH and not path.startswith(ARTICLES_PATH + "/"):
        return False
    errors = exc.errors()
    return bool(errors) and all(err.get("loc", ())[:1] == ("body",) for err in errors)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Article writes report unusable bodies the same way as invalid fields.
        if not _is_article_body_error(request, exc):
            return await request_validation_exception_handler(request, exc)
        logger.info(
            "Rejected %s %s: undecodable body", request.method, request.url.path
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Invalid article: body must be a JSON object"},
        )

    @app.exception_handler(SQLAlchemyError)
    async def persistence_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            "Persistence failure on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
