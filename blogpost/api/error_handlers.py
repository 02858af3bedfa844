"""Error Handlers — global exception handlers for the post API.

Invariants:
    - RPCCallError → the RPC failure body (success=false, message) with the error's status
    - BlogPostError → structured JSON with error code, message, severity
    - RequestValidationError on an RPC route → that route's failure response
      (success=false, message) with status 400; elsewhere → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - RPC failures are already logged by PostRPCHandler; their handler only renders
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blogpost.api.post_rpc import RPCCallError
from blogpost.api.routes.post_service import response_type_for
from blogpost.core.errors import BlogPostError, ErrorSeverity

logger = logging.getLogger(__name__)

RPC_STATUS_HEADER = "X-RPC-Status"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_rpc_error_handler(app)
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_rpc_error_handler(app: FastAPI) -> None:
    """Register RPC failure handler (flag in body, status on the wire)."""

    @app.exception_handler(RPCCallError)
    async def rpc_error_handler(request: Request, exc: RPCCallError):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.response.model_dump(mode="json", by_alias=True),
            headers={RPC_STATUS_HEADER: exc.error_code},
        )


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(BlogPostError)
    async def blogpost_error_handler(request: Request, exc: BlogPostError):
        """Handle post service errors raised outside the RPC handler."""
        logger.error(
            f"BlogPostError: {exc.message}",
            extra={"error_code": exc.code},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        response_cls = response_type_for(request.url.path)
        if response_cls is not None:
            failure = response_cls(
                success=False, message=_describe_validation_errors(exc),
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=failure.model_dump(mode="json", by_alias=True),
                headers={RPC_STATUS_HEADER: "VALIDATION_ERROR"},
            )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """One-line message for an RPC failure response, e.g. 'invalid request: body.id: ...'."""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return f"invalid request: {details}" if details else "invalid request"


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
