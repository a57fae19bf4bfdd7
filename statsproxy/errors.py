"""Custom exceptions and centralized FastAPI error handlers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class StatsProxyError(Exception):
    """Base exception carrying the HTTP status and a short error title."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error: str = "Internal server error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error


class UpstreamError(StatsProxyError):
    """An upstream API answered with a non-success status or could not be reached.

    ``upstream_status`` is ``None`` for transport failures.
    """

    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        reason: str = "",
    ) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        self.reason = reason

    @classmethod
    def from_status(cls, status: int, reason: str, source: str = "NHL") -> UpstreamError:
        return cls(
            f"{source} API error: {status} {reason}",
            upstream_status=status,
            reason=reason,
        )


class InvalidRequestError(StatsProxyError):
    def __init__(self, error: str, message: str | None = None) -> None:
        super().__init__(message or error, status_code=400, error=error)
        self.detail = message


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(InvalidRequestError)
    async def handle_invalid_request(_request: Request, exc: InvalidRequestError):
        body = {"error": exc.error}
        if exc.detail:
            body["message"] = exc.detail
        return JSONResponse(body, status_code=exc.status_code)

    @app.exception_handler(StatsProxyError)
    async def handle_statsproxy_error(request: Request, exc: StatsProxyError):
        log.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            {"error": exc.error, "message": exc.message},
            status_code=exc.status_code,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        log.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error", "message": str(exc)},
            status_code=500,
        )
