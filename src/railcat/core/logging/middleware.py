"""Structured logging setup and per-request access logging."""

import logging
import time
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from railcat.core.constants import UNLOGGED_PATH_PREFIXES


logger = structlog.get_logger()


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        log_level: Minimum level name (DEBUG, INFO, WARNING, ...)
        json_logs: Render JSON lines instead of the console format
    """
    renderer: Any = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one event when a request arrives and one when it is answered.

    Catalog reads are public, so the completion event carries the token
    subject only for requests a route has authenticated. Probe and docs
    paths are not logged.
    """

    def __init__(
        self,
        app: ASGIApp,
        skip_prefixes: tuple[str, ...] = UNLOGGED_PATH_PREFIXES,
    ) -> None:
        super().__init__(app)
        self.skip_prefixes = skip_prefixes

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        if path.startswith(self.skip_prefixes):
            return await call_next(request)

        log = logger.bind(method=request.method, path=path)
        log.info(
            "request_started",
            client_ip=client_address(request),
            query=str(request.url.query) or None,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception("request_failed", duration_ms=_elapsed_ms(started), error=str(exc))
            raise

        status_code = response.status_code
        if status_code >= 500:
            emit = log.error
        elif status_code >= 400:
            emit = log.warning
        else:
            emit = log.info
        emit(
            "request_completed",
            status_code=status_code,
            duration_ms=_elapsed_ms(started),
            subject=getattr(request.state, "subject", None),
        )

        return response


def client_address(request: Request) -> str | None:
    """Return the caller's address, honouring X-Forwarded-For behind a proxy."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",", 1)[0].strip()
    return request.client.host if request.client else None
