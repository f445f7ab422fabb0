"""Request ID propagation."""

from uuid import uuid4

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from railcat.core.constants import REQUEST_ID_HEADER


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag every request with an ID.

    A caller-supplied X-Request-ID is reused, otherwise a UUID is
    generated. The ID is stored on ``request.state.request_id`` (problem
    responses report it as ``trace_id``), bound into the structlog context
    for the duration of the request and echoed in the response header.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
