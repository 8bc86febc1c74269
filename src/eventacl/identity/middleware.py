"""Host identity middleware."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

HOST_USER_HEADER = "X-Host-User"


class IdentityMiddleware(BaseHTTPMiddleware):
    """Copies the host's user id header onto ``request.state.host_user_id``.

    The host CMS authenticates the user; this service only trusts the
    header it forwards.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        user_id = request.headers.get(HOST_USER_HEADER, "").strip()
        request.state.host_user_id = user_id or None
        return await call_next(request)
