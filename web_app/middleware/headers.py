"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shortlinks.common.headers import get_client_address, get_referrer


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Resolve the visit origin (client address, referrer) once per request."""
    
    async def dispatch(self, request: Request, call_next: Callable):
        """Store client address and referrer in request state."""
        headers = dict(request.headers)
        peer_host = request.client.host if request.client else None
        request.state.client_address = get_client_address(headers, peer_host)
        request.state.referrer = get_referrer(headers)
        
        response = await call_next(request)
        return response
