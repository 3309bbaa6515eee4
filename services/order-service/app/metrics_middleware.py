"""
Metrics middleware for the order service.

Records request count and duration for every HTTP request.
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Track Prometheus metrics for all HTTP requests.

    Endpoints are labelled with the matched route template
    (``/api/orders/{order_id}``) so order IDs do not become label values.
    """

    def __init__(self, app, track_func: Callable):
        """
        Initialize the middleware.

        Args:
            app: FastAPI application
            track_func: Callable taking (method, endpoint, status_code, duration)
        """
        super().__init__(app)
        self.track_func = track_func

    @staticmethod
    def _endpoint_label(request: Request) -> str:
        for route in request.app.router.routes:
            match, _ = route.matches(request.scope)
            if match == Match.FULL:
                return getattr(route, "path", request.url.path)
        return "unmatched"

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        self.track_func(
            method=request.method,
            endpoint=self._endpoint_label(request),
            status_code=response.status_code,
            duration=time.perf_counter() - start_time,
        )

        return response
