from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log one ``[METHOD] /path -> status (ms)`` line per API request.

    Docs, schema and favicon requests are left out. The docs path comes from
    the settings the app was built with.
    """

    _SKIP_PREFIXES = ("/openapi", "/favicon.ico")

    async def dispatch(self, request: Request, call_next):
        started_at = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            if not self._should_skip(request):
                duration_ms = int((time.perf_counter() - started_at) * 1000)
                logger.info(
                    "[%s] %s -> %s (%d ms)",
                    request.method,
                    request.url.path,
                    status_code,
                    duration_ms,
                )

    def _should_skip(self, request: Request) -> bool:
        path = request.url.path
        docs_url = request.app.state.settings.DOCS_URL
        if docs_url and path.startswith(docs_url):
            return True
        return path.startswith(self._SKIP_PREFIXES)
