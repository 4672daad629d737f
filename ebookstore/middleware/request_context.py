import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware

from ebookstore.utils.logger import request_id_ctx

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags every request with an id and writes one access log line."""

    async def dispatch(self, request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = request_id_ctx.set(request_id)
        start = time.perf_counter()
        # unhandled errors escape call_next and become a 500 further out
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            latency_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s | query=%s | status=%s | ip=%s | latency=%.1fms",
                request.method,
                request.url.path,
                request.url.query,
                status_code,
                request.client.host if request.client else "-",
                latency_ms,
            )
            request_id_ctx.reset(token)
