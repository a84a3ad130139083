# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the plant care API: what was asked for, how long it took, and whether it went wrong
# 🧪 Purpose (Technical Summary):
# Request logging middleware binding a request id into the logging context for the lifetime of each request,
# with response timing and slow-request warnings.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
EXCLUDED_PATHS = {"/health", "/api/v1/health", "/api/v1/health/live", "/api/v1/health/ready"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    - Propagates or generates the X-Request-ID header
    - Binds request_id / correlation_id into log records for the request
    - Logs method, path, status and processing time
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        correlation_id = request.headers.get("X-Correlation-ID")
        request.state.request_id = request_id

        with log_context(request_id=request_id, correlation_id=correlation_id):
            start_time = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                logger.error(
                    f"{request.method} {request.url.path} failed",
                    exc_info=True,
                    method=request.method,
                    path=request.url.path,
                    processing_time=round(time.perf_counter() - start_time, 4),
                )
                raise

            processing_time = time.perf_counter() - start_time
            log = logger.warning if processing_time > self.slow_request_threshold else logger.info
            log(
                f"{request.method} {request.url.path} -> {response.status_code}",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                processing_time=round(processing_time, 4),
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
