# 📄 File: garden_assistant/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the assistant: what was asked for, how long the
# answer took, and whether something went wrong. Each request gets an id that appears in
# every log line it causes.
# 🧪 Purpose (Technical Summary):
# Request logging middleware with X-Request-ID propagation into the logging context,
# timing, performance classification and sensitive header filtering.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, garden_assistant.shared.utils.logging, uuid
# 🔄 Connected Modules / Calls From:
# garden_assistant.main (middleware registration)

import time
import uuid
from typing import Any, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from garden_assistant.shared.utils.logging import get_logger, log_context
from . import should_exclude_path

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Features:
    - Request id from X-Request-ID (generated when absent), echoed on the response
    - Request id available to every log record through the logging context
    - Request/response timing with slow request classification
    - Sensitive header filtering
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

        self.sensitive_headers = {
            "authorization",
            "x-api-key",
            "x-goog-api-key",
            "cookie",
        }

        # Model calls routinely take several seconds
        self.slow_request_threshold = 10.0
        self.very_slow_request_threshold = 30.0

        self.request_id_header = "X-Request-ID"

    async def dispatch(self, request: Request, call_next) -> Response:
        if should_exclude_path("logging", request.url.path):
            return await call_next(request)

        request_id = self._get_or_create_request_id(request)
        start_time = time.time()

        with log_context(request_id=request_id):
            logger.info(
                f"{request.method} {request.url.path}",
                extra=self._request_log_data(request, request_id),
            )

            try:
                response = await call_next(request)
            except Exception as e:
                processing_time = time.time() - start_time
                logger.error(
                    f"Unhandled error on {request.method} {request.url.path}: {e}",
                    extra={
                        "event_type": "http_error",
                        "request_id": request_id,
                        "processing_time_ms": round(processing_time * 1000, 2),
                        "exception_type": type(e).__name__,
                    },
                    exc_info=True,
                )
                raise

            processing_time = time.time() - start_time
            logger.performance.log_request(
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=processing_time * 1000,
                extra={"performance": self._classify(processing_time)},
            )

        response.headers[self.request_id_header] = request_id
        return response

    def _get_or_create_request_id(self, request: Request) -> str:
        request_id = request.headers.get(self.request_id_header.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _request_log_data(self, request: Request, request_id: str) -> Dict[str, Any]:
        log_data = {
            "event_type": "http_request",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "headers": self._filter_sensitive_headers(dict(request.headers)),
            "client_ip": request.client.host if request.client else "unknown",
        }

        content_type = request.headers.get("content-type", "")
        if content_type:
            log_data["content_type"] = content_type.split(";")[0]

        return log_data

    def _filter_sensitive_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        filtered = {}
        for key, value in headers.items():
            if key.lower() in self.sensitive_headers:
                filtered[key] = "[REDACTED]"
            else:
                filtered[key] = value
        return filtered

    def _classify(self, processing_time: float) -> str:
        if processing_time > self.very_slow_request_threshold:
            return "very_slow"
        elif processing_time > self.slow_request_threshold:
            return "slow"
        return "normal"
