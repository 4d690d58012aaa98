import json
import logging
import time
import uuid

from fastapi import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from storefront_relay.common.config import Settings

_EXTRA_KEYS = (
    "request_id",
    "method",
    "path",
    "route",
    "status_code",
    "latency_ms",
    "client_ip",
    "status",
    "error",
    "upstream",
    "upstream_status",
    "upstream_error",
)


class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            {key: getattr(record, key) for key in _EXTRA_KEYS if getattr(record, key, None) is not None}
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(settings: Settings) -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        JsonLogFormatter()
        if settings.log_json
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root.addHandler(handler)


_access_logger = logging.getLogger("storefront_relay.access")


def _route_template(request: Request) -> str | None:
    route = request.scope.get("route")
    return getattr(route, "path", None)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log per request, tagging responses that relay an upstream failure.

    The error handlers record ``upstream_status`` and ``upstream_error`` on
    ``request.state``; such requests are logged as ``request_relayed_failure``
    at WARNING so they can be told apart from the relay's own faults.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = request_id
        start = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            _access_logger.exception(
                "request_failed",
                extra=self._extra(request, request_id, 500, start),
            )
            raise

        extra = self._extra(request, request_id, response.status_code, start)
        if "upstream_status" in extra:
            _access_logger.warning("request_relayed_failure", extra=extra)
        else:
            _access_logger.info("request_complete", extra=extra)
        response.headers["x-request-id"] = request_id
        return response

    @staticmethod
    def _extra(request: Request, request_id: str, status_code: int, start: float) -> dict:
        extra = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "route": _route_template(request),
            "status_code": status_code,
            "latency_ms": round((time.perf_counter() - start) * 1000.0, 2),
            "client_ip": request.client.host if request.client else None,
        }
        upstream_status = getattr(request.state, "upstream_status", None)
        if upstream_status is not None:
            extra["upstream_status"] = upstream_status
            extra["upstream_error"] = getattr(request.state, "upstream_error", None)
        return extra
