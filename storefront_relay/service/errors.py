import json
import logging
from typing import Any

import cloudinary.exceptions
import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront_relay.adapter.client.http import decode_body
from storefront_relay.service.upload import UploadFailed

UPSTREAM_LOG_LIMIT = 500
FALLBACK_MESSAGE = "Server error"

_logger = logging.getLogger("storefront_relay.upstream")


def _is_empty(body: Any) -> bool:
    # Falsy bodies other than [] and {} get the error envelope instead.
    return not isinstance(body, (list, dict)) and not body


def translate_failure(exc: Exception) -> tuple[int, Any]:
    if isinstance(exc, httpx.HTTPStatusError):
        body = decode_body(exc.response)
        if _is_empty(body):
            body = {"error": str(exc) or FALLBACK_MESSAGE}
        return exc.response.status_code, body
    return 500, {"error": str(exc) or FALLBACK_MESSAGE}


def _preview(body: Any) -> str:
    text = body if isinstance(body, str) else json.dumps(body, default=str)
    return text[:UPSTREAM_LOG_LIMIT]


def relay_error(exc: Exception, request: Request | None = None) -> JSONResponse:
    status, body = translate_failure(exc)
    if request is not None:
        request.state.upstream_status = status
        request.state.upstream_error = type(exc).__name__
    _logger.error(
        "upstream_error",
        extra={"status": status, "error": str(exc) or None, "upstream": _preview(body)},
    )
    return JSONResponse(status_code=status, content=body)


async def _handle_upstream_failure(request: Request, exc: Exception) -> JSONResponse:
    return relay_error(exc, request)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(httpx.HTTPError, _handle_upstream_failure)
    app.add_exception_handler(cloudinary.exceptions.Error, _handle_upstream_failure)
    app.add_exception_handler(UploadFailed, _handle_upstream_failure)
