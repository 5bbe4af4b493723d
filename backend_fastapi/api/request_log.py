"""
Request and error logging for the HTTP layer.

Every entry is a single record. The context passed to `log_error` is
rendered as `key=value` pairs and also attached as `record.context` so that
structured handlers can pick it up.
"""

import logging
import time
from typing import Any

from fastapi import Request

logger = logging.getLogger(__name__)


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def _request_line(request: Request) -> str:
    return f"{request.method} {request.url.path}"


def log_request(request: Request, status_code: int, started_at: float) -> None:
    """Logs the final status and latency of a request.

    `started_at` is a `time.perf_counter()` reading taken on arrival.
    """
    elapsed_ms = (time.perf_counter() - started_at) * 1000
    logger.log(
        _level_for(status_code),
        f"{_request_line(request)} Status: {status_code} {elapsed_ms:.0f}ms",
    )


def log_error(
    error: BaseException, request: Request | None = None, **context: Any
) -> None:
    """Logs one entry describing `error` with its diagnostic context.

    `status_code` in the context is the status the caller is about to send;
    it picks the level and defaults to 500. The traceback is only attached
    for server-side failures.
    """
    status_code = context.get("status_code", 500)
    parts = []
    if request is not None:
        parts.append(_request_line(request))
    parts.append(f"- {type(error).__name__}: {error}")
    if context:
        parts.append(" ".join(f"{key}={value}" for key, value in context.items()))

    exc_info = None
    if status_code >= 500 and error.__traceback__ is not None:
        exc_info = error
    logger.log(
        _level_for(status_code),
        " ".join(parts),
        exc_info=exc_info,
        extra={"context": context},
    )

