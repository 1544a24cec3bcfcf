"""Fault handling for the server bridge.

Maps HTTPError exceptions and unexpected failures to Response objects.
Nothing here raises: every fault ends as a response.
"""

import logging
import traceback

from perch.config import ServerConfig
from perch.errors import HTTPError
from perch.http.response import Response

logger = logging.getLogger("perch.server")


def handle_http_error(exc: HTTPError, method: str, url: str) -> Response:
    """Map an HTTPError to a plain-text Response with its status."""
    logger.debug("%d %s %s — %s", exc.status, method, url, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    response = Response.text_body(detail, status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(
    error: object,
    method: str,
    url: str,
    config: ServerConfig,
) -> Response:
    """Log a handler fault and turn it into a 500 response.

    The body is the error message, the full traceback in debug mode, or
    a generic text when ``expose_errors`` is off.
    """
    exc_info = error if isinstance(error, BaseException) else None
    logger.error("500 %s %s: %s", method, url, error, exc_info=exc_info)

    if config.debug and exc_info is not None:
        body = "".join(traceback.format_exception(exc_info))
    elif config.expose_errors:
        body = str(error) or type(error).__name__
    else:
        body = "Internal Server Error"
    return Response.text_body(body, status=500)
