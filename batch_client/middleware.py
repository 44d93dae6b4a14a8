"""
Request middleware for JobStatusClient.

A middleware is an async callable ``(request, call_next) -> response`` wrapped
around the core send step. ``compose`` chains them so the first middleware in
the list is the outermost one:

    handler = compose(send, [normalize_errors, log_exchange])
    response = await handler(request)

JobStatusClient always puts normalize_errors outermost and runs the
configurable chain (DEFAULT_MIDDLEWARES unless overridden) inside it, so extra
concerns (metrics, tracing) never change the error shape callers see.
"""

import logging
from typing import Any, Awaitable, Callable, Iterable

import httpx

from batch_client.errors import (
    JobStatusClientError,
    LocalError,
    NetworkError,
    ServerError,
)

logger = logging.getLogger(__name__)

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]
Middleware = Callable[[httpx.Request, Handler], Awaitable[httpx.Response]]

# Request could not be issued at all
_LOCAL_HTTPX_ERRORS = (
    httpx.InvalidURL,
    httpx.UnsupportedProtocol,
    httpx.LocalProtocolError,
)


def decode_body(response: httpx.Response) -> Any:
    """
    Decode a response body without reshaping it.

    Returns:
        Decoded JSON value, the raw text if it is not JSON, or None when empty
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def translate_exception(exc: BaseException) -> JobStatusClientError:
    """
    Map any exception raised while issuing a request to the error hierarchy.

    Args:
        exc: Exception raised by httpx or by request construction

    Returns:
        The matching JobStatusClientError (``exc`` itself if already one)
    """
    if isinstance(exc, JobStatusClientError):
        return exc
    if isinstance(exc, _LOCAL_HTTPX_ERRORS):
        return LocalError.from_exception(exc)
    if isinstance(exc, httpx.TransportError):
        return NetworkError(original_error=exc)
    return LocalError.from_exception(exc)


async def normalize_errors(request: httpx.Request, call_next: Handler) -> httpx.Response:
    """Raise a JobStatusClientError for transport failures and non-2xx responses."""
    try:
        response = await call_next(request)
    except JobStatusClientError:
        raise
    except Exception as e:
        raise translate_exception(e) from e

    if not response.is_success:
        raise ServerError.from_response(response.status_code, decode_body(response))
    return response


async def log_exchange(request: httpx.Request, call_next: Handler) -> httpx.Response:
    """Log the outgoing request and the received response."""
    logger.info(f"Sending request: {request.method} {request.url.path}")
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"Request error: {request.method} {request.url.path}: {e!r}")
        raise

    logger.info(f"Received response: {response.status_code} {response.text}")
    return response


DEFAULT_MIDDLEWARES = (log_exchange,)


def _bind(middleware: Middleware, call_next: Handler) -> Handler:
    async def handler(request: httpx.Request) -> httpx.Response:
        return await middleware(request, call_next)
    return handler


def compose(handler: Handler, middlewares: Iterable[Middleware]) -> Handler:
    """
    Wrap ``handler`` with ``middlewares``, first one outermost.

    Args:
        handler: Core send step
        middlewares: Middlewares to apply

    Returns:
        A handler running the whole chain
    """
    for middleware in reversed(list(middlewares)):
        handler = _bind(middleware, handler)
    return handler
