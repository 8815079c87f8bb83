import logging
import time
from http import HTTPStatus
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse

from .config import Config
from .errors import ServiceError
from .http import Origin, RequestContext, check_http, url
from .security import random_hex


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_SECONDS = 1.0


def _app_config(request: Request) -> Config:
    return getattr(request.app.state, "config", None) or Config()


def _request_id(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = random_hex(8)
        request.state.request_id = request_id
    return request_id


async def redirect_to_https(request: Request, call_next: Callable):
    config = _app_config(request)
    ctx = RequestContext.from_request(
        request,
        trust_proxy=config.TRUST_PROXY,
        proto_header=config.FORWARDED_PROTO_HEADER,
    )
    if check_http(ctx, config.FORWARDED_PROTO_HEADER):
        resource = request.url.path
        if request.url.query:
            resource = f"{resource}?{request.url.query}"
        target = url(Origin(protocol="https", host=ctx.host), resource)
        logger.info(f"[{_request_id(request)}] Redirecting plaintext request to {target}")
        return RedirectResponse(target, status_code=301)
    return await call_next(request)


async def log_requests(request: Request, call_next: Callable):
    """Tag each request with an id and log the slow or failing ones."""
    started = time.perf_counter()
    request_id = _request_id(request)
    label = f"[{request_id}] {request.method} {request.url.path}"

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{label} - ERROR: {e} - {time.perf_counter() - started:.2f}s")
        raise

    elapsed = time.perf_counter() - started
    response.headers[REQUEST_ID_HEADER] = request_id
    if response.status_code >= 500:
        logger.error(f"{label} - {response.status_code} - {elapsed:.2f}s")
    elif response.status_code >= 400 or elapsed > SLOW_REQUEST_SECONDS:
        logger.info(f"{label} - {response.status_code} - {elapsed:.2f}s")
    return response


async def service_error_handler(request: Request, exc: ServiceError):
    request_id = _request_id(request)
    if exc.status >= 500:
        logger.error(f"[{request_id}] {request.method} {request.url.path} failed ({exc.status}): {exc.message}")
    else:
        logger.info(f"[{request_id}] {request.method} {request.url.path} rejected ({exc.status}): {exc.message}")

    if exc.expose:
        detail = exc.message
    else:
        try:
            detail = HTTPStatus(exc.status).phrase
        except ValueError:
            detail = "Error"
    return JSONResponse(status_code=exc.status, content={"detail": detail}, headers=exc.headers)


async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
