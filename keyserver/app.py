import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Config
from .core.errors import ServiceError
from .core.middleware import (
    global_exception_handler,
    log_requests,
    redirect_to_https,
    service_error_handler,
)


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
        ]
    )


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the FastAPI application the key server's routers are mounted on.

    - Validates configuration and sets up logging
    - Optionally redirects plaintext requests (as reported by the proxy) to https
    - Translates ServiceError and unhandled exceptions into JSON responses
    """
    config = config or Config()
    config.validate()
    configure_logging(config.log_level())

    app = FastAPI(title="Key Server")
    app.state.config = config

    # Registered first so request logging wraps the redirect
    if config.HTTPS_REDIRECT:
        @app.middleware("http")
        async def _redirect_to_https(request, call_next):
            return await redirect_to_https(request, call_next)

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    app.add_exception_handler(ServiceError, service_error_handler)

    @app.exception_handler(Exception)
    async def _global_exception_handler(request, exc):
        return await global_exception_handler(request, exc)

    return app
