import logging
from typing import NoReturn

from fastapi import HTTPException


logger = logging.getLogger(__name__)


class ServiceError(HTTPException):
    """HTTP error carrying a status code and whether its message may reach the client."""

    def __init__(self, status: int, message: str, expose: bool = True) -> None:
        super().__init__(status_code=status, detail=message)
        self.status = status
        self.message = message
        self.expose = expose


def throw_error(status: int, message: str) -> NoReturn:
    """Raise a ServiceError whose message is safe to display to the client."""
    logger.debug(f"Raising {status}: {message}")
    raise ServiceError(status, message, expose=True)
