import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .validation import is_true


load_dotenv()


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Boolean switches accept the literal ``"true"`` only, like query flags.
    """

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    # Honour X-Forwarded-Host / X-Forwarded-Proto when building request contexts
    TRUST_PROXY: bool = is_true(os.getenv("TRUST_PROXY", "false"))
    FORWARDED_PROTO_HEADER: str = os.getenv("FORWARDED_PROTO_HEADER", "X-Forwarded-Proto")
    HTTPS_REDIRECT: bool = is_true(os.getenv("HTTPS_REDIRECT", "false"))

    def log_level(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown LOG_LEVEL: {self.LOG_LEVEL}")
        return level

    def validate(self) -> None:
        if not self.FORWARDED_PROTO_HEADER.strip():
            raise ValueError("FORWARDED_PROTO_HEADER must not be empty")
        self.log_level()
