import secrets
from typing import Optional


DEFAULT_RANDOM_BYTES = 16


def random_hex(byte_count: Optional[int] = DEFAULT_RANDOM_BYTES) -> str:
    """Generate a cryptographically secure random hex string.

    Draws from the operating system's CSPRNG. The result is twice as long as
    ``byte_count``; ``None`` or ``0`` fall back to 16 bytes (32 hex chars).
    """
    return secrets.token_hex(byte_count or DEFAULT_RANDOM_BYTES)
