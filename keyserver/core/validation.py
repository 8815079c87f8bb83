import math
import re
from typing import Any


# Whitespace and line terminators as ECMAScript regexes define them; Python's
# \s and . cover different sets
_WHITESPACE = r'\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'
_NOT_LINE_TERMINATOR = r'[^\n\r\u2028\u2029]'
_ATOM = r'[^<>()\[\]\\.,;:@"' + _WHITESPACE + r']+'

KEY_ID_PATTERN = re.compile(r'^[a-fA-F0-9]{16}$')
FINGERPRINT_PATTERN = re.compile(r'^[a-fA-F0-9]{40}$')
EMAIL_PATTERN = re.compile(
    r'^((' + _ATOM + r'(\.' + _ATOM + r')*)|("' + _NOT_LINE_TERMINATOR + r'+"))'
    r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$'
)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_true(value: Any) -> bool:
    """Cast a query/form value to a boolean.

    Strings only count as true when they are exactly ``"true"``; anything else
    falls back to regular truthiness, except that NaN is false.
    """
    if is_string(value):
        return value == 'true'
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def is_key_id(value: Any) -> bool:
    """Check for a long key id (16 hex chars)."""
    if not is_string(value):
        return False
    return KEY_ID_PATTERN.fullmatch(value) is not None


def is_fingerprint(value: Any) -> bool:
    """Check for a version 4 fingerprint (40 hex chars)."""
    if not is_string(value):
        return False
    return FINGERPRINT_PATTERN.fullmatch(value) is not None


def is_email(value: Any) -> bool:
    """Syntactic email check. No DNS lookup, not RFC 5322 complete."""
    if not is_string(value):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None
