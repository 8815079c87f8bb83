"""Unit tests for keyserver.core.security."""

from __future__ import annotations

import re
from unittest.mock import patch

import pytest

from keyserver.core.security import random_hex

LOWER_HEX = re.compile(r"^[0-9a-f]*$")


class TestRandomHex:
    def test_default_length(self) -> None:
        value = random_hex()
        assert len(value) == 32
        assert LOWER_HEX.match(value)

    def test_explicit_sixteen(self) -> None:
        assert len(random_hex(16)) == 32

    @pytest.mark.parametrize("byte_count", [1, 4, 20, 64])
    def test_length_is_twice_byte_count(self, byte_count: int) -> None:
        value = random_hex(byte_count)
        assert len(value) == 2 * byte_count
        assert LOWER_HEX.match(value)

    def test_falsy_byte_count_uses_default(self) -> None:
        assert len(random_hex(None)) == 32
        assert len(random_hex(0)) == 32

    def test_successive_values_differ(self) -> None:
        assert random_hex() != random_hex()

    def test_negative_byte_count(self) -> None:
        with pytest.raises(ValueError):
            random_hex(-1)

    def test_entropy_failure_propagates(self) -> None:
        with patch("keyserver.core.security.secrets.token_hex", side_effect=NotImplementedError("no urandom")):
            with pytest.raises(NotImplementedError):
                random_hex()
