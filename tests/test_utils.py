"""Tests for utility helpers."""

import hashlib
import logging

from tiza.utils import get_logger, hash_str


class TestHashStr:
    def test_full_digest(self) -> None:
        """Without truncation the full hex digest is returned."""
        assert hash_str("x") == hashlib.sha256(b"x").hexdigest()

    def test_truncate(self) -> None:
        """truncate keeps the leading characters."""
        assert hash_str("x", truncate=16) == hashlib.sha256(b"x").hexdigest()[:16]

    def test_algorithm(self) -> None:
        """The algorithm name selects the hashlib constructor."""
        assert hash_str("x", algorithm="md5") == hashlib.md5(b"x").hexdigest()


class TestGetLogger:
    def test_prefix_added(self) -> None:
        """Bare names are placed under the tiza logger."""
        assert get_logger("mymodule").name == "tiza.mymodule"

    def test_prefix_not_doubled(self) -> None:
        """Names already under tiza are left alone."""
        assert get_logger("tiza.parser").name == "tiza.parser"
        assert get_logger("tiza").name == "tiza"

    def test_returns_stdlib_logger(self) -> None:
        """get_logger hands back a logging.Logger."""
        assert isinstance(get_logger("x"), logging.Logger)
