"""Tests for token derivation."""

from __future__ import annotations

import hashlib
from unittest.mock import patch

import pytest
import whirlpool

from strongrand.exceptions import StrongRandError, UnsupportedAlgorithm
from strongrand.tokens import available_algorithms, hash_token

_HEX = set("0123456789abcdef")


class TestHashToken:
    """Tests for hash_token()."""

    def test_sha256_matches_hashlib(self) -> None:
        data = b"\x01" * 64
        assert hash_token(data, "sha256") == hashlib.sha256(data).hexdigest()

    def test_sha256_is_64_lowercase_hex(self) -> None:
        token = hash_token(b"\x00" * 64, "sha256")
        assert len(token) == 64
        assert set(token) <= _HEX

    def test_sha512_length(self) -> None:
        assert len(hash_token(b"\x00" * 64, "sha512")) == 128

    def test_name_is_case_insensitive(self) -> None:
        data = b"\x02" * 64
        assert hash_token(data, " SHA256 ") == hashlib.sha256(data).hexdigest()

    def test_whirlpool_is_128_hex(self) -> None:
        token = hash_token(b"\x00" * 64, "whirlpool")
        assert len(token) == 128
        assert set(token) <= _HEX

    def test_whirlpool_known_vector(self) -> None:
        assert hash_token(b"", "whirlpool") == (
            "19fa61d75522a4669b44e39c1d2e1726c530232130d407f89afee0964997f7a7"
            "3e83be698b288febcf88e3e03c4f0757ea8964e59b63d93708b138cc42a66eb3"
        )

    def test_whirlpool_without_openssl_support(self) -> None:
        data = b"\x03" * 64

        def reject(name: str, *args: object) -> None:
            raise ValueError(f"unsupported hash type {name}")

        with patch("strongrand.tokens.hashlib.new", side_effect=reject):
            token = hash_token(data, "Whirlpool")
        assert token == whirlpool.new(data).hexdigest().lower()
        assert len(token) == 128

    def test_empty_name_raises(self) -> None:
        with pytest.raises(UnsupportedAlgorithm):
            hash_token(b"\x00", "")

    def test_unknown_algorithm_raises(self) -> None:
        with pytest.raises(UnsupportedAlgorithm, match="no_such_hash"):
            hash_token(b"\x00", "no_such_hash")

    def test_unsupported_algorithm_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            hash_token(b"\x00", "no_such_hash")
        with pytest.raises(StrongRandError):
            hash_token(b"\x00", "no_such_hash")

    @pytest.mark.parametrize("name", ["shake_128", "shake_256"])
    def test_variable_length_rejected(self, name: str) -> None:
        with pytest.raises(UnsupportedAlgorithm, match="fixed digest length"):
            hash_token(b"\x00", name)


class TestAvailableAlgorithms:
    """Tests for available_algorithms()."""

    def test_includes_guaranteed_algorithms(self) -> None:
        names = available_algorithms()
        for name in ("md5", "sha1", "sha256", "sha512", "whirlpool"):
            assert name in names

    def test_excludes_variable_length(self) -> None:
        names = available_algorithms()
        assert "shake_128" not in names
        assert "shake_256" not in names

    def test_sorted_and_lowercase(self) -> None:
        names = available_algorithms()
        assert names == sorted(names)
        assert all(name == name.lower() for name in names)

    def test_every_listed_algorithm_works(self) -> None:
        for name in available_algorithms():
            assert hash_token(b"\x00" * 64, name)
