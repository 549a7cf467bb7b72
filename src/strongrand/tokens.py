"""Token derivation: hash an entropy buffer into a hex string.

``hashlib`` is asked first. Digests it cannot construct on this
interpreter, currently only Whirlpool (OpenSSL 3 keeps it in the legacy
provider), are served by dedicated packages.
"""

from __future__ import annotations

import hashlib
from typing import Any, Callable

import whirlpool

from strongrand.exceptions import UnsupportedAlgorithm

# SHAKE digests have no fixed length, so they cannot produce a fixed-format token.
_VARIABLE_LENGTH = frozenset({"shake_128", "shake_256", "shake128", "shake256"})

# Used only when hashlib.new() rejects the name.
_PACKAGE_DIGESTS: dict[str, Callable[[bytes], Any]] = {
    "whirlpool": whirlpool.new,
}


def _normalize(algorithm: str) -> str:
    return algorithm.strip().lower()


def _constructible(name: str) -> bool:
    # OpenSSL may list digests whose provider is not loaded.
    try:
        hashlib.new(name)
    except ValueError:
        return False
    return True


def available_algorithms() -> list[str]:
    """Fixed-length hash names usable for tokens on this interpreter."""
    names = {_normalize(name) for name in hashlib.algorithms_available} - _VARIABLE_LENGTH
    usable = {name for name in names if _constructible(name)}
    return sorted(usable | _PACKAGE_DIGESTS.keys())


def hash_token(data: bytes, algorithm: str) -> str:
    """Hash *data* with *algorithm* and return the lowercase hex digest.

    Args:
        data: Entropy buffer.
        algorithm: Any fixed-length name ``hashlib.new()`` accepts
            (case-insensitive), or ``'whirlpool'``.

    Returns:
        Hex digest; its length depends on the algorithm.

    Raises:
        UnsupportedAlgorithm: If the name is empty, unknown or variable-length.
    """
    name = _normalize(algorithm)
    if name in _VARIABLE_LENGTH:
        raise UnsupportedAlgorithm(f"{algorithm!r} has no fixed digest length")
    try:
        return hashlib.new(name, data).hexdigest()
    except (ValueError, TypeError) as exc:
        constructor = _PACKAGE_DIGESTS.get(name)
        if constructor is None:
            raise UnsupportedAlgorithm(f"Unsupported hash algorithm: {algorithm!r}") from exc
    digest = constructor(data).hexdigest()
    if isinstance(digest, bytes):
        digest = digest.decode("ascii")
    return digest.lower()
