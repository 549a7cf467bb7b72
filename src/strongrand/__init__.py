"""strongrand: strong random bytes and hash-based tokens.

Obtains entropy from the strongest source the host offers, falling back
through an ordered chain of providers, and derives session or anti-forgery
tokens from it with a selectable hash function.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("strongrand")
except PackageNotFoundError:
    __version__ = "0.0.0"

from strongrand.config import StrongRandConfig, load_config
from strongrand.exceptions import (
    ConfigValidationError,
    EntropyQualityError,
    EntropyUnavailableError,
    StrongRandError,
    UnsupportedAlgorithm,
)
from strongrand.platform import PlatformCapabilities
from strongrand.source import EntropySource, default_source, generate_entropy, random_token

__all__ = [
    "ConfigValidationError",
    "EntropyQualityError",
    "EntropySource",
    "EntropyUnavailableError",
    "PlatformCapabilities",
    "StrongRandConfig",
    "StrongRandError",
    "UnsupportedAlgorithm",
    "__version__",
    "default_source",
    "generate_entropy",
    "load_config",
    "random_token",
]
