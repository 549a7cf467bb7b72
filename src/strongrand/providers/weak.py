"""Last-resort provider built from a PRNG integer and a time-based unique id.

Not cryptographically sound. It exists so generation can still return
something on a host with no usable primitive, and it can be switched off
with ``allow_weak_sources=False``.
"""

from __future__ import annotations

import hashlib
import random
import uuid

from strongrand.exceptions import EntropyUnavailableError
from strongrand.providers.base import EntropyProvider
from strongrand.providers.registry import register_provider


@register_provider("weak")
class WeakFallbackProvider(EntropyProvider):
    """``random.getrandbits()`` plus ``uuid.uuid1()``, stretched with SHAKE-256."""

    @property
    def name(self) -> str:
        return "weak"

    @property
    def strong(self) -> bool:
        return False

    @property
    def is_available(self) -> bool:
        return self._config.allow_weak_sources

    def get_random_bytes(self, n: int) -> bytes:
        if not self._config.allow_weak_sources:
            raise EntropyUnavailableError("weak sources are disabled")
        seed = f"{random.getrandbits(64)}{uuid.uuid1().hex}"
        return hashlib.shake_256(seed.encode("ascii")).digest(n)
