"""OpenSSL PRNG provider via the ``ssl`` module.

OpenSSL reports whether its generator is properly seeded. A result
produced while that flag is false is discarded, never returned: the
provider raises :class:`~strongrand.exceptions.EntropyUnavailableError`
so the chain can consult a lower-priority source instead.
"""

from __future__ import annotations

from types import ModuleType

from strongrand.exceptions import EntropyUnavailableError
from strongrand.providers.base import EntropyProvider
from strongrand.providers.registry import register_provider


@register_provider("openssl")
class OpenSSLProvider(EntropyProvider):
    """``ssl.RAND_bytes()`` with the ``RAND_status()`` strength flag.

    Interpreters that still ship the legacy ``RAND_pseudo_bytes()`` get the
    flag straight from that call instead.
    """

    @property
    def name(self) -> str:
        return "openssl"

    @property
    def strong(self) -> bool:
        return True

    @property
    def is_available(self) -> bool:
        ssl = self._capabilities.load_module("ssl")
        if ssl is None:
            return False
        return callable(getattr(ssl, "RAND_pseudo_bytes", None)) or callable(
            getattr(ssl, "RAND_bytes", None)
        )

    def get_random_bytes(self, n: int) -> bytes:
        ssl = self._capabilities.load_module("ssl")
        if ssl is None:
            raise EntropyUnavailableError("ssl module is not available")
        data, is_strong = self._generate(ssl, n)
        if not is_strong:
            raise EntropyUnavailableError("OpenSSL reported a weak result; discarding it")
        return data

    @staticmethod
    def _generate(ssl: ModuleType, n: int) -> tuple[bytes, bool]:
        """Return ``(bytes, strong_flag)`` from whichever OpenSSL call exists."""
        try:
            pseudo_bytes = getattr(ssl, "RAND_pseudo_bytes", None)
            if callable(pseudo_bytes):
                data, is_strong = pseudo_bytes(n)
                return data, bool(is_strong)

            rand_bytes = getattr(ssl, "RAND_bytes", None)
            if not callable(rand_bytes):
                raise EntropyUnavailableError("ssl exposes no RAND_bytes")
            rand_status = getattr(ssl, "RAND_status", None)
            # RAND_bytes itself raises SSLError when the PRNG is unseeded.
            is_strong = bool(rand_status()) if callable(rand_status) else True
            return rand_bytes(n), is_strong
        except OSError as exc:
            raise EntropyUnavailableError(f"OpenSSL PRNG failed: {exc}") from exc
