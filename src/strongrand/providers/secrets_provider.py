"""Runtime CSPRNG provider using ``secrets.token_bytes()``.

This is the preferred source whenever the interpreter exposes it, which
on any supported Python is always.
"""

from __future__ import annotations

from strongrand.exceptions import EntropyUnavailableError
from strongrand.providers.base import EntropyProvider
from strongrand.providers.registry import register_provider


@register_provider("secrets")
class SecretsProvider(EntropyProvider):
    """``secrets.token_bytes()`` wrapper. Always strong."""

    @property
    def name(self) -> str:
        return "secrets"

    @property
    def strong(self) -> bool:
        return True

    @property
    def is_available(self) -> bool:
        return self._capabilities.primitive("secrets", "token_bytes") is not None

    def get_random_bytes(self, n: int) -> bytes:
        token_bytes = self._capabilities.primitive("secrets", "token_bytes")
        if token_bytes is None:
            raise EntropyUnavailableError("secrets.token_bytes is not available")
        try:
            return token_bytes(n)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailableError(f"secrets.token_bytes failed: {exc}") from exc
