"""Provider reading the kernel urandom pool through ``os.getrandom()``.

Only consulted off Windows. ``os.getrandom`` exists on Linux; elsewhere
the provider reports itself unavailable and the chain moves on.
"""

from __future__ import annotations

from strongrand.exceptions import EntropyUnavailableError
from strongrand.providers.base import EntropyProvider
from strongrand.providers.registry import register_provider


@register_provider("getrandom")
class GetrandomProvider(EntropyProvider):
    """``os.getrandom()`` wrapper. Accepted unless the call reports failure."""

    @property
    def name(self) -> str:
        return "getrandom"

    @property
    def strong(self) -> bool:
        return True

    @property
    def is_available(self) -> bool:
        if self._capabilities.is_windows:
            return False
        return self._capabilities.primitive("os", "getrandom") is not None

    def get_random_bytes(self, n: int) -> bytes:
        """Read *n* bytes from the urandom pool.

        Raises:
            EntropyUnavailableError: On Windows, when ``os.getrandom`` is
                missing, or when the syscall fails.
        """
        if self._capabilities.is_windows:
            raise EntropyUnavailableError("getrandom is not consulted on Windows")
        getrandom = self._capabilities.primitive("os", "getrandom")
        if getrandom is None:
            raise EntropyUnavailableError("os.getrandom is not available")
        try:
            return getrandom(n)
        except OSError as exc:
            raise EntropyUnavailableError(f"getrandom() failed: {exc}") from exc
