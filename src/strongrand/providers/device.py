"""Provider reading the Unix random device directly.

Skipped on Windows, when a path-restriction policy forbids touching the
filesystem, and when the device is not readable. The handle is opened and
closed within a single call.
"""

from __future__ import annotations

from strongrand.exceptions import EntropyUnavailableError
from strongrand.providers.base import EntropyProvider
from strongrand.providers.registry import register_provider


@register_provider("urandom_device")
class UrandomDeviceProvider(EntropyProvider):
    """Reads ``config.urandom_path`` (``/dev/urandom`` by default)."""

    @property
    def name(self) -> str:
        return "urandom_device"

    @property
    def strong(self) -> bool:
        return True

    @property
    def path(self) -> str:
        return self._config.urandom_path

    @property
    def _restricted(self) -> bool:
        return self._capabilities.path_restricted or self._config.restrict_device_access

    @property
    def is_available(self) -> bool:
        if self._capabilities.is_windows or self._restricted:
            return False
        return self._capabilities.is_readable(self.path)

    def get_random_bytes(self, n: int) -> bytes:
        """Read *n* bytes from the device.

        Raises:
            EntropyUnavailableError: On Windows, under path restriction, when
                the device is unreadable, or when opening or reading fails.
        """
        if self._capabilities.is_windows:
            raise EntropyUnavailableError("random device is not consulted on Windows")
        if self._restricted:
            raise EntropyUnavailableError("device access is restricted by policy")
        if not self._capabilities.is_readable(self.path):
            raise EntropyUnavailableError(f"{self.path} is not readable")
        try:
            with self._capabilities.open_binary(self.path) as handle:
                return handle.read(n)
        except OSError as exc:
            raise EntropyUnavailableError(f"reading {self.path} failed: {exc}") from exc
