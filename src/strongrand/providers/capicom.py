"""Windows CAPICOM provider via COM automation (pywin32).

Considered weak. Any failure (pywin32 missing, CAPICOM not registered,
COM call raising, undecodable payload) makes the provider decline so the
chain falls through to the next source.
"""

from __future__ import annotations

import base64
import binascii

from strongrand.exceptions import EntropyUnavailableError
from strongrand.providers.base import EntropyProvider
from strongrand.providers.registry import register_provider

_COM_CLIENT_MODULE = "win32com.client"
_CAPICOM_PROG_ID = "CAPICOM.Utilities.1"
_CAPICOM_ENCODE_BASE64 = 0


@register_provider("capicom")
class CapicomProvider(EntropyProvider):
    """``CAPICOM.Utilities.1.GetRandom()`` through ``win32com.client``."""

    @property
    def name(self) -> str:
        return "capicom"

    @property
    def strong(self) -> bool:
        return False

    @property
    def is_available(self) -> bool:
        if not (self._capabilities.is_windows and self._config.allow_weak_sources):
            return False
        return self._capabilities.load_module(_COM_CLIENT_MODULE) is not None

    def get_random_bytes(self, n: int) -> bytes:
        if not self._config.allow_weak_sources:
            raise EntropyUnavailableError("weak sources are disabled")
        if not self._capabilities.is_windows:
            raise EntropyUnavailableError("CAPICOM is only available on Windows")
        client = self._capabilities.load_module(_COM_CLIENT_MODULE)
        if client is None:
            raise EntropyUnavailableError("pywin32 COM client is not installed")

        try:
            utilities = client.Dispatch(_CAPICOM_PROG_ID)
            try:
                get_random = getattr(utilities, "GetRandom", None)
                encoded = get_random(n, _CAPICOM_ENCODE_BASE64) if callable(get_random) else None
            finally:
                del utilities
        except Exception as exc:  # Intentional: any COM failure falls through
            raise EntropyUnavailableError(f"CAPICOM call failed: {exc}") from exc

        if encoded is None:
            raise EntropyUnavailableError(f"{_CAPICOM_PROG_ID} has no callable GetRandom")
        try:
            return base64.b64decode(encoded)
        except (binascii.Error, TypeError) as exc:
            raise EntropyUnavailableError(f"CAPICOM returned undecodable data: {exc}") from exc
