"""Abstract base class for all entropy providers.

Every link of the fallback cascade, from the runtime CSPRNG down to the
weak last resort, implements this interface. Subclasses implement
``name``, ``strong``, ``is_available`` and ``get_random_bytes()``; the
base supplies ``try_generate()``, which the chain uses to turn any
expected failure into "try the next provider".
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from strongrand.exceptions import EntropyUnavailableError
from strongrand.platform import PlatformCapabilities

if TYPE_CHECKING:
    from strongrand.config import StrongRandConfig

logger = logging.getLogger("strongrand")


class EntropyProvider(ABC):
    """Abstract base for a single entropy primitive.

    Providers are stateless apart from their injected configuration and
    capabilities, so one instance may serve concurrent callers.

    Args:
        config: Active configuration.
        capabilities: Host capability queries; probed from the host if omitted.
    """

    def __init__(
        self,
        config: StrongRandConfig,
        capabilities: PlatformCapabilities | None = None,
    ) -> None:
        self._config = config
        self._capabilities = capabilities or PlatformCapabilities.detect(
            path_restricted=config.restrict_device_access
        )

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier (e.g., ``'secrets'``, ``'urandom_device'``)."""

    @property
    @abstractmethod
    def strong(self) -> bool:
        """Whether output from this provider is considered cryptographically strong."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the underlying primitive exists on this host."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            EntropyUnavailableError: If the primitive is missing, fails, or
                reports a weak result.
        """

    def try_generate(self, n: int) -> bytes | None:
        """Return *n* bytes, or ``None`` if this provider declines.

        A provider declines when ``get_random_bytes()`` raises
        ``EntropyUnavailableError`` or returns the wrong number of bytes.
        All other exceptions propagate.
        """
        try:
            data = self.get_random_bytes(n)
        except EntropyUnavailableError as exc:
            logger.debug("Entropy provider %r declined: %s", self.name, exc)
            return None
        if len(data) != n:
            logger.debug(
                "Entropy provider %r returned %d bytes, expected %d", self.name, len(data), n
            )
            return None
        return data

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this provider.

        Returns:
            Dictionary with ``'provider'``, ``'available'`` and ``'strong'`` keys.
        """
        return {"provider": self.name, "available": self.is_available, "strong": self.strong}
