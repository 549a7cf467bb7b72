"""The public entropy source: strongest-available bytes and hashed tokens.

``EntropySource`` builds a :class:`~strongrand.providers.chain.ProviderChain`
from ``config.provider_order`` and the host's
:class:`~strongrand.platform.PlatformCapabilities`, then serves:

* ``generate_entropy()``: ``entropy_length`` random bytes,
* ``random_token()``: those bytes hashed into a hex token.

Instances hold no per-call state and are safe to share between threads.
"""

from __future__ import annotations

import functools
import time
from typing import TYPE_CHECKING, Any

from strongrand.config import StrongRandConfig, load_config
from strongrand.logging.logger import GenerationLogger
from strongrand.logging.types import GenerationRecord
from strongrand.platform import PlatformCapabilities
from strongrand.providers.chain import EntropySample, ProviderChain
from strongrand.providers.registry import ProviderRegistry
from strongrand.quality import ByteStatistics, byte_statistics
from strongrand.tokens import hash_token

if TYPE_CHECKING:
    from collections.abc import Sequence

    from strongrand.providers.base import EntropyProvider


class EntropySource:
    """Random bytes from the best available provider, plus derived tokens.

    Args:
        config: Configuration; loaded from the environment if omitted.
        capabilities: Host capability queries shared by all providers;
            probed from the host if omitted.
        providers: Explicit provider list, strongest first. Overrides
            ``config.provider_order`` when given.
    """

    def __init__(
        self,
        config: StrongRandConfig | None = None,
        capabilities: PlatformCapabilities | None = None,
        providers: Sequence[EntropyProvider] | None = None,
    ) -> None:
        self._config = config if config is not None else load_config()
        self._capabilities = capabilities or PlatformCapabilities.detect(
            path_restricted=self._config.restrict_device_access
        )
        if providers is None:
            providers = ProviderRegistry.build(
                self._config.provider_names, self._config, self._capabilities
            )
        self._chain = ProviderChain(providers)
        self._logger = GenerationLogger(self._config)

    @property
    def config(self) -> StrongRandConfig:
        return self._config

    @property
    def chain(self) -> ProviderChain:
        return self._chain

    @property
    def diagnostics(self) -> GenerationLogger:
        return self._logger

    def sample(self) -> EntropySample:
        """Generate one buffer and report which provider supplied it.

        Raises:
            EntropyUnavailableError: Only if every provider declined, which
                cannot happen while the weak fallback is enabled.
        """
        sample = self._chain.generate(self._config.entropy_length)
        self._record(sample, purpose="entropy")
        return sample

    def generate_entropy(self) -> bytes:
        """Return ``entropy_length`` (default 64) random bytes.

        Quality depends on which provider answered; see :meth:`sample`.
        """
        return self.sample().data

    def random_token(self, algorithm: str | None = None) -> str:
        """Return a hex token derived from fresh entropy.

        Suitable for session IDs and CSRF tokens. When used as a password
        equivalent (e.g. an auto-login token), store only a hash of it.

        Args:
            algorithm: Any fixed-length ``hashlib`` name. Defaults to
                ``config.default_algorithm`` (``'whirlpool'``).

        Returns:
            Lowercase hex digest; length depends on the algorithm
            (64 for ``sha256``, 128 for ``whirlpool``).

        Raises:
            UnsupportedAlgorithm: If the algorithm is not recognised.
        """
        name = algorithm if algorithm is not None else self._config.default_algorithm
        sample = self._chain.generate(self._config.entropy_length)
        token = hash_token(sample.data, name)
        self._record(sample, purpose="token", algorithm=name)
        return token

    def self_test(self, sample_count: int = 4096) -> ByteStatistics:
        """Draw at least *sample_count* bytes and compute their statistics."""
        chunks: list[bytes] = []
        collected = 0
        while collected < sample_count:
            chunk = self.generate_entropy()
            chunks.append(chunk)
            collected += len(chunk)
        return byte_statistics(b"".join(chunks)[:sample_count])

    def health_check(self) -> dict[str, Any]:
        """Return chain status plus the configured output shape."""
        status = self._chain.health_check()
        status["entropy_length"] = self._config.entropy_length
        status["default_algorithm"] = self._config.default_algorithm
        return status

    def _record(self, sample: EntropySample, purpose: str, algorithm: str = "") -> None:
        self._logger.log_generation(
            GenerationRecord(
                timestamp_ns=time.time_ns(),
                source=sample.source,
                strong=sample.strong,
                length=len(sample.data),
                elapsed_ms=sample.elapsed_ms,
                skipped=sample.skipped,
                purpose=purpose,
                algorithm=algorithm,
            )
        )


@functools.lru_cache(maxsize=1)
def default_source() -> EntropySource:
    """Process-wide ``EntropySource`` built from environment configuration."""
    return EntropySource()


def generate_entropy() -> bytes:
    """Shortcut for ``default_source().generate_entropy()``."""
    return default_source().generate_entropy()


def random_token(algorithm: str | None = None) -> str:
    """Shortcut for ``default_source().random_token(algorithm)``."""
    return default_source().random_token(algorithm)
