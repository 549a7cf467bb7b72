"""Ordered provider chain: first provider that answers wins.

``ProviderChain`` generalises a primary/fallback wrapper to any number of
providers. Each provider is asked in turn through
:meth:`~strongrand.providers.base.EntropyProvider.try_generate`; a provider
that declines is skipped. Exceptions other than entropy-unavailability
propagate unchanged.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from strongrand.exceptions import EntropyUnavailableError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from strongrand.providers.base import EntropyProvider

logger = logging.getLogger("strongrand")


@dataclass(frozen=True, slots=True)
class EntropySample:
    """Result of one generation.

    Attributes:
        data: The random bytes. Excluded from ``repr`` so samples can be logged.
        source: Name of the provider that supplied ``data``.
        strong: Whether that provider is considered cryptographically strong.
        elapsed_ms: Time spent in the answering provider (milliseconds).
        skipped: Names of higher-priority providers that declined.
    """

    data: bytes = field(repr=False)
    source: str
    strong: bool
    elapsed_ms: float
    skipped: tuple[str, ...] = ()


class ProviderChain:
    """Tries each provider in order and returns the first accepted result.

    Args:
        providers: Providers, strongest first.
    """

    def __init__(self, providers: Sequence[EntropyProvider]) -> None:
        if not providers:
            raise ValueError("ProviderChain needs at least one provider")
        self._providers = tuple(providers)

    @property
    def providers(self) -> tuple[EntropyProvider, ...]:
        return self._providers

    @property
    def name(self) -> str:
        """Compound name, e.g. ``'secrets+openssl+weak'``."""
        return "+".join(p.name for p in self._providers)

    def generate(self, n: int) -> EntropySample:
        """Return *n* bytes from the highest-priority provider that answers.

        Raises:
            EntropyUnavailableError: If every provider declined.
        """
        skipped: list[str] = []
        for provider in self._providers:
            start = time.perf_counter()
            data = provider.try_generate(n)
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            if data is None:
                skipped.append(provider.name)
                continue
            if not provider.strong:
                logger.warning(
                    "Using weak entropy provider %r; no strong provider answered (skipped: %s)",
                    provider.name,
                    ", ".join(skipped) or "none",
                )
            return EntropySample(
                data=data,
                source=provider.name,
                strong=provider.strong,
                elapsed_ms=elapsed_ms,
                skipped=tuple(skipped),
            )
        raise EntropyUnavailableError(
            f"No entropy provider could supply {n} bytes (tried: {', '.join(skipped)})"
        )

    def first_available(self) -> str | None:
        """Name of the first provider reporting itself available, if any."""
        for provider in self._providers:
            if provider.is_available:
                return provider.name
        return None

    def health_check(self) -> dict[str, Any]:
        """Return chain-level and per-provider status."""
        statuses = [p.health_check() for p in self._providers]
        preferred = self.first_available()
        return {
            "chain": self.name,
            "healthy": preferred is not None,
            "preferred": preferred,
            "providers": statuses,
        }
