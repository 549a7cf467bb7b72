"""Name -> provider class mapping used to assemble the fallback chain.

Built-in providers add themselves with ``@register_provider``. Packages
can contribute more through the ``strongrand.providers`` entry-point
group; those are imported the first time a name is missing. Anything
registered must be an :class:`~strongrand.providers.base.EntropyProvider`
subclass.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, ClassVar

from strongrand.providers.base import EntropyProvider

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from strongrand.config import StrongRandConfig
    from strongrand.platform import PlatformCapabilities

logger = logging.getLogger("strongrand")

PLUGIN_GROUP = "strongrand.providers"


def _check_provider_class(name: str, candidate: object) -> type[EntropyProvider]:
    if not (isinstance(candidate, type) and issubclass(candidate, EntropyProvider)):
        raise TypeError(f"Provider {name!r} must be an EntropyProvider subclass, got {candidate!r}")
    return candidate


class ProviderRegistry:
    """Known entropy providers, keyed by the names used in ``provider_order``."""

    _providers: ClassVar[dict[str, type[EntropyProvider]]] = {}
    _plugins_scanned: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[EntropyProvider]], type[EntropyProvider]]:
        """Class decorator adding a provider under *name*.

        Raises:
            TypeError: If the decorated object is not an EntropyProvider subclass.
        """

        def decorator(provider_cls: type[EntropyProvider]) -> type[EntropyProvider]:
            cls._providers[name] = _check_provider_class(name, provider_cls)
            return provider_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[EntropyProvider]:
        """Return the provider class registered as *name*.

        Raises:
            KeyError: If no built-in or plugin provider has that name.
        """
        if name not in cls._providers:
            cls._scan_plugins()
        try:
            return cls._providers[name]
        except KeyError:
            known = ", ".join(sorted(cls._providers)) or "(none)"
            raise KeyError(f"Unknown entropy provider: {name!r}. Available: {known}") from None

    @classmethod
    def list_available(cls) -> list[str]:
        """All provider names, built-in and plugin, sorted."""
        cls._scan_plugins()
        return sorted(cls._providers)

    @classmethod
    def unknown(cls, names: Iterable[str]) -> list[str]:
        """The subset of *names* with no registered provider, in input order."""
        available = set(cls.list_available())
        return [name for name in names if name not in available]

    @classmethod
    def build(
        cls,
        names: Iterable[str],
        config: StrongRandConfig,
        capabilities: PlatformCapabilities,
    ) -> list[EntropyProvider]:
        """Instantiate the providers for *names*, in order, sharing one config."""
        return [cls.get(name)(config, capabilities) for name in names]

    @classmethod
    def _scan_plugins(cls) -> None:
        """Import entry-point providers once. Built-in names are never replaced."""
        if cls._plugins_scanned:
            return
        cls._plugins_scanned = True
        try:
            entry_points = importlib.metadata.entry_points(group=PLUGIN_GROUP)
        except Exception:  # Broken distribution metadata must not break generation
            logger.warning("Could not read %s entry points", PLUGIN_GROUP, exc_info=True)
            return

        for entry_point in entry_points:
            if entry_point.name in cls._providers:
                logger.debug("Ignoring plugin %r: name is taken by a built-in", entry_point.name)
                continue
            try:
                provider_cls = _check_provider_class(entry_point.name, entry_point.load())
            except Exception:  # A bad plugin is skipped, the rest still load
                logger.warning(
                    "Skipping entropy provider plugin %r (%s)",
                    entry_point.name,
                    entry_point.value,
                    exc_info=True,
                )
                continue
            cls._providers[entry_point.name] = provider_cls
            logger.debug("Registered entropy provider plugin %r", entry_point.name)


register_provider = ProviderRegistry.register
