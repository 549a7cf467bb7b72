"""Host capability queries used by the entropy providers.

Providers never probe the host directly. They ask an injected
:class:`PlatformCapabilities`, so each fallback branch can be exercised in
tests without the host actually lacking (or having) a facility.
"""

from __future__ import annotations

import importlib
import logging
import os
import sys
from dataclasses import dataclass, field
from types import ModuleType
from typing import IO, Callable

logger = logging.getLogger("strongrand")


def _host_is_windows() -> bool:
    return sys.platform.startswith("win")


def _load_optional_module(name: str) -> ModuleType | None:
    """Import *name*, returning ``None`` when it is not installed."""
    try:
        return importlib.import_module(name)
    except ImportError:
        logger.debug("Optional module %r is not importable", name)
        return None


def _is_readable(path: str) -> bool:
    return os.path.exists(path) and os.access(path, os.R_OK)


def _open_binary(path: str) -> IO[bytes]:
    return open(path, "rb")  # noqa: SIM115 - callers own the handle


@dataclass(frozen=True)
class PlatformCapabilities:
    """What the host offers, as injectable queries.

    Attributes:
        is_windows: Whether the Windows branch of the cascade applies.
        path_restricted: Whether a path-restriction policy forbids reading
            the random device directly.
        load_module: Returns an imported module, or ``None`` if absent.
        is_readable: Whether a filesystem path can be opened for reading.
        open_binary: Opens a path for binary reading.
    """

    is_windows: bool = field(default_factory=_host_is_windows)
    path_restricted: bool = False
    load_module: Callable[[str], ModuleType | None] = _load_optional_module
    is_readable: Callable[[str], bool] = _is_readable
    open_binary: Callable[[str], IO[bytes]] = _open_binary

    @classmethod
    def detect(cls, path_restricted: bool = False) -> PlatformCapabilities:
        """Probe the running host."""
        return cls(path_restricted=path_restricted)

    def primitive(self, module: str, attr: str) -> Callable[..., object] | None:
        """Return ``module.attr`` if the module imports and exposes a callable."""
        mod = self.load_module(module)
        if mod is None:
            return None
        func = getattr(mod, attr, None)
        return func if callable(func) else None
