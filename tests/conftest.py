"""Shared pytest fixtures for strongrand tests.

Provides configuration objects isolated from the environment and a factory
for injectable platform capabilities, so every fallback branch can be
exercised regardless of the host running the tests.
"""

from __future__ import annotations

import io
from types import SimpleNamespace
from typing import Any, Callable

import pytest

from strongrand.config import StrongRandConfig
from strongrand.platform import PlatformCapabilities


class TrackingBytesIO(io.BytesIO):
    """BytesIO that remembers whether it was closed."""

    instances: list[TrackingBytesIO] = []

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        TrackingBytesIO.instances.append(self)


def _make_capabilities(
    *,
    is_windows: bool = False,
    path_restricted: bool = False,
    modules: dict[str, Any] | None = None,
    devices: dict[str, bytes] | None = None,
) -> PlatformCapabilities:
    """Build capabilities backed entirely by in-memory fakes.

    Args:
        is_windows: Platform branch to simulate.
        path_restricted: Simulated path-restriction policy.
        modules: Importable module name -> fake module object.
        devices: Readable path -> bytes served when opened.
    """
    loaded = dict(modules or {})
    files = dict(devices or {})

    def open_binary(path: str) -> io.BytesIO:
        if path not in files:
            raise FileNotFoundError(path)
        return TrackingBytesIO(files[path])

    return PlatformCapabilities(
        is_windows=is_windows,
        path_restricted=path_restricted,
        load_module=loaded.get,
        is_readable=lambda path: path in files,
        open_binary=open_binary,
    )


@pytest.fixture
def default_config() -> StrongRandConfig:
    """Return a StrongRandConfig with all default values (no .env file)."""
    return StrongRandConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def strong_only_config() -> StrongRandConfig:
    """Return a config with the weak providers disabled."""
    return StrongRandConfig(_env_file=None, allow_weak_sources=False)  # type: ignore[call-arg]


@pytest.fixture
def fake_capabilities() -> Callable[..., PlatformCapabilities]:
    """Return a factory for in-memory PlatformCapabilities."""
    TrackingBytesIO.instances.clear()
    return _make_capabilities


@pytest.fixture
def opened_handles(fake_capabilities) -> list[TrackingBytesIO]:
    """Device handles opened through ``fake_capabilities`` during the test."""
    return TrackingBytesIO.instances


@pytest.fixture
def bare_capabilities() -> PlatformCapabilities:
    """Capabilities of a non-Windows host with no primitives at all."""
    return _make_capabilities()


@pytest.fixture
def fake_secrets() -> SimpleNamespace:
    """A fake ``secrets`` module returning a fixed 0x11 pattern."""
    return SimpleNamespace(token_bytes=lambda n: b"\x11" * n)
