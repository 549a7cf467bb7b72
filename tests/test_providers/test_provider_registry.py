"""Tests for ProviderRegistry."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from strongrand.config import StrongRandConfig
from strongrand.providers.base import EntropyProvider
from strongrand.providers.registry import ProviderRegistry
from strongrand.providers.secrets_provider import SecretsProvider
from strongrand.providers.weak import WeakFallbackProvider


class _DummyProvider(EntropyProvider):
    """Minimal concrete provider for registry tests."""

    @property
    def name(self) -> str:
        return "dummy"

    @property
    def strong(self) -> bool:
        return True

    @property
    def is_available(self) -> bool:
        return True

    def get_random_bytes(self, n: int) -> bytes:
        return b"\x00" * n


def _entry_point(name: str, loaded: object = None, error: Exception | None = None) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    ep.value = f"plugin.module:{name}"
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = loaded
    return ep


class TestProviderRegistry:
    """Tests for registration, plugin discovery and chain assembly."""

    def setup_method(self) -> None:
        self._saved_providers = dict(ProviderRegistry._providers)
        self._saved_scanned = ProviderRegistry._plugins_scanned

    def teardown_method(self) -> None:
        ProviderRegistry._providers = self._saved_providers
        ProviderRegistry._plugins_scanned = self._saved_scanned

    def test_builtins_registered(self) -> None:
        available = ProviderRegistry.list_available()
        for name in ("secrets", "getrandom", "openssl", "urandom_device", "capicom", "weak"):
            assert name in available
        assert ProviderRegistry.get("secrets") is SecretsProvider

    def test_register_and_get(self) -> None:
        @ProviderRegistry.register("test_provider")
        class TestProvider(_DummyProvider):
            pass

        assert ProviderRegistry.get("test_provider") is TestProvider

    def test_register_rejects_non_provider(self) -> None:
        class NotAProvider:
            pass

        with pytest.raises(TypeError, match="EntropyProvider subclass"):
            ProviderRegistry.register("bogus")(NotAProvider)  # type: ignore[arg-type]
        assert "bogus" not in ProviderRegistry._providers

    def test_get_unknown_raises_key_error(self) -> None:
        ProviderRegistry._plugins_scanned = True
        with pytest.raises(KeyError, match="no_such_provider"):
            ProviderRegistry.get("no_such_provider")

    def test_unknown_keeps_input_order(self) -> None:
        ProviderRegistry._plugins_scanned = True
        assert ProviderRegistry.unknown(["zeta", "secrets", "alpha"]) == ["zeta", "alpha"]

    def test_build_instantiates_in_order(self, default_config: StrongRandConfig, bare_capabilities) -> None:
        providers = ProviderRegistry.build(["weak", "secrets"], default_config, bare_capabilities)
        assert [type(p) for p in providers] == [WeakFallbackProvider, SecretsProvider]
        assert all(p._capabilities is bare_capabilities for p in providers)

    def test_plugin_discovered_on_miss(self) -> None:
        ProviderRegistry._plugins_scanned = False
        ep = _entry_point("hsm", loaded=_DummyProvider)

        with patch("importlib.metadata.entry_points", return_value=[ep]) as mock_eps:
            assert ProviderRegistry.get("hsm") is _DummyProvider

        mock_eps.assert_called_once_with(group="strongrand.providers")

    def test_plugin_cannot_replace_builtin(self) -> None:
        ProviderRegistry._plugins_scanned = False
        ep = _entry_point("secrets", loaded=_DummyProvider)

        with patch("importlib.metadata.entry_points", return_value=[ep]):
            ProviderRegistry.list_available()

        ep.load.assert_not_called()
        assert ProviderRegistry.get("secrets") is SecretsProvider

    def test_plugin_of_wrong_type_skipped(self) -> None:
        ProviderRegistry._plugins_scanned = False
        bad = _entry_point("not_a_provider", loaded=object)
        good = _entry_point("hsm", loaded=_DummyProvider)

        with patch("importlib.metadata.entry_points", return_value=[bad, good]):
            available = ProviderRegistry.list_available()

        assert "not_a_provider" not in available
        assert "hsm" in available

    def test_plugin_import_error_skipped(self) -> None:
        ProviderRegistry._plugins_scanned = False
        ep = _entry_point("broken", error=ImportError("module not found"))

        with patch("importlib.metadata.entry_points", return_value=[ep]):
            available = ProviderRegistry.list_available()

        assert "broken" not in available

    def test_plugins_scanned_once(self) -> None:
        ProviderRegistry._plugins_scanned = False

        with patch("importlib.metadata.entry_points", return_value=[]) as mock_eps:
            ProviderRegistry.list_available()
            ProviderRegistry.get("secrets")
            ProviderRegistry.list_available()

        mock_eps.assert_called_once()
