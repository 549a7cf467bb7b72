"""Entropy provider subsystem for strongrand.

Importing this package registers the built-in providers::

    from strongrand.providers import ProviderChain, ProviderRegistry
"""

from strongrand.providers.base import EntropyProvider
from strongrand.providers.capicom import CapicomProvider
from strongrand.providers.chain import EntropySample, ProviderChain
from strongrand.providers.device import UrandomDeviceProvider
from strongrand.providers.getrandom import GetrandomProvider
from strongrand.providers.openssl import OpenSSLProvider
from strongrand.providers.registry import ProviderRegistry, register_provider
from strongrand.providers.secrets_provider import SecretsProvider
from strongrand.providers.weak import WeakFallbackProvider

__all__ = [
    "CapicomProvider",
    "EntropyProvider",
    "EntropySample",
    "GetrandomProvider",
    "OpenSSLProvider",
    "ProviderChain",
    "ProviderRegistry",
    "SecretsProvider",
    "UrandomDeviceProvider",
    "WeakFallbackProvider",
    "register_provider",
]
