"""Configuration system for strongrand.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (STRONGRAND_*) -> .env file -> field defaults.

``load_config()`` builds a validated instance and converts every validation
failure into :class:`~strongrand.exceptions.ConfigValidationError`.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from strongrand.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})

# Strongest first. Each name must be registered with ProviderRegistry.
DEFAULT_PROVIDER_ORDER = "secrets,getrandom,openssl,urandom_device,capicom,weak"


class StrongRandConfig(BaseSettings):
    """Configuration for strongrand.

    Resolution order: init kwargs -> env vars (STRONGRAND_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRONGRAND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Generation ---

    entropy_length: int = Field(
        default=64,
        gt=0,
        description="Number of random bytes returned per generation",
    )
    default_algorithm: str = Field(
        default="whirlpool",
        description="hashlib algorithm used by random_token() when none is given",
    )

    # --- Provider cascade ---

    provider_order: str = Field(
        default=DEFAULT_PROVIDER_ORDER,
        description="Comma-separated provider names, strongest first",
    )
    urandom_path: str = Field(
        default="/dev/urandom",
        description="Random device read by the 'urandom_device' provider",
    )
    restrict_device_access: bool = Field(
        default=False,
        description="Path-restriction policy: forbid reading the random device directly",
    )
    allow_weak_sources: bool = Field(
        default=True,
        description="Allow weak providers ('capicom', 'weak') to answer",
    )

    # --- Logging ---

    log_level: str = Field(
        default="none",
        description="Per-generation logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store generation records in memory for analysis",
    )

    @property
    def provider_names(self) -> list[str]:
        """``provider_order`` split into stripped, non-empty names."""
        return [name.strip() for name in self.provider_order.split(",") if name.strip()]


def load_config(**overrides: Any) -> StrongRandConfig:
    """Build a validated config from the environment plus *overrides*.

    Args:
        **overrides: Field values taking precedence over the environment.

    Returns:
        A new StrongRandConfig.

    Raises:
        ConfigValidationError: If a field fails validation, the log level is
            unknown, or ``provider_order`` names an unregistered provider.
    """
    try:
        config = StrongRandConfig(**overrides)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc

    if config.log_level not in _LOG_LEVELS:
        raise ConfigValidationError(
            f"Unknown log_level {config.log_level!r}; expected one of {sorted(_LOG_LEVELS)}"
        )

    names = config.provider_names
    if not names:
        raise ConfigValidationError("provider_order must name at least one provider")

    # Imported here: provider modules depend on this one.
    from strongrand.providers.registry import ProviderRegistry

    unknown = ProviderRegistry.unknown(names)
    if unknown:
        raise ConfigValidationError(
            f"Unknown provider(s) in provider_order: {', '.join(unknown)}. "
            f"Available: {', '.join(ProviderRegistry.list_available())}"
        )
    return config
