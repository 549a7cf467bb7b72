"""Exception hierarchy for strongrand.

All exceptions derive from StrongRandError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class StrongRandError(Exception):
    """Base exception for all strongrand errors."""


class EntropyUnavailableError(StrongRandError):
    """No entropy provider can supply bytes.

    Raised by a single provider when its primitive is missing, fails, or
    reports a weak result, and by the provider chain when every provider
    declined.
    """


class UnsupportedAlgorithm(StrongRandError, ValueError):
    """The requested token hash algorithm is not known to ``hashlib``."""


class ConfigValidationError(StrongRandError):
    """Configuration field validation failed."""


class EntropyQualityError(StrongRandError):
    """Byte statistics could not be computed (e.g., empty input)."""
