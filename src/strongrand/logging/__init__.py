"""Diagnostic logging subsystem for strongrand.

Provides immutable per-generation records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from strongrand.logging.logger import GenerationLogger
from strongrand.logging.types import GenerationRecord

__all__ = [
    "GenerationLogger",
    "GenerationRecord",
]
