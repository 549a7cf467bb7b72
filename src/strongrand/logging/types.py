"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationRecord:
    """Immutable record of one entropy generation.

    Never carries the generated bytes or anything derived from them.

    Attributes:
        timestamp_ns: Wall-clock time of generation (nanoseconds since epoch).
        source: Name of the provider that supplied the bytes.
        strong: Whether that provider is considered strong.
        length: Number of bytes generated.
        elapsed_ms: Time spent in the answering provider (milliseconds).
        skipped: Higher-priority providers that declined.
        purpose: ``'entropy'`` for raw buffers, ``'token'`` for hashed tokens.
        algorithm: Hash algorithm for tokens, empty for raw buffers.
    """

    timestamp_ns: int
    source: str
    strong: bool
    length: int
    elapsed_ms: float
    skipped: tuple[str, ...]
    purpose: str = "entropy"
    algorithm: str = ""
