"""Diagnostic logger for entropy generation events.

Uses the standard ``logging`` module with the ``"strongrand"`` logger.
Supports three verbosity levels and an in-memory diagnostic mode.
"""

from __future__ import annotations

import json
import logging
import threading
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from strongrand.config import StrongRandConfig
    from strongrand.logging.types import GenerationRecord

logger = logging.getLogger("strongrand")


class GenerationLogger:
    """Per-generation diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per generation (source, strength, length,
        latency).

        ``"full"``: JSON dump of all record fields.

    Diagnostic mode keeps every record in memory for
    ``get_diagnostic_data()`` and ``get_summary_stats()``. Storage is
    guarded by a lock because one logger serves concurrent callers.
    """

    def __init__(self, config: StrongRandConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[GenerationRecord] = []
        self._lock = threading.Lock()

    def log_generation(self, record: GenerationRecord) -> None:
        """Log a single generation event."""
        if self._diagnostic_mode:
            with self._lock:
                self._records.append(record)

        if self._log_level == "summary":
            logger.info(
                "entropy purpose=%s source=%s%s bytes=%d algo=%s fetch=%.3fms",
                record.purpose,
                record.source,
                "" if record.strong else " [WEAK]",
                record.length,
                record.algorithm or "-",
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("generation_record: %s", json.dumps(asdict(record)))

    def get_diagnostic_data(self) -> list[GenerationRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        with self._lock:
            return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute aggregate statistics over stored records.

        Returns:
            Dictionary with per-source counts and weak-source rate, or an
            empty dict if no records are stored.
        """
        records = self.get_diagnostic_data()
        if not records:
            return {}

        n = len(records)
        weak_count = sum(1 for r in records if not r.strong)
        elapsed = [r.elapsed_ms for r in records]
        return {
            "total_generations": n,
            "source_counts": dict(Counter(r.source for r in records)),
            "token_count": sum(1 for r in records if r.purpose == "token"),
            "weak_count": weak_count,
            "weak_rate": weak_count / n,
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
        }
