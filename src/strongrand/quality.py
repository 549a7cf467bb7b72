"""Byte-level statistics for sanity-checking an entropy buffer.

Under the null hypothesis of uniformly distributed bytes the sample mean is
127.5 with population std 255 / sqrt(12), and byte counts follow a
chi-square distribution with 255 degrees of freedom.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from strongrand.exceptions import EntropyQualityError

POPULATION_MEAN = 127.5
POPULATION_STD = 255 / math.sqrt(12)
CHI_SQUARE_DOF = 255


@dataclass(frozen=True, slots=True)
class ByteStatistics:
    """Summary statistics of a byte buffer.

    Attributes:
        sample_count: Number of bytes examined.
        mean: Mean byte value (expected ~127.5).
        z_score: Standardised deviation of the mean from 127.5.
        chi_square: Pearson statistic of the byte histogram against uniform
            (expected ~255 for large samples).
    """

    sample_count: int
    mean: float
    z_score: float
    chi_square: float


def byte_statistics(data: bytes) -> ByteStatistics:
    """Compute :class:`ByteStatistics` for *data*.

    Raises:
        EntropyQualityError: If *data* is empty.
    """
    if not data:
        raise EntropyQualityError("Cannot compute statistics of an empty buffer")

    samples = np.frombuffer(data, dtype=np.uint8)
    n = len(samples)
    mean = float(np.mean(samples))
    sem = POPULATION_STD / math.sqrt(n)
    z_score = (mean - POPULATION_MEAN) / sem

    counts = np.bincount(samples, minlength=256).astype(np.float64)
    expected = n / 256.0
    chi_square = float(np.sum((counts - expected) ** 2) / expected)

    return ByteStatistics(sample_count=n, mean=mean, z_score=z_score, chi_square=chi_square)
