"""Statistical anomaly detection over the Bristol stool-form series."""

import math
from dataclasses import dataclass
from typing import Sequence


# A standard deviation above this spans most of the 1-7 scale, i.e.
# alternating constipation and diarrhea rather than an off-center baseline.
STD_DEV_THRESHOLD = 1.5


@dataclass(frozen=True)
class BristolAnomaly:
    mean: float
    variance: float
    std_dev: float
    is_anomalous: bool


def detect_bristol_anomalies(values: Sequence[float]) -> BristolAnomaly:
    """
    Compute population mean, variance and standard deviation of Bristol types.

    Args:
        values: Non-empty sequence of Bristol types. Out-of-range values are
            used as-is; range validation happens upstream.

    Returns:
        BristolAnomaly with is_anomalous = std_dev > STD_DEV_THRESHOLD

    Raises:
        ValueError: If values is empty (callers short-circuit before this)
    """
    if not values:
        raise ValueError("Cannot compute Bristol statistics for an empty series")

    n = len(values)
    mean = sum(values) / n
    variance = sum((v - mean) ** 2 for v in values) / n
    std_dev = math.sqrt(variance)

    return BristolAnomaly(
        mean=mean,
        variance=variance,
        std_dev=std_dev,
        is_anomalous=std_dev > STD_DEV_THRESHOLD,
    )
