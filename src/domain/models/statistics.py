"""Domain model for descriptive statistics."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SeriesStats:
    """Descriptive statistics of a numeric series.

    Attributes:
        std_dev: Population standard deviation.
        variance: Population variance.
    """

    mean: Decimal
    median: Decimal
    min: Decimal
    max: Decimal
    sum: Decimal
    std_dev: Decimal
    variance: Decimal


__all__ = ["SeriesStats"]
