"""Statistics helpers shared by the analytics services."""

from collections.abc import Callable, Hashable, Iterable, Sequence
from decimal import Decimal
from typing import TypeVar

from src.domain.models.statistics import SeriesStats
from src.utils.decimal_utils import ZERO, coerce_decimal

T = TypeVar("T")


def compute_stats(values: Sequence[Decimal]) -> SeriesStats:
    """Compute descriptive statistics of a numeric series.

    Args:
        values: Numeric series; may be empty.

    Returns:
        SeriesStats: Mean, median, extrema, sum and population spread.
        Every field is zero for an empty series.
    """
    if not values:
        return SeriesStats(
            mean=ZERO,
            median=ZERO,
            min=ZERO,
            max=ZERO,
            sum=ZERO,
            std_dev=ZERO,
            variance=ZERO,
        )

    numbers = [coerce_decimal(value) for value in values]
    count = len(numbers)
    total = sum(numbers, ZERO)
    mean = total / count

    ordered = sorted(numbers)
    middle = count // 2
    if count % 2 == 0:
        median = (ordered[middle - 1] + ordered[middle]) / 2
    else:
        median = ordered[middle]

    variance = sum(((value - mean) ** 2 for value in numbers), ZERO) / count
    return SeriesStats(
        mean=mean,
        median=median,
        min=ordered[0],
        max=ordered[-1],
        sum=total,
        std_dev=variance.sqrt(),
        variance=variance,
    )


def z_score(value: Decimal, mean: Decimal, std_dev: Decimal) -> Decimal:
    """Return how many standard deviations value lies from mean.

    A zero standard deviation yields 0: a constant series has no outliers.
    """
    if std_dev == 0:
        return ZERO
    return (value - mean) / std_dev


def percentile(values: Sequence[Decimal], p) -> Decimal:
    """Return the linearly interpolated p-th percentile (p in [0, 100])."""
    if not values:
        return ZERO
    ordered = sorted(coerce_decimal(value) for value in values)
    index = coerce_decimal(p) / 100 * (len(ordered) - 1)
    lower = int(index)
    weight = index - lower
    if weight == 0:
        return ordered[lower]
    upper = lower + 1
    return ordered[lower] * (1 - weight) + ordered[upper] * weight


def group_by(
    items: Iterable[T],
    key: Callable[[T], Hashable],
) -> dict[str, list[T]]:
    """Group items by the stringified result of key, preserving order."""
    groups: dict[str, list[T]] = {}
    for item in items:
        groups.setdefault(str(key(item)), []).append(item)
    return groups


def sum_by(items: Iterable[T], key: Callable[[T], Decimal | None]) -> Decimal:
    """Sum key(item) over items, treating missing values as zero."""
    return sum((coerce_decimal(key(item)) for item in items), ZERO)


__all__ = ["compute_stats", "z_score", "percentile", "group_by", "sum_by"]
