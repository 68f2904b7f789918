"""Descriptive statistics for a single indicator series.

Each public ``calculate_*`` function accepts a raw sample, sanitizes it and
returns its statistic rounded to ``ROUND_DIGITS`` decimals. The array-level
functions (``basic_stats``, ``quartiles``, ...) take an already sanitized
``np.ndarray`` so that :func:`econstats.analysis.report.compute_report`
sanitizes only once.

Two normalizations coexist on purpose:

- the variance family is Bessel-corrected (divides by ``n - 1``);
- skewness, kurtosis, z-scores and autocorrelation use population moments
  (divide by ``n``).

Samples are divided by a power of two before any arithmetic, so huge but
finite values (``1e300``) do not overflow intermediate squares and sums.
A result that is not representable as a finite float is reported as None.

Example:
    >>> calculate_basic_stats([3, 1, None, 2]).median
    2.0
    >>> calculate_quartiles([1, 2, 3, 4]).q1
    1.75
"""
import math
from typing import Iterable, Optional, Tuple

import numpy as np
import pandas as pd

from econstats.analysis.models import (
    BasicStats,
    Outlier,
    OutlierReport,
    Quartiles,
    SeriesSummary,
    VarianceStats,
)
from econstats.analysis.sanitize import sanitize
from econstats.config import (
    AUTOCORRELATION_LAG,
    ENTROPY_BINS,
    OUTLIER_THRESHOLD,
    ROUND_DIGITS,
)


def _round(value) -> Optional[float]:
    value = float(value)
    if not math.isfinite(value):
        return None
    # + 0.0 folds -0.0 into 0.0
    return round(value, ROUND_DIGITS) + 0.0


def _as_array(data: Iterable) -> np.ndarray:
    return np.asarray(sanitize(data), dtype=float)


def _scaled(values: np.ndarray) -> Tuple[np.ndarray, int]:
    """``values / 2**exponent`` with every magnitude below 1, and the exponent.

    Power-of-two scaling is exact, so sums, differences, ratios and
    interpolations on the scaled sample equal the unscaled ones bit for bit
    once multiplied back with :func:`_unscale`.
    """
    peak = float(np.max(np.abs(values))) if values.size else 0.0
    if peak == 0:
        return values, 0
    exponent = int(np.frexp(peak)[1])
    return np.ldexp(values, -exponent), exponent


def _unscale(value, exponent: int) -> float:
    with np.errstate(over="ignore"):
        return float(np.ldexp(value, exponent))


def _is_constant(values: np.ndarray) -> bool:
    """True when every observation is equal, i.e. the spread is exactly zero.

    Comparing extremes avoids the rounding residue a computed mean leaves in
    the deviations of a constant series such as ``[0.1, 0.1, 0.1]``.
    """
    return values.size > 0 and values.min() == values.max()


def _standardized(values: np.ndarray) -> Optional[np.ndarray]:
    """Population z-scores, or None when the sample has no spread."""
    if values.size == 0 or _is_constant(values):
        return None
    scaled, _ = _scaled(values)
    return (scaled - scaled.mean()) / np.std(scaled)


def _validate_count(name: str, value, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value!r}")


# Basic stats


def basic_stats(values: np.ndarray) -> BasicStats:
    n = values.size
    if n == 0:
        return BasicStats(count=0)

    scaled, exponent = _scaled(values)
    return BasicStats(
        count=n,
        mean=_round(_unscale(scaled.mean(), exponent)),
        median=_round(_unscale(np.median(scaled), exponent)),
        mode=_mode(values),
        min=_round(values.min()),
        max=_round(values.max()),
        range=_round(_unscale(scaled.max() - scaled.min(), exponent)),
    )


def _mode(values: np.ndarray) -> Optional[float]:
    """Lowest of the most frequent values.

    When every value occurs exactly once there is no mode and None is
    returned, which includes single-observation samples.
    """
    counts = pd.Series(values).value_counts()
    modal = counts[counts == counts.max()].index
    if len(modal) == values.size:
        return None
    return _round(min(modal))


def calculate_basic_stats(data: Iterable) -> BasicStats:
    """Count, mean, median, mode, min, max and range of a sample.

    The median averages the two middle order statistics for even ``n``. Every
    field except ``count`` is None for an empty sample.
    """
    return basic_stats(_as_array(data))


# Quartiles


def _percentile(values: np.ndarray, percentile: float) -> Optional[float]:
    if values.size == 0:
        return None
    scaled, exponent = _scaled(values)
    # numpy's default "linear" method is R-7: index = p/100 * (n - 1)
    return _unscale(np.percentile(scaled, percentile), exponent)


def quartiles(values: np.ndarray) -> Quartiles:
    if values.size == 0:
        return Quartiles()

    scaled, exponent = _scaled(values)
    q1, q2, q3 = (float(q) for q in np.percentile(scaled, [25, 50, 75]))
    return Quartiles(
        q1=_round(_unscale(q1, exponent)),
        q2=_round(_unscale(q2, exponent)),
        q3=_round(_unscale(q3, exponent)),
        iqr=_round(_unscale(q3 - q1, exponent)),
    )


def calculate_percentile(data: Iterable, percentile: float) -> Optional[float]:
    """Percentile by linear interpolation between order statistics.

    Args:
        data: Raw sample.
        percentile: Value in ``[0, 100]``.

    Returns:
        The interpolated value, or None for an empty sample.

    Raises:
        ValueError: If ``percentile`` is outside ``[0, 100]``.
    """
    if not 0 <= percentile <= 100:
        raise ValueError(f"percentile must be within [0, 100], got {percentile}")
    value = _percentile(_as_array(data), percentile)
    return None if value is None else _round(value)


def calculate_quartiles(data: Iterable) -> Quartiles:
    """Q1, Q2, Q3 and the interquartile range.

    Q2 comes from the interpolation formula and can differ from the
    even/odd median of :func:`calculate_basic_stats` in the last digits.
    """
    return quartiles(_as_array(data))


# Variance family


def variance_stats(values: np.ndarray, sample: bool = True) -> VarianceStats:
    n = values.size
    ddof = 1 if sample else 0
    if n == 0 or n - ddof < 1:
        return VarianceStats()

    scaled, exponent = _scaled(values)
    scaled_variance = 0.0 if _is_constant(values) else float(np.var(scaled, ddof=ddof))
    scaled_std = float(np.sqrt(scaled_variance))
    scaled_mean = float(scaled.mean())

    cv = None
    if scaled_mean != 0 and scaled_std != 0:
        cv = _round(abs(scaled_std / scaled_mean))

    return VarianceStats(
        variance=_round(_unscale(scaled_variance, 2 * exponent)),
        standard_deviation=_round(_unscale(scaled_std, exponent)),
        coefficient_of_variation=cv,
    )


def calculate_variance_stats(data: Iterable, sample: bool = True) -> VarianceStats:
    """Variance, standard deviation and coefficient of variation.

    Args:
        data: Raw sample.
        sample: Bessel-corrected (``n - 1``) variance when True, population
            variance otherwise.

    Returns:
        VarianceStats. All fields are None when the sample is too small
        (``n < 2`` for the sample form, ``n < 1`` for the population form).
        The coefficient of variation is also None when the mean or the
        standard deviation is zero.
    """
    return variance_stats(_as_array(data), sample=sample)


# Shape


def skewness(values: np.ndarray) -> Optional[float]:
    if values.size < 3:
        return None
    z = _standardized(values)
    return None if z is None else _round(np.mean(z ** 3))


def kurtosis(values: np.ndarray) -> Optional[float]:
    if values.size < 4:
        return None
    z = _standardized(values)
    return None if z is None else _round(np.mean(z ** 4) - 3)


def calculate_skewness(data: Iterable) -> Optional[float]:
    """Population skewness; None for ``n < 3`` or a constant sample."""
    return skewness(_as_array(data))


def calculate_kurtosis(data: Iterable) -> Optional[float]:
    """Population excess kurtosis; None for ``n < 4`` or a constant sample."""
    return kurtosis(_as_array(data))


def entropy(values: np.ndarray, bins: int = ENTROPY_BINS) -> Optional[float]:
    _validate_count("bins", bins, 1)
    n = values.size
    if n == 0:
        return None
    if _is_constant(values):
        return 0.0

    scaled, _ = _scaled(values)
    low = scaled.min()
    width = (scaled.max() - low) / bins
    # the maximum lands exactly on the upper edge and belongs to the last bin
    index = np.minimum(np.floor((scaled - low) / width).astype(int), bins - 1)
    counts = np.bincount(index, minlength=bins)
    probabilities = counts[counts > 0] / n
    return _round(-np.sum(probabilities * np.log2(probabilities)))


def calculate_entropy(data: Iterable, bins: int = ENTROPY_BINS) -> Optional[float]:
    """Shannon entropy (bits) of an equal-width histogram over ``[min, max]``.

    A constant sample has entropy 0. An empty sample has None.

    Raises:
        ValueError: If ``bins`` is not a positive integer.
    """
    return entropy(_as_array(data), bins=bins)


# Outliers


def z_scores(values: np.ndarray, threshold: float = OUTLIER_THRESHOLD) -> OutlierReport:
    if values.size == 0:
        return OutlierReport(threshold=threshold)

    scores = _standardized(values)
    if scores is None:
        scores = np.zeros(values.size)

    outliers = [
        Outlier(value=float(values[i]), z_score=_round(score), index=i)
        for i, score in enumerate(scores)
        if abs(score) > threshold
    ]
    return OutlierReport(
        z_scores=[_round(score) for score in scores],
        outliers=outliers,
        threshold=threshold,
    )


def calculate_z_scores(data: Iterable, threshold: float = OUTLIER_THRESHOLD) -> OutlierReport:
    """Population z-scores and the observations whose ``|z|`` exceeds ``threshold``.

    ``z_scores`` is aligned with the sanitized sample and outlier indices refer
    to positions in it. A constant sample scores 0 everywhere and has no
    outliers.
    """
    return z_scores(_as_array(data), threshold=threshold)


# Temporal dependency


def autocorrelation(values: np.ndarray, lag: int = AUTOCORRELATION_LAG) -> Optional[float]:
    _validate_count("lag", lag, 0)
    n = values.size
    if n <= lag or _is_constant(values):
        return None

    scaled, _ = _scaled(values)
    deviations = scaled - scaled.mean()
    numerator = float(np.dot(deviations[: n - lag], deviations[lag:]))
    denominator = float(np.dot(deviations, deviations))
    if denominator == 0:
        return None
    return _round(numerator / denominator)


def calculate_autocorrelation(data: Iterable, lag: int = AUTOCORRELATION_LAG) -> Optional[float]:
    """Lag-``k`` autocorrelation of a time-ordered sample.

    Sum of lagged deviation products over the total sum of squared deviations.
    None when ``n <= lag`` or the series has no variance.

    Raises:
        ValueError: If ``lag`` is not a non-negative integer.
    """
    return autocorrelation(_as_array(data), lag=lag)


# Headline metrics


def series_summary(values: np.ndarray, label: str = "") -> SeriesSummary:
    """Average, extremes and first-to-last percentage change.

    The change is defined as 0 when the first observation is 0.
    """
    n = values.size
    if n == 0:
        return SeriesSummary(label=label, count=0)

    scaled, exponent = _scaled(values)
    first, last = scaled[0], scaled[-1]
    total_change = 0.0 if first == 0 else (last - first) / first * 100
    return SeriesSummary(
        label=label,
        count=n,
        average=_round(_unscale(scaled.mean(), exponent)),
        minimum=_round(values.min()),
        maximum=_round(values.max()),
        total_change=_round(total_change),
    )


def calculate_summary(data: Iterable, label: str = "") -> SeriesSummary:
    """Headline metrics of a time-ordered sample; None fields when it is empty."""
    return series_summary(_as_array(data), label=label)
