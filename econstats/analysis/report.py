"""Assemble every statistic of a sample into one report."""
import logging
from typing import Dict, Iterable, Optional

import numpy as np
import pandas as pd

from econstats.analysis import statistics as st
from econstats.analysis.models import (
    AutocorrelationStats,
    DistributionStats,
    SeriesSummary,
    StatisticsReport,
)
from econstats.analysis.sanitize import sanitize
from econstats.config import AUTOCORRELATION_LAG, ENTROPY_BINS, OUTLIER_THRESHOLD

logger = logging.getLogger(__name__)


def compute_report(
    sample: Iterable,
    label: str = "",
    threshold: float = OUTLIER_THRESHOLD,
    bins: int = ENTROPY_BINS,
    lag: int = AUTOCORRELATION_LAG,
) -> StatisticsReport:
    """Compute the full statistics report for one sample.

    The sample is sanitized once and every statistic is derived from that
    sanitized copy. An empty sanitized sample is not an error: the report has
    ``count == 0`` and every other numeric field set to None.

    Args:
        sample: Raw, time-ordered values for one entity.
        label: Identifier of the sample, e.g. a country code.
        threshold: ``|z|`` above which an observation is an outlier.
        bins: Histogram bins used for the entropy.
        lag: Lag of the autocorrelation.

    Raises:
        TypeError: If ``sample`` is not a sequence.
        ValueError: If ``bins`` or ``lag`` are invalid.
    """
    values = np.asarray(sanitize(sample), dtype=float)

    report = StatisticsReport(
        label=label,
        basic=st.basic_stats(values),
        quartiles=st.quartiles(values),
        variance=st.variance_stats(values),
        distribution=DistributionStats(
            skewness=st.skewness(values),
            kurtosis=st.kurtosis(values),
            entropy=st.entropy(values, bins=bins),
        ),
        outliers=st.z_scores(values, threshold=threshold),
        time_series=AutocorrelationStats(
            autocorrelation=st.autocorrelation(values, lag=lag),
            lag=lag,
        ),
    )
    logger.debug(
        "Computed report for %r: %d observations, %d outliers",
        label,
        report.basic.count,
        report.outliers.outlier_count,
    )
    return report


class TimeSeriesAnalysis:
    """Perform statistical analysis on indicator time series held in pandas."""

    @staticmethod
    def describe(data: pd.Series, label: Optional[str] = None) -> StatisticsReport:
        """Report for one series; the label defaults to the series name."""
        if label is None:
            label = "" if data.name is None else str(data.name)
        return compute_report(data.tolist(), label=label)

    @staticmethod
    def describe_frame(frame: pd.DataFrame) -> Dict[str, StatisticsReport]:
        """One report per column, keyed by column name, in column order.

        Rows are expected in time order, as produced by
        :class:`econstats.utils.data_loader.DataLoader`.
        """
        return {
            str(column): TimeSeriesAnalysis.describe(frame[column], label=str(column))
            for column in frame.columns
        }

    @staticmethod
    def summarize(data: pd.Series, label: Optional[str] = None) -> SeriesSummary:
        """Average, extremes and total percentage change of one series."""
        if label is None:
            label = "" if data.name is None else str(data.name)
        return st.calculate_summary(data.tolist(), label=label)
