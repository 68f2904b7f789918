"""Flatten a statistics report into labelled rows for display."""
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from econstats.analysis.models import DisplayRow, StatisticsReport
from econstats.config import DISPLAY_LOCALE, NOT_AVAILABLE

# locale -> (thousands separator, decimal separator)
LOCALE_SEPARATORS: Dict[str, Tuple[str, str]] = {
    "en-US": (",", "."),
    "en-GB": (",", "."),
    "pt-BR": (".", ","),
    "de-DE": (".", ","),
}

COUNT_DECIMALS = 0
DEFAULT_DECIMALS = 2
RATIO_DECIMALS = 4


class _Metric(NamedTuple):
    category: str
    metric: str
    getter: Callable[[StatisticsReport], Optional[float]]
    decimals: int
    description: str


_METRICS: List[_Metric] = [
    _Metric("Basic", "Count", lambda r: r.basic.count, COUNT_DECIMALS, "Number of observations"),
    _Metric("Basic", "Mean", lambda r: r.basic.mean, DEFAULT_DECIMALS, "Average value"),
    _Metric("Basic", "Median", lambda r: r.basic.median, DEFAULT_DECIMALS, "Middle value of the sorted data"),
    _Metric("Basic", "Mode", lambda r: r.basic.mode, DEFAULT_DECIMALS, "Most frequent value"),
    _Metric("Basic", "Range", lambda r: r.basic.range, DEFAULT_DECIMALS, "Difference between maximum and minimum"),
    _Metric("Quartiles", "Q1 (25%)", lambda r: r.quartiles.q1, DEFAULT_DECIMALS, "First quartile"),
    _Metric("Quartiles", "Q2 (50%)", lambda r: r.quartiles.q2, DEFAULT_DECIMALS, "Second quartile (median)"),
    _Metric("Quartiles", "Q3 (75%)", lambda r: r.quartiles.q3, DEFAULT_DECIMALS, "Third quartile"),
    _Metric("Quartiles", "IQR", lambda r: r.quartiles.iqr, DEFAULT_DECIMALS, "Interquartile range"),
    _Metric("Variability", "Variance", lambda r: r.variance.variance, DEFAULT_DECIMALS, "Spread of the data around the mean"),
    _Metric(
        "Variability",
        "Standard Deviation",
        lambda r: r.variance.standard_deviation,
        DEFAULT_DECIMALS,
        "Square root of the variance",
    ),
    _Metric(
        "Variability",
        "Coefficient of Variation",
        lambda r: r.variance.coefficient_of_variation,
        RATIO_DECIMALS,
        "Variability relative to the mean",
    ),
    _Metric("Distribution", "Skewness", lambda r: r.distribution.skewness, RATIO_DECIMALS, "Asymmetry of the distribution"),
    _Metric("Distribution", "Kurtosis", lambda r: r.distribution.kurtosis, RATIO_DECIMALS, "Tailedness of the distribution (excess)"),
    _Metric("Distribution", "Entropy", lambda r: r.distribution.entropy, RATIO_DECIMALS, "Uncertainty of the value histogram (bits)"),
    _Metric("Outliers", "Outlier Count", lambda r: r.outliers.outlier_count, COUNT_DECIMALS, "Number of atypical values"),
    _Metric(
        "Temporal",
        "Autocorrelation",
        lambda r: r.time_series.autocorrelation,
        RATIO_DECIMALS,
        "Correlation with the previous period (lag 1)",
    ),
]


def format_number(value: Optional[float], decimals: int = DEFAULT_DECIMALS, locale: str = DISPLAY_LOCALE) -> str:
    """Render a number with grouping and at most ``decimals`` fraction digits.

    Halves round away from zero (``14.125`` renders as ``14.13``). Trailing
    fraction zeros are dropped (``12.50`` renders as ``12.5``). None and
    non-finite values render as the not-available marker.

    Raises:
        ValueError: If ``locale`` is not supported.
    """
    if locale not in LOCALE_SEPARATORS:
        raise ValueError(f"Unsupported locale {locale!r}; expected one of {sorted(LOCALE_SEPARATORS)}")
    if value is None or not math.isfinite(value):
        return NOT_AVAILABLE

    # exact binary value, ties away from zero (round() would go to even)
    exact = Decimal(float(value))
    with localcontext() as context:
        context.prec = max(context.prec, exact.adjusted() + decimals + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    text = f"{abs(rounded):,.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if rounded < 0 and text.strip("0.,"):
        text = "-" + text

    thousands, decimal = LOCALE_SEPARATORS[locale]
    return text.translate(str.maketrans({",": thousands, ".": decimal}))


def format_for_display(report: StatisticsReport, locale: str = DISPLAY_LOCALE) -> List[DisplayRow]:
    """Seventeen display rows in a fixed order, whatever the sample contained."""
    return [
        DisplayRow(
            category=metric.category,
            metric=metric.metric,
            value=format_number(metric.getter(report), metric.decimals, locale=locale),
            description=metric.description,
        )
        for metric in _METRICS
    ]
