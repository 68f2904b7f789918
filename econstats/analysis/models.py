"""Result models produced by the statistics engine.

Every numeric field is optional: ``None`` means the statistic is not defined
for the sample (too few observations, zero variance, empty input). Consumers
render a fallback for ``None`` instead of treating it as an error.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, computed_field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class BasicStats(_Frozen):
    count: int = 0
    mean: Optional[float] = None
    median: Optional[float] = None
    mode: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    range: Optional[float] = None


class Quartiles(_Frozen):
    q1: Optional[float] = None
    q2: Optional[float] = None
    q3: Optional[float] = None
    iqr: Optional[float] = None


class VarianceStats(_Frozen):
    variance: Optional[float] = None
    standard_deviation: Optional[float] = None
    coefficient_of_variation: Optional[float] = None


class DistributionStats(_Frozen):
    skewness: Optional[float] = None
    kurtosis: Optional[float] = None
    entropy: Optional[float] = None


class Outlier(_Frozen):
    value: float
    z_score: float
    index: int  # position in the sanitized sample


class OutlierReport(_Frozen):
    z_scores: List[float] = []
    outliers: List[Outlier] = []
    threshold: float

    @computed_field
    @property
    def outlier_count(self) -> int:
        return len(self.outliers)


class AutocorrelationStats(_Frozen):
    autocorrelation: Optional[float] = None
    lag: int = 1


class StatisticsReport(_Frozen):
    """All statistics for one (entity, indicator) sample."""

    label: str = ""
    basic: BasicStats
    quartiles: Quartiles
    variance: VarianceStats
    distribution: DistributionStats
    outliers: OutlierReport
    time_series: AutocorrelationStats


class DisplayRow(_Frozen):
    category: str
    metric: str
    value: str
    description: str


class SeriesSummary(_Frozen):
    """Headline metrics of one time-ordered series.

    ``total_change`` is the first-to-last change in percent.
    """

    label: str = ""
    count: int = 0
    average: Optional[float] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    total_change: Optional[float] = None
