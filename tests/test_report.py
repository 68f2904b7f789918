"""Tests for report assembly."""
import math

import pytest
from pydantic import ValidationError

from econstats.analysis.report import TimeSeriesAnalysis, compute_report


class TestComputeReport:
    """Test compute_report()."""

    def test_empty_sample_is_a_valid_report(self):
        """No usable data yields count 0 and every other statistic undefined."""
        report = compute_report([None, float("nan")], label="VEN")
        assert report.label == "VEN"
        assert report.basic.count == 0
        basic = report.basic.model_dump()
        assert all(value is None for key, value in basic.items() if key != "count")
        assert all(value is None for value in report.quartiles.model_dump().values())
        assert all(value is None for value in report.variance.model_dump().values())
        assert all(value is None for value in report.distribution.model_dump().values())
        assert report.outliers.z_scores == []
        assert report.outliers.outlier_count == 0
        assert report.time_series.autocorrelation is None

    def test_constant_sample(self, constant_sample):
        report = compute_report(constant_sample, label="CST")
        assert report.basic.mean == report.basic.median == report.basic.mode == 5.0
        assert report.basic.range == 0.0
        assert report.variance.variance == 0.0
        assert report.variance.standard_deviation == 0.0
        assert report.variance.coefficient_of_variation is None
        assert report.distribution.skewness is None
        assert report.distribution.kurtosis is None
        assert report.distribution.entropy == 0.0
        assert report.outliers.z_scores == [0.0] * 5
        assert report.outliers.outliers == []
        assert report.time_series.autocorrelation is None

    def test_outlier_sample(self, outlier_sample):
        report = compute_report(outlier_sample, label="BRA")
        assert report.basic.count == 10
        assert report.quartiles.iqr == 3.5
        assert [o.value for o in report.outliers.outliers] == [40.0]
        assert report.time_series.lag == 1

    def test_parameters_are_forwarded(self, outlier_sample):
        report = compute_report(outlier_sample, threshold=0.5, bins=2, lag=2)
        assert report.outliers.threshold == 0.5
        assert report.outliers.outlier_count > 1
        assert report.time_series.lag == 2

    def test_dirty_sample_is_sanitized_once(self, dirty_sample):
        report = compute_report(dirty_sample)
        assert report.basic.count == 4
        assert len(report.outliers.z_scores) == 4

    def test_extreme_finite_range(self):
        """Values near the float limits still produce a report."""
        report = compute_report([-1e308, 0.0, 1e308])
        assert report.basic.count == 3
        assert report.basic.mean == 0.0
        assert report.basic.range is None
        assert report.distribution.entropy == round(math.log2(3), 6)
        assert report.distribution.skewness == 0.0

    def test_report_is_immutable(self, outlier_sample):
        report = compute_report(outlier_sample)
        with pytest.raises(ValidationError):
            report.label = "changed"

    def test_serializes_outlier_count(self, outlier_sample):
        data = compute_report(outlier_sample, label="BRA").model_dump()
        assert data["outliers"]["outlier_count"] == 1
        assert set(data) == {"label", "basic", "quartiles", "variance", "distribution", "outliers", "time_series"}

    def test_rejects_non_sequence(self):
        with pytest.raises(TypeError):
            compute_report(None)


class TestTimeSeriesAnalysis:
    """Test the pandas entry points."""

    def test_describe_uses_series_name(self, sample_timeseries_data):
        report = TimeSeriesAnalysis.describe(sample_timeseries_data["USA"])
        assert report.label == "USA"
        assert report.basic.count == 20
        assert report.basic.mean == pytest.approx(sample_timeseries_data["USA"].mean(), abs=1e-6)

    def test_describe_frame(self, sample_timeseries_data):
        frame = sample_timeseries_data.copy()
        frame.iloc[3, 1] = float("nan")
        reports = TimeSeriesAnalysis.describe_frame(frame)
        assert list(reports) == ["USA", "BRA"]
        assert reports["BRA"].basic.count == 19

    def test_summarize(self, sample_timeseries_data):
        series = sample_timeseries_data["BRA"]
        summary = TimeSeriesAnalysis.summarize(series)
        assert summary.label == "BRA"
        assert summary.count == 20
        assert summary.maximum == pytest.approx(series.max(), abs=1e-6)
        expected = (series.iloc[-1] - series.iloc[0]) / series.iloc[0] * 100
        assert summary.total_change == pytest.approx(expected, rel=1e-9, abs=1e-6)
