"""Test configuration and fixtures."""
import pytest
import pandas as pd
import numpy as np


@pytest.fixture
def outlier_sample():
    """Ten yearly values with one obvious spike (40)."""
    return [10, 12, 9, 15, 40, 11, 13, 14, 9, 12]


@pytest.fixture
def constant_sample():
    return [5, 5, 5, 5, 5]


@pytest.fixture
def linear_trend():
    return list(range(1, 11))


@pytest.fixture
def dirty_sample():
    """Values as they arrive from the provider: gaps, text and garbage mixed in."""
    return [1.5, None, "2.5", float("nan"), "n/a", float("inf"), 3, -float("inf"), True, {}, 4.0]


@pytest.fixture
def sample_timeseries_data():
    """Wide frame of yearly indicator values, one column per country."""
    periods = pd.Index([str(year) for year in range(2000, 2020)], name="period")
    rng = np.random.default_rng(7)
    return pd.DataFrame(
        {
            "USA": rng.normal(2.0, 1.0, len(periods)),
            "BRA": rng.normal(2.5, 2.0, len(periods)),
        },
        index=periods,
    )


@pytest.fixture
def imf_payload():
    """Provider payload shaped like the IMF DataMapper response."""
    return {
        "values": {
            "NGDP_RPCH": {
                "USA": {"2019": 2.3, "2020": -2.8, "2021": 5.9, "2022": 1.9},
                "BRA": {"2019": 1.2, "2020": -3.3, "2021": "4.8"},
            }
        }
    }
