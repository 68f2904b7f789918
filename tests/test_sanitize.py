"""Tests for sample sanitization."""
import math
from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from econstats.analysis.sanitize import sanitize


class TestSanitize:
    """Test sanitize()."""

    def test_keeps_finite_numbers_in_order(self, dirty_sample):
        """Only finite numeric entries survive, order preserved."""
        assert sanitize(dirty_sample) == [1.5, 2.5, 3.0, 4.0]

    def test_output_never_longer_and_always_finite(self, dirty_sample):
        cleaned = sanitize(dirty_sample)
        assert len(cleaned) <= len(dirty_sample)
        assert all(isinstance(v, float) and math.isfinite(v) for v in cleaned)

    def test_idempotent(self, dirty_sample):
        once = sanitize(dirty_sample)
        assert sanitize(once) == once

    def test_empty_and_all_garbage(self):
        assert sanitize([]) == []
        assert sanitize([None, float("nan"), "", "abc"]) == []

    def test_accepts_numpy_pandas_and_decimal(self):
        """Arrays, series and Decimal values are all usable samples."""
        assert sanitize(np.array([1.0, np.nan, 2.0])) == [1.0, 2.0]
        assert sanitize(pd.Series([3, None, 4])) == [3.0, 4.0]
        assert sanitize([Decimal("1.25"), Decimal("NaN"), np.int64(7)]) == [1.25, 7.0]

    def test_accepts_generators(self):
        assert sanitize(v for v in [1, None, 2]) == [1.0, 2.0]

    @pytest.mark.parametrize("raw", [None, 42, "1,2,3", b"123", {"a": 1}])
    def test_rejects_non_sequences(self, raw):
        """A malformed invocation is a programming error."""
        with pytest.raises(TypeError):
            sanitize(raw)

    def test_numeric_text_is_plain_decimal(self):
        """Text must look like a decimal number; Python-only spellings are dropped."""
        raw = ["1_000", "1e3", " 2.5 ", ".5", "5.", "+3", "0x10", "nan", "Infinity", "1e999", "1,5"]
        assert sanitize(raw) == [1000.0, 2.5, 0.5, 5.0, 3.0]
