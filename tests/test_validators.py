"""Tests for selection validation."""
from datetime import date

from econstats.utils.validators import validate_selection, validate_year


class TestValidateSelection:
    """Test validate_selection()."""

    def test_valid_selection(self):
        result = validate_selection("NGDP_RPCH", ["USA", "BRA"], ["2020", "2021"])
        assert result.is_valid
        assert result.errors == []

    def test_collects_every_missing_field(self):
        result = validate_selection("", [], None)
        assert not result.is_valid
        assert len(result.errors) == 3

    def test_limits(self):
        entities = [f"C{i}" for i in range(11)]
        periods = [str(year) for year in range(1970, 2021)]
        result = validate_selection("NGDP_RPCH", entities, periods)
        assert result.errors == ["At most 10 entities are allowed", "At most 50 periods are allowed"]

    def test_limits_are_inclusive(self):
        entities = [f"C{i}" for i in range(10)]
        periods = [str(year) for year in range(1971, 2021)]
        assert validate_selection("NGDP_RPCH", entities, periods).is_valid


class TestValidateYear:
    """Test validate_year()."""

    def test_accepts_years_in_range(self):
        assert validate_year("1980")
        assert validate_year(2020)
        assert validate_year(date.today().year)

    def test_rejects_out_of_range_and_garbage(self):
        assert not validate_year(1979)
        assert not validate_year(date.today().year + 1)
        assert not validate_year("abc")
        assert not validate_year(None)
