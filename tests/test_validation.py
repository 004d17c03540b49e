"""Tests for ZIP code and forecast-day validation."""

import pytest

from core.validation import is_valid_forecast_days, is_valid_zip_code


class TestZipCode:
    """Tests for is_valid_zip_code."""

    @pytest.mark.parametrize("zip_code", ["90210", "00501", "10001"])
    def test_accepts_five_ascii_digits(self, zip_code: str) -> None:
        assert is_valid_zip_code(zip_code)

    @pytest.mark.parametrize(
        "zip_code",
        [
            "",
            "     ",
            "9021",
            "902100",
            "9021a",
            "90 10",
            "90210-1234",
            " 90210",
            "١٢٣٤٥",  # Arabic-Indic digits pass str.isdigit() but aren't ZIPs
            "9021²",
        ],
    )
    def test_rejects_malformed(self, zip_code: str) -> None:
        assert not is_valid_zip_code(zip_code)

    def test_rejects_non_strings(self) -> None:
        assert not is_valid_zip_code(None)
        assert not is_valid_zip_code(90210)


class TestForecastDays:
    """Tests for is_valid_forecast_days."""

    @pytest.mark.parametrize("days", [1, 2, 3])
    def test_accepts_one_to_three(self, days: int) -> None:
        assert is_valid_forecast_days(days)

    @pytest.mark.parametrize("days", [0, 4, -1, 100])
    def test_rejects_out_of_range(self, days: int) -> None:
        assert not is_valid_forecast_days(days)

    def test_rejects_bool_and_non_int(self) -> None:
        assert not is_valid_forecast_days(True)
        assert not is_valid_forecast_days(2.0)
        assert not is_valid_forecast_days("2")
