"""
Tests for data model invariants
"""

from dataclasses import FrozenInstanceError
from datetime import date, time

import pytest

from armreif.i18n import t
from armreif.models import ConversionResult, GeoLocation, NoSolution


class TestGeoLocation:
    def test_valid(self):
        loc = GeoLocation(latitude=-33.9, longitude=151.2)
        assert loc.latitude == -33.9

    @pytest.mark.parametrize("lat, lon", [(90.1, 0), (-91, 0), (0, 180.5), (0, -200)])
    def test_out_of_range(self, lat, lon):
        with pytest.raises(ValueError):
            GeoLocation(latitude=lat, longitude=lon)

    def test_immutable(self):
        loc = GeoLocation(latitude=1, longitude=2)
        with pytest.raises(FrozenInstanceError):
            loc.latitude = 3  # type: ignore[misc]


class TestResults:
    def test_no_solution_is_falsy(self):
        assert not NoSolution(target_date=date(2025, 12, 21), cos_hour_angle=1.8)

    def test_conversion_result_is_truthy(self):
        result = ConversionResult(read_time=time(14, 0), true_time=time(13, 5), correction_minutes=-55)
        assert result
        assert result.true_time_str == "13:05"
        assert result.correction_str == "-55 min"

    def test_large_positive_correction(self):
        result = ConversionResult(read_time=time(9, 0), true_time=time(10, 30), correction_minutes=90)
        assert result.correction_str == "+90 min"


class TestI18n:
    def test_lookup(self):
        assert t("label_true", "de") == "Echte Uhrzeit"
        assert t("label_true", "en") == "True time"

    def test_fallbacks(self):
        assert t("label_true", "fr") == "True time"
        assert t("no_such_key", "de") == "no_such_key"
