"""
Pytest configuration and fixtures
"""

import os
import sys
from datetime import date

import matplotlib
import pytest

matplotlib.use("Agg")

# Add src to Python path for all tests
tests_dir = os.path.dirname(__file__)
project_root = os.path.dirname(tests_dir)
src_path = os.path.abspath(os.path.join(project_root, "src"))

if src_path not in sys.path:
    sys.path.insert(0, src_path)

from armreif.models import GeoLocation, SundialConfig  # noqa: E402

MUNICH = GeoLocation(latitude=48.1351, longitude=11.5820)
SUMMER_SOLSTICE = date(2025, 6, 21)


@pytest.fixture
def munich():
    return MUNICH


@pytest.fixture
def munich_config():
    """The bracelet as shipped: Munich, CET, calibrated on the 2025 summer solstice."""
    return SundialConfig(location=MUNICH, tz_offset=1, reference_date=SUMMER_SOLSTICE)
