"""
Tests for environment-driven configuration
"""

import logging
import os
from datetime import date
from unittest.mock import patch

import pytest

from armreif.config import ConfigError, configure_logging, load_config


class TestLoadConfig:
    """Test cases for load_config"""

    def test_defaults(self):
        config = load_config({})
        assert config.location.latitude == 48.1351
        assert config.location.longitude == 11.582
        assert config.tz_offset == 1
        assert config.reference_date == date(2025, 6, 21)
        assert config.dst_rule == "eu"
        assert len(config.anchors) == 6

    def test_overrides(self):
        config = load_config(
            {
                "ARMREIF_LATITUDE": "40.7128",
                "ARMREIF_LONGITUDE": "-74.0060",
                "ARMREIF_TZ_OFFSET": "-5",
                "ARMREIF_REFERENCE_DATE": "2025-03-20",
                "ARMREIF_DST_RULE": "America/New_York",
            }
        )
        assert config.location.longitude == -74.006
        assert config.tz_offset == -5
        assert config.reference_date == date(2025, 3, 20)
        assert config.dst_rule == "America/New_York"

    def test_blank_values_fall_back_to_defaults(self):
        config = load_config({"ARMREIF_TZ_OFFSET": "  "})
        assert config.tz_offset == 1

    @pytest.mark.parametrize(
        "key, value",
        [
            ("ARMREIF_LATITUDE", "north"),
            ("ARMREIF_LATITUDE", "95"),
            ("ARMREIF_LONGITUDE", "-181"),
            ("ARMREIF_TZ_OFFSET", "1.5"),
            ("ARMREIF_TZ_OFFSET", "15"),
            ("ARMREIF_REFERENCE_DATE", "21.06.2025"),
            ("ARMREIF_DST_RULE", "Nowhere/Special"),
        ],
    )
    def test_invalid_values(self, key, value):
        with pytest.raises(ConfigError) as exc_info:
            load_config({key: value})
        assert key.split("_")[1] in str(exc_info.value)

    def test_reads_process_environment(self):
        with patch("armreif.config.load_dotenv") as mock_load_dotenv:
            with patch.dict(os.environ, {"ARMREIF_TZ_OFFSET": "2"}):
                config = load_config()
        mock_load_dotenv.assert_called_once()
        assert config.tz_offset == 2


class TestConfigureLogging:
    """Log level selection"""

    def test_level_from_environment(self):
        with patch("armreif.config.logging.basicConfig") as mock_basic:
            configure_logging({"ARMREIF_LOG_LEVEL": "debug"})
        assert mock_basic.call_args.kwargs["level"] == logging.DEBUG

    def test_unknown_level_defaults_to_info(self):
        with patch("armreif.config.logging.basicConfig") as mock_basic:
            configure_logging({"ARMREIF_LOG_LEVEL": "chatty"})
        assert mock_basic.call_args.kwargs["level"] == logging.INFO
