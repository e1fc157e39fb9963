"""
Tests for the armreif-convert command line
"""

import logging
import os
from unittest.mock import patch

import pytest

from armreif.config import ConfigError
from armreif.convert import EXIT_BAD_INPUT, EXIT_NO_SOLUTION, main


@pytest.fixture
def cli_config(munich_config):
    with patch("armreif.convert.load_config", return_value=munich_config):
        with patch("armreif.convert.configure_logging"):
            yield munich_config


class TestConvertCli:
    """Test cases for main()"""

    def test_prints_result(self, cli_config, capsys):
        assert main(["17:00", "--date", "2025-08-15"]) == 0
        out = capsys.readouterr().out
        assert "Bracelet shows: 17:00" in out
        assert "True time:      16:" in out
        assert "Correction:     -4" in out

    def test_reference_date_needs_no_correction(self, cli_config, capsys):
        assert main(["09:00", "--date", "2025-06-21"]) == 0
        out = capsys.readouterr().out
        assert "True time:      09:00" in out
        assert "+0 min" in out

    def test_no_solution(self, cli_config, capsys):
        assert main(["14:00", "--date", "2025-12-21"]) == EXIT_NO_SOLUTION
        assert "never reaches" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [["25:00"], ["14:00", "--date", "2025-02-30"]])
    def test_bad_input(self, cli_config, capsys, argv):
        assert main(argv) == EXIT_BAD_INPUT
        assert "Invalid input" in capsys.readouterr().err

    def test_bad_config(self, capsys):
        with patch("armreif.convert.load_config", side_effect=ConfigError("ARMREIF_TZ_OFFSET bad")):
            with patch("armreif.convert.configure_logging"):
                assert main(["14:00"]) == EXIT_BAD_INPUT
        assert "ARMREIF_TZ_OFFSET" in capsys.readouterr().err

    def test_year_chart(self, cli_config, capsys, tmp_path):
        target = tmp_path / "curve.png"
        assert main(["17:00", "--date", "2025-08-15", "--year-chart", str(target)]) == 0
        assert target.exists()
        assert f"Saved: {target}" in capsys.readouterr().out

    def test_log_level_from_dotenv(self, munich_config):
        """A log level that only exists in .env still reaches the logging setup"""

        def fake_load_dotenv():
            os.environ["ARMREIF_LOG_LEVEL"] = "DEBUG"

        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("ARMREIF_LOG_LEVEL", None)
            with patch("armreif.convert.load_dotenv", side_effect=fake_load_dotenv):
                with patch("armreif.convert.load_config", return_value=munich_config):
                    with patch("armreif.config.logging.basicConfig") as mock_basic:
                        assert main(["17:00", "--date", "2025-08-15"]) == 0
        assert mock_basic.call_args.kwargs["level"] == logging.DEBUG
