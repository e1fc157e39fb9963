"""Environment-driven configuration.

Values come from the process environment, optionally seeded from a ``.env``
file. Anything unset falls back to the Munich bracelet calibrated on the
2025 summer solstice.
"""

import logging
import os
from collections.abc import Mapping
from datetime import date, datetime

from dotenv import load_dotenv

from armreif.daylight import resolve_policy
from armreif.models import GeoLocation, SundialConfig

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, str] = {
    "ARMREIF_LATITUDE": "48.1351",
    "ARMREIF_LONGITUDE": "11.5820",
    "ARMREIF_TZ_OFFSET": "1",
    "ARMREIF_REFERENCE_DATE": "2025-06-21",
    "ARMREIF_DST_RULE": "eu",
}


class ConfigError(Exception):
    """Invalid configuration value."""


def _get(environ: Mapping[str, str], key: str) -> str:
    value = environ.get(key)
    return DEFAULTS[key] if value is None or not value.strip() else value.strip()


def _parse_float(environ: Mapping[str, str], key: str) -> float:
    raw = _get(environ, key)
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from e


def load_config(environ: Mapping[str, str] | None = None) -> SundialConfig:
    """Build a SundialConfig from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ after load_dotenv().

    Returns:
        Validated SundialConfig.

    Raises:
        ConfigError: When a value cannot be parsed or is out of range.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    latitude = _parse_float(environ, "ARMREIF_LATITUDE")
    longitude = _parse_float(environ, "ARMREIF_LONGITUDE")
    try:
        location = GeoLocation(latitude=latitude, longitude=longitude)
    except ValueError as e:
        raise ConfigError(f"ARMREIF_LATITUDE/ARMREIF_LONGITUDE: {e}") from e

    raw_offset = _get(environ, "ARMREIF_TZ_OFFSET")
    try:
        tz_offset = int(raw_offset)
    except ValueError as e:
        raise ConfigError(f"ARMREIF_TZ_OFFSET must be an integer, got {raw_offset!r}") from e
    if not -12 <= tz_offset <= 14:
        raise ConfigError(f"ARMREIF_TZ_OFFSET out of range: {tz_offset}")

    raw_date = _get(environ, "ARMREIF_REFERENCE_DATE")
    try:
        reference_date: date = datetime.strptime(raw_date, "%Y-%m-%d").date()
    except ValueError as e:
        raise ConfigError(
            f"ARMREIF_REFERENCE_DATE must be YYYY-MM-DD, got {raw_date!r}"
        ) from e

    dst_rule = _get(environ, "ARMREIF_DST_RULE")
    try:
        resolve_policy(dst_rule)
    except ValueError as e:
        raise ConfigError(f"ARMREIF_DST_RULE: {e}") from e

    config = SundialConfig(
        location=location,
        tz_offset=tz_offset,
        reference_date=reference_date,
        dst_rule=dst_rule,
    )
    logger.info(
        f"Loaded config: lat={latitude} lon={longitude} tz=UTC{tz_offset:+d} "
        f"reference={reference_date} dst={dst_rule}"
    )
    return config


def configure_logging(environ: Mapping[str, str] | None = None) -> None:
    """Set up root logging; level from ARMREIF_LOG_LEVEL (default INFO)."""
    env = os.environ if environ is None else environ
    level = env.get("ARMREIF_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
