"""Solar time computation layer — turns a bracelet (sundial) reading into true clock time.

The bracelet was calibrated on a reference date. A reading fixes a solar
altitude on that date; the same altitude occurs at a different clock time on
any other date because the declination, the equation of time and the DST
offset all drift across the year. Everything here is a pure function of its
arguments.
"""

import logging
import math
import re
from datetime import date, datetime, time, timedelta

from armreif.daylight import DstPolicy, is_european_dst, resolve_policy
from armreif.models import (
    ConversionResult,
    CorrectionPoint,
    GeoLocation,
    NoSolution,
    QueryInput,
    SundialConfig,
)

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")

# Degrees of the annual cycle per day, phase-referenced to day 81 (~ March equinox).
_DEG_PER_DAY = 360 / 365.25
_PHASE_DAY = 81


class ReadingError(ValueError):
    """Malformed reading or date, rejected before any astronomy happens."""


def day_of_year(d: date) -> int:
    """Day number within the year, Jan 1 = 1 (366 in leap years)."""
    return d.timetuple().tm_yday


def _annual_angle(d: date) -> float:
    """B = (360/365.25)·(n − 81), in radians."""
    return math.radians(_DEG_PER_DAY * (day_of_year(d) - _PHASE_DAY))


def equation_of_time(d: date) -> float:
    """Equation of time in minutes (3-term approximation, ~±1 min accuracy)."""
    b = _annual_angle(d)
    return 9.87 * math.sin(2 * b) - 7.53 * math.cos(b) - 1.5 * math.sin(b)


def declination(d: date) -> float:
    """Solar declination in degrees."""
    return 23.45 * math.sin(_annual_angle(d))


def time_to_decimal(value: str | time) -> float:
    """Convert "HH:MM" (or a datetime.time) to decimal hours.

    Raises:
        ReadingError: When the string is not HH:MM or out of range.
    """
    if isinstance(value, time):
        return value.hour + value.minute / 60
    if not isinstance(value, str):
        raise ReadingError(f"Expected 'HH:MM' string, got {type(value).__name__}")
    match = _TIME_RE.match(value)
    if match is None:
        raise ReadingError(f"Invalid time (expected HH:MM): {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ReadingError(f"Time out of range: {value!r}")
    return hours + minutes / 60


def decimal_to_time(decimal: float) -> str:
    """Convert decimal hours to "HH:MM", wrapping past midnight in either direction."""
    total_minutes = round(decimal * 60) % (24 * 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def _decimal_to_clock(decimal: float) -> time:
    return datetime.strptime(decimal_to_time(decimal), "%H:%M").time()


def parse_date(value: str) -> date:
    """Parse "YYYY-MM-DD".

    Raises:
        ReadingError: On malformed or impossible dates.
    """
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError) as e:
        raise ReadingError(f"Invalid date (expected YYYY-MM-DD): {value!r}") from e


def _require_date(value: object, name: str) -> date:
    # datetime is a date subclass; a time-of-day component has no meaning here.
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise ReadingError(f"{name} must be a date, got {type(value).__name__}")
    return value


def _require_offset(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ReadingError(f"tz_offset must be whole hours, got {value!r}")
    return value


def convert(
    read_time: str | time,
    target_date: date,
    location: GeoLocation,
    tz_offset: int,
    reference_date: date,
    dst_policy: DstPolicy = is_european_dst,
) -> ConversionResult | NoSolution:
    """Convert a bracelet reading to the true clock time on target_date.

    The reading is the civil clock time engraved for the reference date. It is
    turned into a solar altitude on that date, and the clock time at which the
    sun reaches the same altitude on target_date is returned.

    Args:
        read_time: "HH:MM" read off the bracelet (or a datetime.time).
        target_date: Date for which the true time is sought.
        location: Observer latitude/longitude.
        tz_offset: Standard-time hours from UTC.
        reference_date: Calibration date of the bracelet.
        dst_policy: date → DST in effect. European rule by default.

    Returns:
        ConversionResult, or NoSolution when the sun never reaches the
        required altitude on target_date.

    Raises:
        ReadingError: On malformed read_time, non-date date arguments or a
            non-integer tz_offset.
    """
    t_read = time_to_decimal(read_time)
    target_date = _require_date(target_date, "target_date")
    reference_date = _require_date(reference_date, "reference_date")
    tz_offset = _require_offset(tz_offset)

    lat = math.radians(location.latitude)
    # Longitude offset from the zone meridian, in minutes of time
    meridian_minutes = 4 * (location.longitude - 15 * tz_offset)

    # Reading → apparent solar time on the reference date (clock time minus its DST hour)
    t_standard0 = t_read - (1 if dst_policy(reference_date) else 0)
    t_solar0 = t_standard0 + (meridian_minutes + equation_of_time(reference_date)) / 60
    h0 = math.radians(15 * (t_solar0 - 12))

    delta0 = math.radians(declination(reference_date))
    sin_alt = math.sin(lat) * math.sin(delta0) + math.cos(lat) * math.cos(delta0) * math.cos(h0)
    alt = math.asin(max(-1.0, min(1.0, sin_alt)))

    # Hour angle on the target date giving the same altitude
    delta = math.radians(declination(target_date))
    denominator = math.cos(lat) * math.cos(delta)
    if abs(denominator) < 1e-12:
        logger.debug(f"No solution for {target_date}: hour angle undefined at the pole")
        return NoSolution(target_date=target_date, cos_hour_angle=math.inf)
    cos_h = (math.sin(alt) - math.sin(lat) * math.sin(delta)) / denominator
    if not -1.0 <= cos_h <= 1.0:
        logger.debug(f"No solution for {target_date}: cos(H)={cos_h:.4f}")
        return NoSolution(target_date=target_date, cos_hour_angle=cos_h)

    hour_angle = math.degrees(math.acos(cos_h))
    # acos gives a magnitude only; the reading's side of noon picks the branch.
    if t_read < 12:
        hour_angle = -hour_angle

    t_solar = 12 + hour_angle / 15
    t_clock = t_solar - (meridian_minutes + equation_of_time(target_date)) / 60
    t_true = t_clock + (1 if dst_policy(target_date) else 0)

    correction = round((t_true - t_read) * 60)
    logger.debug(
        f"convert {read_time} ref={reference_date} target={target_date} "
        f"-> {decimal_to_time(t_true)} ({correction:+d} min)"
    )
    return ConversionResult(
        read_time=_decimal_to_clock(t_read),
        true_time=_decimal_to_clock(t_true),
        correction_minutes=correction,
    )


def convert_with_config(
    read_time: str | time, target_date: date, config: SundialConfig
) -> ConversionResult | NoSolution:
    """convert() with location, offset, reference date and DST rule taken from config."""
    return convert(
        read_time,
        target_date,
        location=config.location,
        tz_offset=config.tz_offset,
        reference_date=config.reference_date,
        dst_policy=resolve_policy(config.dst_rule),
    )


def correction_curve(
    read_time: str | time, year: int, config: SundialConfig
) -> tuple[CorrectionPoint, ...]:
    """Correction for one reading on every day of a year.

    Days without a solution carry correction_minutes=None.
    """
    policy = resolve_policy(config.dst_rule)
    day = date(year, 1, 1)
    points: list[CorrectionPoint] = []
    while day.year == year:
        result = convert(
            read_time,
            day,
            location=config.location,
            tz_offset=config.tz_offset,
            reference_date=config.reference_date,
            dst_policy=policy,
        )
        points.append(
            CorrectionPoint(
                day=day,
                correction_minutes=result.correction_minutes if result else None,
            )
        )
        day += timedelta(days=1)
    return tuple(points)


def run(query: QueryInput, config: SundialConfig) -> ConversionResult | NoSolution:
    """Top-level entry point: takes a QueryInput and returns the conversion.

    Args:
        query: Raw caller input (read time and target date strings).
        config: Location, time zone offset, reference date and DST rule.

    Returns:
        ConversionResult or NoSolution.

    Raises:
        ReadingError: When the query strings are malformed.
    """
    target = parse_date(query.target_date)
    return convert_with_config(query.read_time, target, config)
