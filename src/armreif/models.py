"""Data model definitions — explicit boundaries between input, compute, and render layers."""

from dataclasses import dataclass
from datetime import date, time


@dataclass(frozen=True)
class GeoLocation:
    """Observer position. Fixed at configuration time."""

    latitude: float  # Decimal degrees, north positive
    longitude: float  # Decimal degrees, east positive

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class BraceletAnchor:
    """An engraved hour mark and where it sits in the bracelet image."""

    hour: int  # Engraved number (clock hour)
    x: float  # Horizontal pixel position in the natural image


# Engraved marks on the bracelet photo (natural size 2880 px wide).
DEFAULT_ANCHORS: tuple[BraceletAnchor, ...] = (
    BraceletAnchor(hour=14, x=908),
    BraceletAnchor(hour=15, x=747),
    BraceletAnchor(hour=16, x=573),
    BraceletAnchor(hour=17, x=405),
    BraceletAnchor(hour=21, x=2266),
    BraceletAnchor(hour=22, x=2112),
)


@dataclass(frozen=True)
class SundialConfig:
    """Everything the converter needs besides the reading itself."""

    location: GeoLocation
    tz_offset: int  # Standard-time hours from UTC (CET = 1)
    reference_date: date  # Calibration date of the bracelet
    dst_rule: str = "eu"  # "eu", "none", or a tz database zone name
    anchors: tuple[BraceletAnchor, ...] = DEFAULT_ANCHORS
    image_width: int = 2880


@dataclass(frozen=True)
class QueryInput:
    """Raw caller input. Not yet validated."""

    read_time: str  # "HH:MM" as read off the bracelet
    target_date: str  # "YYYY-MM-DD"


@dataclass(frozen=True)
class ConversionResult:
    """True clock time for one (reading, date) pair."""

    read_time: time
    true_time: time
    correction_minutes: int  # Signed, may exceed ±60

    @property
    def true_time_str(self) -> str:
        return self.true_time.strftime("%H:%M")

    @property
    def correction_str(self) -> str:
        """Signed correction with unit, e.g. ``+12 min``."""
        sign = "+" if self.correction_minutes >= 0 else ""
        return f"{sign}{self.correction_minutes} min"


@dataclass(frozen=True)
class NoSolution:
    """The sun never reaches the reading's altitude on target_date.

    Falsy, so callers can write ``if result:`` before touching true_time.
    """

    target_date: date
    cos_hour_angle: float  # The out-of-range quotient (inf when undefined)

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class CorrectionPoint:
    """One day of the year correction curve."""

    day: date
    correction_minutes: int | None = None  # None = no solution
