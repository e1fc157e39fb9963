"""Knob position → bracelet reading.

The bracelet carries two disjoint engraved ranges (14–17 and 21–22). Between
them is a blank stretch where nothing can be read.
"""

from armreif.models import BraceletAnchor


def segments(anchors: tuple[BraceletAnchor, ...]) -> list[list[BraceletAnchor]]:
    """Group anchors into engraved ranges of consecutive hours, each sorted by x."""
    groups: list[list[BraceletAnchor]] = []
    for anchor in sorted(anchors, key=lambda a: a.hour):
        if groups and anchor.hour - groups[-1][-1].hour == 1:
            groups[-1].append(anchor)
        else:
            groups.append([anchor])
    return [sorted(group, key=lambda a: a.x) for group in groups if len(group) >= 2]


def _interpolate(segment: list[BraceletAnchor], x: float) -> str | None:
    for left, right in zip(segment, segment[1:]):
        if left.x <= x <= right.x:
            span = right.x - left.x
            # Marks sharing a position read as the first of them
            t = (x - left.x) / span if span else 0.0
            hours = left.hour + t * (right.hour - left.hour)
            total_minutes = round(hours * 60)
            return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"
    return None


def position_to_read_time(
    position_percent: float,
    anchors: tuple[BraceletAnchor, ...],
    image_width: int,
) -> str | None:
    """Return the "HH:MM" reading at a knob position, or None in the gap.

    Args:
        position_percent: Knob position along the image, 0–100.
        anchors: Engraved hour marks.
        image_width: Natural image width the anchor x values refer to.
    """
    # Rounded so a knob placed exactly on an end mark stays inside the range
    x = round(position_percent / 100 * image_width, 6)
    for segment in segments(anchors):
        if segment[0].x <= x <= segment[-1].x:
            return _interpolate(segment, x)
    return None


def anchor_positions(
    anchors: tuple[BraceletAnchor, ...], image_width: int
) -> dict[int, float]:
    """Engraved hours as knob percentages, for drawing marks on the slider."""
    return {a.hour: a.x / image_width * 100 for a in anchors}
