"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from armreif.models import CorrectionPoint
from armreif.renderers.plotly_chart import curve_arrays

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_curve(
    points: tuple[CorrectionPoint, ...], read_time: str, width: float = 10
) -> Figure:
    """Render the year correction curve as a static matplotlib image.

    Args:
        points: Output of compute.correction_curve.
        read_time: Bracelet reading the curve belongs to (shown in the title).
        width: Output image width in inches.

    Returns:
        matplotlib Figure object.
    """
    days, values = curve_arrays(points)

    fig, ax = plt.subplots(figsize=(width, width * 0.4))
    ax.plot(days, values, color="#c9a96e", linewidth=1.5)
    ax.axhline(0, color="#5a6275", linewidth=0.8, linestyle=":")
    ax.set_title(f"Correction for bracelet reading {read_time}")
    ax.set_ylabel("min")
    ax.grid(alpha=0.3)
    fig.autofmt_xdate()
    fig.tight_layout()
    return fig


def save_static_curve(
    points: tuple[CorrectionPoint, ...],
    read_time: str,
    output_path: Path | None = None,
) -> Path:
    """Save the year correction curve as a PNG file.

    Args:
        points: Output of compute.correction_curve.
        read_time: Bracelet reading the curve belongs to.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        year = points[0].day.year if points else "curve"
        filename = f"correction_{read_time.replace(':', '')}_{year}.png"
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_curve(points, read_time)
    fig.savefig(output_path)
    plt.close(fig)
    return output_path
