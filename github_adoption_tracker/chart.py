"""Cumulative adoption chart rendered to SVG."""

from datetime import datetime
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.dates import DateFormatter  # noqa: E402

from .candidates import CandidateCollection  # noqa: E402

# Go's time.RFC822 layout: "02 Jan 06 15:04 MST"
RFC822_FORMAT = "%d %b %y %H:%M %Z"


class ChartError(Exception):
    """The chart could not be rendered or written."""


def build_series(candidates: CandidateCollection) -> tuple[list[datetime], list[int]]:
    """Adoption dates in ascending order, each paired with the count of earlier adopters."""
    ordered = candidates.by_date()
    xs = [c.adoption_date for c in ordered]
    ys = list(range(len(ordered)))
    return xs, ys


def chart_filename(now: datetime | None = None) -> str:
    now = now or datetime.now().astimezone()
    return f"chart_{now.strftime(RFC822_FORMAT)}.svg"


def render_chart(
    candidates: CandidateCollection,
    output_dir: Path = Path("."),
    now: datetime | None = None,
) -> Path:
    """Draw the adoption timeline and save it as SVG. Returns the file path."""
    xs, ys = build_series(candidates)
    path = Path(output_dir) / chart_filename(now)

    # Keep labels as SVG text rather than glyph paths
    with matplotlib.rc_context({"svg.fonttype": "none"}):
        fig, ax = plt.subplots(figsize=(12, 6))
        try:
            ax.plot(xs, ys, linewidth=2)
            ax.set_xlabel("Time", fontsize=12)
            ax.set_ylabel("Using", fontsize=12)
            ax.grid(True, alpha=0.3)
            ax.xaxis.set_major_formatter(DateFormatter("%Y-%m-%d"))
            fig.autofmt_xdate()
            fig.savefig(path, format="svg", bbox_inches="tight")
        except Exception as e:
            raise ChartError(f"failed to write chart to {path}: {e}") from e
        finally:
            plt.close(fig)

    return path
