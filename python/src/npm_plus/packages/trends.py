"""
Derived Download Metrics

Aggregates and a block-character sparkline over a daily download series, and
the flat listing used for a package's direct dependencies.
"""

import math
from collections.abc import Sequence

from .models import DailyDownloads, DownloadTrends, PackageInfo

SPARK_BLOCKS = "▁▂▃▄▅▆▇█"

RECENT_DAYS = 14

BRANCH = "├── "
NO_DEPENDENCIES = "(no dependencies)"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def sparkline(values: Sequence[int]) -> str:
    """One block character per value, scaled against the maximum.

    Empty string for an empty series or when every value is zero.
    """
    if not values:
        return ""

    peak = max(values)
    if peak <= 0:
        return ""

    top = len(SPARK_BLOCKS) - 1
    chars = []
    for v in values:
        idx = math.floor((v / peak) * top)
        idx = min(top, max(0, idx))
        chars.append(SPARK_BLOCKS[idx])

    return "".join(chars)


def summarize_series(
    package: str,
    series: Sequence[DailyDownloads],
    start: str = "",
    end: str = "",
) -> DownloadTrends:
    """Compute total, average, min, max, sparkline and the recent tail."""
    values = [point.downloads for point in series]
    total = sum(values)

    return DownloadTrends(
        package=package,
        start=start,
        end=end,
        total=total,
        average=round_half_up(total / len(values)) if values else 0,
        minimum=min(values) if values else 0,
        maximum=max(values) if values else 0,
        sparkline=sparkline(values),
        recent=tuple(series[-RECENT_DAYS:]),
    )


def render_dependency_tree(info: PackageInfo) -> str:
    """List direct dependencies and devDependencies, one level deep."""
    lines = [f"{info.name}@{info.version}", ""]

    if info.dependencies:
        lines.append("dependencies:")
        for dep, version in info.dependencies.items():
            lines.append(f"{BRANCH}{dep}@{version}")

    if info.dev_dependencies:
        lines.append("")
        lines.append("devDependencies:")
        for dep, version in info.dev_dependencies.items():
            lines.append(f"{BRANCH}{dep}@{version}")

    if not info.dependencies and not info.dev_dependencies:
        lines.append(NO_DEPENDENCIES)

    return "\n".join(lines)
