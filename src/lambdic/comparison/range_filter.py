from __future__ import annotations

from typing import Optional

from lambdic.series import Series


def filter_range(series: Series, start: Optional[str] = None, end: Optional[str] = None) -> Series:
    """Keep points with start <= date <= end (string comparison on ISO days).

    `None` leaves that side open. An inverted or out-of-domain window yields an empty
    series rather than an error.
    """

    points = [
        p
        for p in series
        if (start is None or p.date >= start) and (end is None or p.date <= end)
    ]
    return series.with_points(points)
