from __future__ import annotations

from typing import Literal, Optional, Sequence

from lambdic.series import Series

AlignMode = Literal["intersect", "union"]


def intersect_dates(series: Sequence[Series]) -> list[str]:
    """Dates present in every input series, ascending.

    A date missing from even one member is dropped. No interpolation or carry-forward.
    """

    common: set[str] | None = None
    for s in series:
        dates = set(s.dates)
        common = dates if common is None else common & dates
    if not common:
        return []
    # ISO-8601 day strings sort chronologically.
    return sorted(common)


def union_dates(series: Sequence[Series]) -> list[str]:
    """Dates present in any input series, each once, ascending.

    The inputs are not filled: a series lacking a date keeps lacking it.
    """

    seen: set[str] = set()
    for s in series:
        seen.update(s.dates)
    return sorted(seen)


def align(series: Sequence[Series], mode: AlignMode = "intersect") -> list[str]:
    if mode == "intersect":
        return intersect_dates(series)
    if mode == "union":
        return union_dates(series)
    raise ValueError(f"Unknown alignment mode: {mode}")


def date_span(series: Sequence[Series]) -> Optional[tuple[str, str]]:
    """(first, last) date over the union of the inputs, or None when there are no points."""
    dates = union_dates(series)
    if not dates:
        return None
    return dates[0], dates[-1]
