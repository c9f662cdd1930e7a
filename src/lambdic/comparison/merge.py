from __future__ import annotations

from typing import Sequence

import pandas as pd

from lambdic.series import NormalizedSeries


def merge_for_overlay(normalized: Sequence[NormalizedSeries]) -> pd.DataFrame:
    """One row per date across all inputs, ascending.

    Columns: date, then per asset `<asset_id>` (normalized) and `<asset_id>_actual`.
    A date an asset lacks is NaN in its columns: a gap, never a zero.
    """

    columns: dict[str, pd.Series] = {}
    for s in normalized:
        dates = s.dates
        columns[s.asset_id] = pd.Series([p.normalized_value for p in s], index=dates, dtype="float64")
        columns[f"{s.asset_id}_actual"] = pd.Series([p.value for p in s], index=dates, dtype="float64")

    if not columns:
        return pd.DataFrame(columns=["date"])

    frame = pd.DataFrame(columns)
    frame = frame.sort_index()
    frame.index.name = "date"
    return frame.reset_index()
