from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from lambdic.series import Series


@dataclass(frozen=True)
class Insights:
    start_date: str
    start_value: float
    end_date: str
    end_value: float
    current_date: str
    current_value: float
    percent_change: float

    @property
    def is_positive(self) -> bool:
        return bool(self.percent_change >= 0)

    def describe(self, asset_name: str, reference_unit: str = "BTC", selected: bool = False) -> str:
        if selected:
            return (
                f"In {self.current_date}, {asset_name} was worth {self.current_value:.6f} {reference_unit}. "
                f"From {self.start_date} to this point, the value changed {self.percent_change:.2f}% "
                f"in {reference_unit} terms."
            )
        return (
            f"From {self.start_date} to {self.end_date}, {asset_name} changed "
            f"{self.percent_change:.2f}% when priced in {reference_unit}."
        )


def summarize(series: Series, selected_date: Optional[str] = None) -> Optional[Insights]:
    """Performance from the first point to `selected_date` (or the last point).

    An unknown `selected_date` falls back to the last point. Returns None for an empty series.
    """

    if series.is_empty:
        return None

    start = series.points[0]
    end = series.points[-1]
    current = end
    if selected_date is not None:
        current = series.point_on(selected_date) or end

    with np.errstate(divide="ignore", invalid="ignore"):
        change = (np.float64(current.value) - start.value) / np.float64(start.value) * 100.0

    return Insights(
        start_date=start.date,
        start_value=start.value,
        end_date=end.date,
        end_value=end.value,
        current_date=current.date,
        current_value=current.value,
        percent_change=float(change),
    )
