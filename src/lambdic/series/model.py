from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class Bounds:
    """Forecast band around a point (e.g. 25th / 75th percentile).

    `low <= value <= high` is expected but not enforced: upstream forecast data is trusted.
    """

    low: float
    high: float


@dataclass(frozen=True)
class SeriesPoint:
    date: str  # ISO-8601 day, lexically sortable
    value: float
    bounds: Optional[Bounds] = None

    @property
    def has_bounds(self) -> bool:
        return self.bounds is not None

    @property
    def low(self) -> Optional[float]:
        return self.bounds.low if self.bounds is not None else None

    @property
    def high(self) -> Optional[float]:
        return self.bounds.high if self.bounds is not None else None


def _points_frame(points, extra: dict[str, list] | None = None) -> pd.DataFrame:
    data = {
        "date": [p.date for p in points],
        "value": [p.value for p in points],
        "low": [p.low if p.has_bounds else np.nan for p in points],
        "high": [p.high if p.has_bounds else np.nan for p in points],
    }
    if extra:
        data.update(extra)
    return pd.DataFrame(data, columns=list(data.keys()))


@dataclass(frozen=True)
class Series:
    """Date-unique, date-ordered sequence of points for one asset.

    Points are sorted on their ISO date strings at construction. A repeated date is
    a loader contract violation and raises ValueError.
    """

    asset_id: str
    name: str
    points: tuple[SeriesPoint, ...] = field(default_factory=tuple)

    def __post_init__(self):
        ordered = tuple(sorted(self.points, key=lambda p: p.date))
        for prev, cur in zip(ordered, ordered[1:]):
            if prev.date == cur.date:
                raise ValueError(f"Duplicate date {cur.date!r} in series {self.asset_id!r}")
        object.__setattr__(self, "points", ordered)

    @classmethod
    def empty(cls, asset_id: str, name: str = "") -> "Series":
        return cls(asset_id=asset_id, name=name or asset_id)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SeriesPoint]:
        return iter(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def dates(self) -> list[str]:
        return [p.date for p in self.points]

    def point_on(self, date: str) -> Optional[SeriesPoint]:
        return next((p for p in self.points if p.date == date), None)

    def with_points(self, points) -> "Series":
        return Series(asset_id=self.asset_id, name=self.name, points=tuple(points))

    def to_frame(self) -> pd.DataFrame:
        """Columns: date, value, low, high (NaN where a point has no bounds)."""
        return _points_frame(self.points)


@dataclass(frozen=True)
class NormalizedPoint:
    point: SeriesPoint
    normalized_value: float

    @property
    def date(self) -> str:
        return self.point.date

    @property
    def value(self) -> float:
        return self.point.value

    @property
    def percent_change(self) -> float:
        return (self.normalized_value - 1.0) * 100.0


@dataclass(frozen=True)
class NormalizedSeries:
    asset_id: str
    name: str
    points: tuple[NormalizedPoint, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[NormalizedPoint]:
        return iter(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def dates(self) -> list[str]:
        return [p.date for p in self.points]

    def to_frame(self) -> pd.DataFrame:
        return _points_frame(
            [p.point for p in self.points],
            extra={"normalized": [p.normalized_value for p in self.points]},
        )
