"""Weighted basket aggregation.

Weights are percentage-like (0-100) and divided by 100 before arithmetic. They are
never renormalized here: a basket whose weights total 80 produces a composite worth
80% of a fully weighted one. Checking the total is a caller concern
(see `lambdic.basket.policy`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from lambdic.series import Bounds, Series, SeriesPoint
from lambdic.time import intersect_dates

logger = logging.getLogger(__name__)

BASKET_ASSET_ID = "basket"


@dataclass(frozen=True)
class WeightedMember:
    series: Series
    weight: float  # percent


def aggregate(
    members: Sequence[WeightedMember],
    dates: Sequence[str],
    *,
    asset_id: str = BASKET_ASSET_ID,
    name: str = "Portfolio",
) -> Series:
    """Weight-scaled sum of the members on each date of `dates`.

    A composite point carries bounds when at least one contributing member had bounds
    on that date. Members without bounds add zero to the composite bounds; this is an
    approximation, not a statistical combination of the bands.

    A member with no point on a date contributes zero. That only happens when `dates`
    is not the intersection of the members' dates.
    """

    lookups = [({p.date: p for p in m.series}, m.weight / 100.0) for m in members]

    points: list[SeriesPoint] = []
    # A repeated date yields one composite point.
    for date in dict.fromkeys(dates):
        total = 0.0
        low = 0.0
        high = 0.0
        has_bounds = False
        for by_date, weight in lookups:
            point = by_date.get(date)
            if point is None:
                continue
            total += point.value * weight
            if point.bounds is not None:
                low += point.bounds.low * weight
                high += point.bounds.high * weight
                has_bounds = True

        points.append(
            SeriesPoint(
                date=date,
                value=total,
                bounds=Bounds(low=low, high=high) if has_bounds else None,
            )
        )

    return Series(asset_id=asset_id, name=name, points=tuple(points))


def build_composite(
    members: Sequence[WeightedMember],
    *,
    asset_id: str = BASKET_ASSET_ID,
    name: str = "Portfolio",
) -> Series:
    """Intersect the members' dates and aggregate over them."""

    dates = intersect_dates([m.series for m in members])
    logger.info(
        f"Basket of {len(members)} member(s): {len(dates)} common date(s)"
        + (f" ({dates[0]} to {dates[-1]})" if dates else "")
    )
    return aggregate(members, dates, asset_id=asset_id, name=name)
