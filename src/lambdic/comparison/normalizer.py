from __future__ import annotations

import logging

import numpy as np

from lambdic.series import NormalizedPoint, NormalizedSeries, Series

logger = logging.getLogger(__name__)


def normalize(series: Series) -> NormalizedSeries:
    """Rescale so the first point of `series` equals 1.0.

    The anchor is the first point as given: filter to a window first to anchor at the
    window start. A zero anchor yields inf/nan for every point; nothing is raised.
    """

    if series.is_empty:
        return NormalizedSeries(asset_id=series.asset_id, name=series.name)

    values = np.array([p.value for p in series], dtype=np.float64)
    anchor = values[0]
    if anchor == 0.0:
        logger.warning(f"{series.asset_id}: baseline value is zero; normalized values are non-finite")

    with np.errstate(divide="ignore", invalid="ignore"):
        scaled = values / anchor

    points = tuple(
        NormalizedPoint(point=p, normalized_value=float(v)) for p, v in zip(series, scaled)
    )
    return NormalizedSeries(asset_id=series.asset_id, name=series.name, points=points)
