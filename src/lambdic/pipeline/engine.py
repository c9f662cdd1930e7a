from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import pandas as pd

from lambdic.basket import WeightedMember, build_composite
from lambdic.comparison import filter_range, merge_for_overlay, normalize
from lambdic.config import ProjectConfig
from lambdic.data import SeriesRegistry
from lambdic.series import NormalizedSeries, Series


@dataclass(frozen=True)
class ComparisonResult:
    series: tuple[NormalizedSeries, ...]
    overlay: pd.DataFrame
    start: Optional[str] = None
    end: Optional[str] = None


class SimulatorEngine:
    """Single asset, basket and comparison views over the catalog.

    Nothing is cached: every call reloads its inputs and recomputes, so a changed
    selection can never see a stale result.
    """

    def __init__(self, cfg: ProjectConfig, registry: SeriesRegistry | None = None):
        self.cfg = cfg
        self.registry = registry if registry is not None else SeriesRegistry(cfg)

    def single(self, asset_id: str) -> Series:
        return self.registry.load(asset_id)

    def basket(self, weights: Mapping[str, float]) -> Series:
        """Weighted composite over the dates every member has.

        Weights are used as given (percent, not renormalized).
        """

        members = [
            WeightedMember(series=self.registry.load(asset_id), weight=float(weight))
            for asset_id, weight in weights.items()
        ]
        return build_composite(members)

    def compare(
        self,
        asset_ids: Sequence[str],
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> ComparisonResult:
        """Window each series, then rebase each to 1.0 at its first in-window point."""

        normalized = tuple(
            normalize(filter_range(self.registry.load(asset_id), start, end))
            for asset_id in dict.fromkeys(asset_ids)
        )
        return ComparisonResult(
            series=normalized,
            overlay=merge_for_overlay(normalized),
            start=start,
            end=end,
        )
