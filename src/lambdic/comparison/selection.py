from __future__ import annotations

from dataclasses import dataclass


class SelectionLimitError(ValueError):
    pass


@dataclass(frozen=True)
class ComparisonSelection:
    """Set of assets picked for side-by-side comparison, capped at `max_assets`."""

    asset_ids: tuple[str, ...] = ()
    max_assets: int = 5

    def toggle(self, asset_id: str) -> "ComparisonSelection":
        if asset_id in self.asset_ids:
            return ComparisonSelection(
                asset_ids=tuple(a for a in self.asset_ids if a != asset_id),
                max_assets=self.max_assets,
            )
        if len(self.asset_ids) >= self.max_assets:
            raise SelectionLimitError(f"Maximum {self.max_assets} assets can be compared at once")
        return ComparisonSelection(asset_ids=self.asset_ids + (asset_id,), max_assets=self.max_assets)

    def clear(self) -> "ComparisonSelection":
        return ComparisonSelection(max_assets=self.max_assets)
