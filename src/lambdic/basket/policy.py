"""Caller-side basket rules.

None of this runs inside aggregation. The aggregator accepts any weights; these
helpers give selectors and the CLI the checks the basket editor applies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping

from lambdic.config import LimitsConfig, ProjectConfig


class BasketPolicyError(ValueError):
    pass


@dataclass
class BasketCheckResult:
    is_valid: bool
    total_weight: float
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def weights_balanced(self) -> bool:
        return not any(w.startswith("Total weight") for w in self.warnings)

    def __str__(self) -> str:
        status = "VALID" if self.is_valid else "INVALID"
        lines = [f"{status} | total weight {self.total_weight:.1f}%"]
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        for e in self.errors:
            lines.append(f"  error: {e}")
        return "\n".join(lines)


def check_basket(weights: Mapping[str, float], cfg: ProjectConfig) -> BasketCheckResult:
    limits = cfg.limits
    total = float(sum(weights.values()))
    result = BasketCheckResult(is_valid=True, total_weight=total)

    if not weights:
        result.errors.append("Basket is empty")
        result.is_valid = False

    if len(weights) > limits.max_basket_members:
        result.errors.append(
            f"{len(weights)} members; maximum {limits.max_basket_members} assets allowed"
        )
        result.is_valid = False

    unknown = [a for a in weights if cfg.asset(a) is None]
    if unknown:
        result.warnings.append(f"Unknown assets (no data): {', '.join(unknown)}")

    if weights and abs(total - 100.0) >= limits.weight_tolerance:
        result.warnings.append(f"Total weight is {total:.1f}%, not 100%")

    return result


@dataclass(frozen=True)
class BasketSelection:
    """Ordered asset -> weight editor mirroring the basket builder's rules."""

    weights: tuple[tuple[str, float], ...] = ()
    limits: LimitsConfig = field(default_factory=LimitsConfig)

    def as_dict(self) -> dict[str, float]:
        return dict(self.weights)

    @property
    def total_weight(self) -> float:
        return float(sum(w for _, w in self.weights))

    def add(self, asset_id: str, weight: float) -> "BasketSelection":
        if not asset_id:
            raise BasketPolicyError("Please select an asset")
        if weight is None or math.isnan(weight) or weight <= 0:
            raise BasketPolicyError("Please enter a valid weight")
        if asset_id in self.as_dict():
            raise BasketPolicyError("Asset already in basket")
        if len(self.weights) >= self.limits.max_basket_members:
            raise BasketPolicyError(f"Maximum {self.limits.max_basket_members} assets allowed")
        return BasketSelection(weights=self.weights + ((asset_id, float(weight)),), limits=self.limits)

    def remove(self, asset_id: str) -> "BasketSelection":
        return BasketSelection(
            weights=tuple((a, w) for a, w in self.weights if a != asset_id), limits=self.limits
        )

    def update_weight(self, asset_id: str, weight: float) -> "BasketSelection":
        # Invalid edits are ignored, leaving the previous weight in place.
        if weight is None or math.isnan(weight) or weight < 0:
            return self
        return BasketSelection(
            weights=tuple((a, float(weight) if a == asset_id else w) for a, w in self.weights),
            limits=self.limits,
        )
