from .aggregator import BASKET_ASSET_ID, WeightedMember, aggregate, build_composite
from .policy import BasketCheckResult, BasketPolicyError, BasketSelection, check_basket

__all__ = [
    "BASKET_ASSET_ID",
    "WeightedMember",
    "aggregate",
    "build_composite",
    "BasketCheckResult",
    "BasketPolicyError",
    "BasketSelection",
    "check_basket",
]
