from .merge import merge_for_overlay
from .normalizer import normalize
from .range_filter import filter_range
from .selection import ComparisonSelection, SelectionLimitError

__all__ = [
    "ComparisonSelection",
    "SelectionLimitError",
    "filter_range",
    "merge_for_overlay",
    "normalize",
]
