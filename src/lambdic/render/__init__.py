from .charts import ASSET_COLORS, asset_figure, comparison_figure

__all__ = ["ASSET_COLORS", "asset_figure", "comparison_figure"]
