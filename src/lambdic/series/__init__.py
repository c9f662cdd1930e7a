from .model import Bounds, NormalizedPoint, NormalizedSeries, Series, SeriesPoint

__all__ = ["Bounds", "NormalizedPoint", "NormalizedSeries", "Series", "SeriesPoint"]
