from .registry import SeriesRegistry, merge_records, parse_forecast, parse_historical

__all__ = ["SeriesRegistry", "merge_records", "parse_forecast", "parse_historical"]
