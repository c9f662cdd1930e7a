from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import pandas as pd

from lambdic.config import (
    CSVSourceConfig,
    ForecastSpec,
    HistoricalSpec,
    HTTPSourceConfig,
    ProjectConfig,
    SourceConfig,
)
from lambdic.connectors import Connector, CSVConnector, HTTPConnector
from lambdic.series import Bounds, Series, SeriesPoint

logger = logging.getLogger(__name__)


def _connector_from_config(cfg: SourceConfig) -> Connector:
    if isinstance(cfg, CSVSourceConfig):
        return CSVConnector(path=cfg.path)
    if isinstance(cfg, HTTPSourceConfig):
        return HTTPConnector(url=cfg.url, timeout_sec=cfg.timeout_sec, max_retries=cfg.max_retries)
    raise ValueError(f"Unsupported source type: {cfg.type}")


def _require_columns(df: pd.DataFrame, cols: list[str], label: str) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"{label} missing required columns: {missing!r}")


def _clean_dates(s: pd.Series) -> pd.Series:
    return s.fillna("").astype(str).str.strip()


def _check_unique(dates: pd.Series, label: str) -> None:
    if dates.duplicated().any():
        dupes = dates[dates.duplicated()].unique()
        raise ValueError(f"Duplicate dates in {label}: e.g. {dupes[:3].tolist()}")


def parse_historical(df: pd.DataFrame, spec: HistoricalSpec, label: str = "historical") -> dict[str, float]:
    """Map date -> value. Rows with an empty date or a non-numeric value are skipped."""

    _require_columns(df, [spec.date_col, spec.value_col], label)
    out = pd.DataFrame(
        {
            "date": _clean_dates(df[spec.date_col]),
            "value": pd.to_numeric(df[spec.value_col], errors="coerce"),
        }
    )
    out = out[(out["date"] != "") & out["value"].notna()]
    _check_unique(out["date"], label)
    return {d: float(v) for d, v in zip(out["date"], out["value"])}


def parse_forecast(
    df: pd.DataFrame, spec: ForecastSpec, label: str = "forecast"
) -> dict[str, tuple[float, float, float]]:
    """Map date -> (median, low, high). A row needs all three numbers to be kept."""

    _require_columns(df, [spec.date_col, spec.median_col, spec.low_col, spec.high_col], label)
    out = pd.DataFrame(
        {
            "date": _clean_dates(df[spec.date_col]),
            "median": pd.to_numeric(df[spec.median_col], errors="coerce"),
            "low": pd.to_numeric(df[spec.low_col], errors="coerce"),
            "high": pd.to_numeric(df[spec.high_col], errors="coerce"),
        }
    )
    out = out[(out["date"] != "")].dropna(subset=["median", "low", "high"])
    _check_unique(out["date"], label)
    return {
        d: (float(m), float(lo), float(hi))
        for d, m, lo, hi in zip(out["date"], out["median"], out["low"], out["high"])
    }


def merge_records(
    asset_id: str,
    name: str,
    historical: Mapping[str, float],
    forecast: Mapping[str, tuple[float, float, float]],
) -> Series:
    """Combine both sources into one date-unique series.

    Forecast-only dates take the median as their value. A date found in both sources
    keeps the historical value and gains the forecast bounds.
    """

    points: dict[str, SeriesPoint] = {d: SeriesPoint(date=d, value=v) for d, v in historical.items()}
    for d, (median, low, high) in forecast.items():
        value = historical.get(d, median)
        points[d] = SeriesPoint(date=d, value=value, bounds=Bounds(low=low, high=high))
    return Series(asset_id=asset_id, name=name, points=tuple(points.values()))


@dataclass(frozen=True)
class SeriesRegistry:
    """Loads per-asset series from the sources declared in the catalog."""

    cfg: ProjectConfig

    def _read(self, source: SourceConfig, label: str) -> Optional[pd.DataFrame]:
        try:
            return _connector_from_config(source).load_frame()
        except pd.errors.EmptyDataError:
            logger.warning(f"{label}: source is empty")
            return None
        except OSError as e:
            # Missing files and failed fetches (ConnectionError) degrade to "no data".
            logger.error(f"{label}: could not load source: {e}")
            return None

    def load(self, asset_id: str) -> Series:
        asset = self.cfg.asset(asset_id)
        if asset is None:
            logger.warning(f"Unknown asset {asset_id!r}; using an empty series")
            return Series.empty(asset_id)

        historical: dict[str, float] = {}
        forecast: dict[str, tuple[float, float, float]] = {}

        if asset.historical is not None:
            label = f"{asset_id} historical"
            df = self._read(asset.historical.source, label)
            if df is not None:
                historical = parse_historical(df, asset.historical, label)

        if asset.forecast is not None:
            label = f"{asset_id} forecast"
            df = self._read(asset.forecast.source, label)
            if df is not None:
                forecast = parse_forecast(df, asset.forecast, label)

        series = merge_records(asset_id, asset.name, historical, forecast)
        if series.is_empty:
            logger.warning(f"{asset_id}: no data points loaded")
        else:
            logger.info(
                f"{asset_id}: loaded {len(historical)} historical and {len(forecast)} forecast "
                f"record(s) ({series.dates[0]} to {series.dates[-1]})"
            )
        return series
