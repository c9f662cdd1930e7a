from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field


class HistoricalColumns(BaseModel):
    date_col: str = "date"
    value_col: str = "price"


class ForecastColumns(BaseModel):
    date_col: str = "date"
    median_col: str = "median"
    low_col: str = "p25"
    high_col: str = "p75"


class CSVSourceConfig(BaseModel):
    type: Literal["csv"]
    path: str


class HTTPSourceConfig(BaseModel):
    type: Literal["http"]
    url: str
    timeout_sec: int = 15
    max_retries: int = 3


SourceConfig = Annotated[Union[CSVSourceConfig, HTTPSourceConfig], Field(discriminator="type")]


class HistoricalSpec(HistoricalColumns):
    source: SourceConfig


class ForecastSpec(ForecastColumns):
    source: SourceConfig


class AssetSpec(BaseModel):
    asset_id: str
    name: str
    icon: str = ""
    # Catalog grouping shown by selectors (e.g. "commodities", "treasury").
    group: str = "commodities"
    historical: Optional[HistoricalSpec] = None
    forecast: Optional[ForecastSpec] = None


class LimitsConfig(BaseModel):
    # Caller-side caps; the engine itself accepts any number of members.
    max_basket_members: int = 5
    max_compared_assets: int = 5
    weight_tolerance: float = 0.01


class ProjectMeta(BaseModel):
    name: str = "default"
    reference_unit: str = "BTC"


class ProjectConfig(BaseModel):
    project: ProjectMeta = ProjectMeta()
    assets: list[AssetSpec] = Field(default_factory=list)
    limits: LimitsConfig = LimitsConfig()

    def asset(self, asset_id: str) -> Optional[AssetSpec]:
        return next((a for a in self.assets if a.asset_id == asset_id), None)

    def display_name(self, asset_id: str) -> str:
        spec = self.asset(asset_id)
        return spec.name if spec is not None else asset_id


def load_config(path: str | Path) -> ProjectConfig:
    """Load the asset catalog.

    Relative CSV paths are resolved against the config file's directory.
    """

    path = Path(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    cfg = ProjectConfig.model_validate(data)

    for asset in cfg.assets:
        for spec in (asset.historical, asset.forecast):
            if spec is not None and isinstance(spec.source, CSVSourceConfig):
                src = Path(spec.source.path)
                if not src.is_absolute():
                    spec.source.path = str(path.parent / src)
    return cfg
