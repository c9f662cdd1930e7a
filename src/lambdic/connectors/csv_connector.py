from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from .base import Connector


@dataclass(frozen=True)
class CSVConnector(Connector):
    path: str

    def load_frame(self) -> pd.DataFrame:
        # Dates stay strings: they are opaque day identifiers downstream.
        df = pd.read_csv(self.path, dtype=str, skipinitialspace=True)
        df.columns = [str(c).strip() for c in df.columns]
        return df
