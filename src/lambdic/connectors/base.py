from __future__ import annotations

from abc import ABC, abstractmethod

import pandas as pd


class Connector(ABC):
    """Loads one delimited table of dated records for a single asset source."""

    @abstractmethod
    def load_frame(self) -> pd.DataFrame:
        raise NotImplementedError
