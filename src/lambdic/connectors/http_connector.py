from __future__ import annotations

import logging
from dataclasses import dataclass
from io import StringIO
from typing import Optional

import pandas as pd
import requests

from .base import Connector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPConnector(Connector):
    """Fetch a CSV document over HTTP(S).

    Attributes:
        url: Absolute URL of the CSV file
        timeout_sec: HTTP request timeout in seconds
        max_retries: Number of attempts before giving up
    """

    url: str
    timeout_sec: int = 15
    max_retries: int = 3

    def load_frame(self) -> pd.DataFrame:
        text = self._fetch_text()
        df = pd.read_csv(StringIO(text), dtype=str, skipinitialspace=True)
        df.columns = [str(c).strip() for c in df.columns]
        return df

    def _fetch_text(self) -> str:
        last_exc: Optional[Exception] = None
        for attempt in range(1, self.max_retries + 1):
            try:
                resp = requests.get(self.url, timeout=self.timeout_sec)
                resp.raise_for_status()
                return resp.text
            except requests.exceptions.RequestException as exc:
                last_exc = exc
                logger.warning(f"Request to {self.url} failed (attempt {attempt}/{self.max_retries}): {exc}")
        raise ConnectionError(f"Failed to fetch {self.url} after {self.max_retries} attempts: {last_exc}")
