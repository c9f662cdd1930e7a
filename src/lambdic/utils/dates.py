from __future__ import annotations

import pandas as pd


def parse_date(value: str) -> str:
    # Accepts YYYY-MM-DD and similar; returns the canonical ISO day string used as a series key.
    return pd.Timestamp(value.strip()).strftime("%Y-%m-%d")
