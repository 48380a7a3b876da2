from __future__ import annotations

from typing import Literal

from farm_forecast.config import get_config

from .backends.csv_backend import CsvInventoryDataSource
from .interface import InventoryDataSource


def get_data_source(kind: Literal["csv"] = "csv") -> InventoryDataSource:
    if kind == "csv":
        # Reads from configured CSV folder
        config = get_config()
        return CsvInventoryDataSource(data_dir=config.data_dir)
    raise ValueError(f"Unknown data source kind: {kind}")
