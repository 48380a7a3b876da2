from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pandas as pd
from pydantic import ValidationError

from farm_forecast.config import get_config
from farm_forecast.logging import get_logger

from ..interface import InventoryDataSource
from ..models import InventoryFilters, InventoryRecord, StringList

REQUIRED_COLUMNS = ["id", "farm_name", "product_name", "current_stock"]
OPTIONAL_COLUMNS = [
    "low_stock_threshold", "average_monthly_consumption", "feed_frequency",
    "feed_frequency_unit", "unit", "feed_type", "supplier_name",
]
STRING_COLUMNS = ["id", "farm_name", "product_name", "feed_frequency_unit", "unit", "feed_type", "supplier_name"]


class CsvInventoryDataSource(InventoryDataSource):
    """
    CSV-backed implementation.
    - Loads the inventory CSV from `data_dir` once at construction (or on reload()).
    - Every method call performs a fresh filter pass over the loaded frame
      (so each UI interaction triggers new work, mirroring a DB query).
    """

    def __init__(self, data_dir: Optional[str | Path] = None, inventory_file: Optional[str] = None) -> None:
        config = get_config()
        if data_dir is None:
            data_dir = config.data_dir
        self.inventory_file = inventory_file or config.inventory_file
        self.logger = get_logger(__name__)

        self.data_dir = Path(data_dir)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            self.data_dir = (repo_root or current) / self.data_dir

        self._inventory = self._load_inventory(self.data_dir / self.inventory_file)

    # ---------- loading helpers ----------

    def _load_inventory(self, path: Path) -> pd.DataFrame:
        if not path.parent.exists():
            raise FileNotFoundError(
                f"Data directory not found: {path.parent}\n"
                f"Please either:\n"
                f"  1. Generate sample data: python -m farm_forecast.backend.seed_data\n"
                f"  2. Set DATA_DIR environment variable to point to your data directory\n"
                f"  3. Create a .env file with DATA_DIR=/path/to/your/data"
            )
        if not path.exists():
            raise FileNotFoundError(
                f"Inventory CSV missing: {path}\n"
                f"  Expected columns: {', '.join(REQUIRED_COLUMNS + OPTIONAL_COLUMNS)}\n\n"
                f"Please either:\n"
                f"  1. Generate sample data: python -m farm_forecast.backend.seed_data\n"
                f"  2. Set INVENTORY_FILE to the name of your inventory CSV"
            )

        try:
            header = pd.read_csv(path, nrows=0).columns
            df = pd.read_csv(path, dtype={c: "string" for c in STRING_COLUMNS if c in header})
        except Exception as e:
            raise RuntimeError(
                f"Error reading inventory CSV {path}: {e}\n"
                f"Please check that the CSV file is valid and readable."
            ) from e

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise RuntimeError(f"Inventory CSV {path} is missing required columns: {', '.join(missing)}")

        for col in OPTIONAL_COLUMNS:
            if col not in df.columns:
                df[col] = None

        self.logger.info(f"Loaded {len(df)} inventory rows from {path}")
        return df

    def reload(self) -> None:
        """Re-read the inventory CSV from disk."""
        self._inventory = self._load_inventory(self.data_dir / self.inventory_file)

    @staticmethod
    def _row_to_kwargs(row: dict) -> dict:
        # blank cells arrive as NaN/NA; they must stay absent, not become 0
        return {k: (None if pd.isna(v) else v) for k, v in row.items()}

    # ---------- interface implementation ----------

    def list_farm_names(self) -> StringList:
        if self._inventory.empty:
            return StringList(values=[])
        farms = self._inventory["farm_name"].dropna().unique().tolist()
        return StringList(values=sorted(str(f) for f in farms))

    def get_inventory(self, filters: Optional[InventoryFilters] = None) -> List[InventoryRecord]:
        filters = filters or InventoryFilters()
        df = self._inventory.copy()

        if filters.farm_name:
            if isinstance(filters.farm_name, str):
                df = df[(df["farm_name"] == filters.farm_name).fillna(False)]
            else:
                df = df[df["farm_name"].isin(filters.farm_name)]
        if filters.product_search and filters.product_search.strip():
            s = filters.product_search.strip().lower()
            df = df[df["product_name"].str.lower().str.contains(s, na=False, regex=False)]
        if filters.feed_type:
            if isinstance(filters.feed_type, str):
                df = df[(df["feed_type"] == filters.feed_type).fillna(False)]
            else:
                df = df[df["feed_type"].isin(filters.feed_type)]

        records = []
        for row in df[REQUIRED_COLUMNS + OPTIONAL_COLUMNS].to_dict(orient="records"):
            kwargs = self._row_to_kwargs(row)
            try:
                records.append(InventoryRecord(**kwargs))
            except ValidationError as e:
                self.logger.warning(f"Skipping invalid inventory row {kwargs.get('id')!r}: {e.errors()}")
        return records
