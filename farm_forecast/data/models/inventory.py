from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FeedFrequencyUnit(str, Enum):
    """Period a feeding-frequency count refers to."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class InventoryRecord(BaseModel):
    """One tracked product at one farm, as supplied by the inventory data source.

    Optional consumption inputs stay ``None`` when absent; a present zero is
    kept as zero so the forecaster can tell the two apart.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = Field(min_length=1, description="Inventory record identifier")
    farm_name: str = Field(min_length=1, description="Display name of the farm")
    product_name: str = Field(min_length=1, description="Display name of the product")
    current_stock: float = Field(ge=0, description="Stock on hand, in the product's unit")
    low_stock_threshold: Optional[float] = Field(default=None, ge=0, description="Floor below which stock is critical")
    average_monthly_consumption: Optional[float] = Field(default=None, ge=0, description="Average units consumed per month")
    feed_frequency: Optional[int] = Field(default=None, ge=0, description="Number of feeding events per frequency unit")
    feed_frequency_unit: Optional[FeedFrequencyUnit] = Field(default=None, description="Period the feed frequency refers to")
    unit: Optional[str] = Field(default=None, description="Product unit, e.g. kg or bags")
    feed_type: Optional[str] = Field(default=None, description="Feed type of the product")
    supplier_name: Optional[str] = Field(default=None, description="Supplier of the product")
