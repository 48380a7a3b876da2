from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class InventoryFilters(BaseModel):
    """Filters for the inventory data."""
    farm_name: Optional[str | list[str]] = Field(default=None, description="Farm filter (single farm or list of farms)")
    product_search: Optional[str] = Field(default=None, description="Case-insensitive substring match on product name")
    feed_type: Optional[str | list[str]] = Field(default=None, description="Feed type filter (single type or list of types)")
