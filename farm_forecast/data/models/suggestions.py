from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Priority(str, Enum):
    """Urgency tier of a reorder suggestion."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


class ReorderSuggestion(BaseModel):
    """Recommendation to restock one inventory record before it runs out."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    source_id: str = Field(description="Identifier of the originating inventory record")
    product_name: str = Field(description="Product display name")
    farm_name: str = Field(description="Farm display name")
    current_stock: float = Field(description="Stock on hand when the forecast ran")
    suggested_quantity: int = Field(ge=0, description="Units to reorder")
    days_until_empty: int = Field(ge=0, description="Whole days of stock remaining")
    priority: Priority = Field(description="Urgency tier")
    reasoning: str = Field(description="Human-readable trigger summary")
    unit: Optional[str] = Field(default=None, description="Product unit, copied for display")


class ReorderSummary(BaseModel):
    """Aggregate figures over a list of reorder suggestions."""
    total_suggestions: int
    high_priority_count: int
    medium_priority_count: int
    low_priority_count: int
    total_suggested_quantity: int
