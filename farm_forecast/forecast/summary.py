from __future__ import annotations

from typing import Sequence

import pandas as pd

from farm_forecast.data.models import InventoryRecord, Priority, ReorderSuggestion, ReorderSummary

from .consumption import resolve_daily_rate

SUGGESTION_COLUMNS = [
    "priority", "product_name", "farm_name", "current_stock", "unit",
    "days_until_empty", "suggested_quantity", "reasoning", "source_id",
]


def summarize_suggestions(suggestions: Sequence[ReorderSuggestion]) -> ReorderSummary:
    """Counts per priority plus the total quantity suggested for reorder."""
    counts = {p: 0 for p in Priority}
    for s in suggestions:
        counts[s.priority] += 1
    return ReorderSummary(
        total_suggestions=len(suggestions),
        high_priority_count=counts[Priority.HIGH],
        medium_priority_count=counts[Priority.MEDIUM],
        low_priority_count=counts[Priority.LOW],
        total_suggested_quantity=sum(s.suggested_quantity for s in suggestions),
    )


def suggestions_to_frame(suggestions: Sequence[ReorderSuggestion]) -> pd.DataFrame:
    """Tabular view of ``suggestions`` in their given order."""
    if not suggestions:
        return pd.DataFrame(columns=SUGGESTION_COLUMNS)
    rows = [s.model_dump(mode="json") for s in suggestions]
    return pd.DataFrame(rows)[SUGGESTION_COLUMNS]


def count_without_consumption_data(records: Sequence[InventoryRecord]) -> int:
    """Records the forecaster skips because no daily rate can be resolved."""
    return sum(1 for r in records if resolve_daily_rate(r) <= 0)
