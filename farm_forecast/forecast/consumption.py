"""Daily-consumption estimation and reorder suggestions for farm inventory.

Every call recomputes from the snapshot it is given. Nothing is cached and
the input records are never modified.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from farm_forecast.data.models import (
    FeedFrequencyUnit,
    InventoryRecord,
    Priority,
    ReorderSuggestion,
)
from farm_forecast.logging import get_logger

from .exceptions import InvalidArgumentError

DAYS_PER_MONTH = 30
DAYS_PER_WEEK = 7
REORDER_BUFFER = 1.2
HIGH_PRIORITY_DAYS = 7
MEDIUM_PRIORITY_DAYS = 14


def resolve_daily_rate(record: InventoryRecord) -> float:
    """Estimate units consumed per day for ``record``.

    The monthly average wins when it is present and positive. Otherwise the
    feeding frequency is converted by its unit (a missing unit counts as
    monthly). Returns 0.0 when neither input yields a positive rate.
    """
    monthly = record.average_monthly_consumption
    if monthly is not None and monthly > 0:
        return monthly / DAYS_PER_MONTH

    frequency = record.feed_frequency
    if frequency is not None and frequency > 0:
        if record.feed_frequency_unit == FeedFrequencyUnit.DAILY:
            return float(frequency)
        if record.feed_frequency_unit == FeedFrequencyUnit.WEEKLY:
            return frequency / DAYS_PER_WEEK
        return frequency / DAYS_PER_MONTH

    return 0.0


def _validate_horizon(horizon_days) -> int:
    # bool is an int subclass; True must not pass as a one-day horizon
    if isinstance(horizon_days, bool) or not isinstance(horizon_days, int):
        raise InvalidArgumentError(
            f"horizon_days must be a positive integer, got {horizon_days!r}"
        )
    if horizon_days <= 0:
        raise InvalidArgumentError(
            f"horizon_days must be a positive integer, got {horizon_days}"
        )
    return horizon_days


def _assign_priority(days_until_empty: int, horizon_days: int) -> tuple[Priority, str]:
    if days_until_empty <= HIGH_PRIORITY_DAYS:
        return Priority.HIGH, f"Critical: Only {days_until_empty} days of stock remaining"
    if days_until_empty <= MEDIUM_PRIORITY_DAYS:
        return Priority.MEDIUM, f"Warning: {days_until_empty} days of stock remaining"
    return Priority.LOW, f"Low stock forecast in {horizon_days} days"


def sort_suggestions(suggestions: Iterable[ReorderSuggestion]) -> List[ReorderSuggestion]:
    """Order by priority (high first), then by soonest-to-empty.

    ``sorted`` is stable, so suggestions with equal keys keep their input order.
    """
    return sorted(
        suggestions,
        key=lambda s: (-s.priority.rank, s.days_until_empty),
    )


class ConsumptionForecaster:
    """Turns an inventory snapshot into prioritised reorder suggestions."""

    def __init__(self) -> None:
        self.logger = get_logger(__name__)

    def suggest(self, record: InventoryRecord, horizon_days: int) -> ReorderSuggestion | None:
        """Return the suggestion for a single record, or None when it does not trigger."""
        daily_rate = resolve_daily_rate(record)
        if daily_rate <= 0:
            self.logger.debug(f"Skipping {record.id}: no consumption data")
            return None

        cover = record.current_stock / daily_rate
        if not math.isfinite(cover):
            # a subnormal rate overflows the division; such stock never empties
            self.logger.debug(f"Skipping {record.id}: consumption too small to project depletion")
            return None

        days_until_empty = math.floor(cover)
        projected_stock = record.current_stock - daily_rate * horizon_days
        threshold = record.low_stock_threshold or 0

        if days_until_empty > horizon_days and projected_stock > threshold:
            return None

        priority, reasoning = _assign_priority(days_until_empty, horizon_days)
        return ReorderSuggestion(
            source_id=record.id,
            product_name=record.product_name,
            farm_name=record.farm_name,
            current_stock=record.current_stock,
            suggested_quantity=math.ceil(daily_rate * DAYS_PER_MONTH * REORDER_BUFFER),
            days_until_empty=days_until_empty,
            priority=priority,
            reasoning=reasoning,
            unit=record.unit,
        )

    def forecast(
        self,
        records: Sequence[InventoryRecord],
        horizon_days: int,
    ) -> List[ReorderSuggestion]:
        """Compute reorder suggestions for ``records`` over ``horizon_days``.

        Args:
            records: Inventory snapshot to evaluate.
            horizon_days: Look-ahead window in days; must be a positive integer.
        Returns:
            List[ReorderSuggestion]: Suggestions sorted by priority, then days until empty.
        Raises:
            InvalidArgumentError: If ``horizon_days`` is not a positive integer.
        """
        horizon_days = _validate_horizon(horizon_days)

        suggestions = []
        for record in records:
            suggestion = self.suggest(record, horizon_days)
            if suggestion is not None:
                suggestions.append(suggestion)

        self.logger.info(
            f"Generated {len(suggestions)} reorder suggestions from {len(records)} records "
            f"over {horizon_days} days"
        )
        return sort_suggestions(suggestions)


def forecast(records: Sequence[InventoryRecord], horizon_days: int) -> List[ReorderSuggestion]:
    """Convenience wrapper around ``ConsumptionForecaster().forecast``."""
    return ConsumptionForecaster().forecast(records, horizon_days)
