from .consumption import (
    ConsumptionForecaster,
    forecast,
    resolve_daily_rate,
    sort_suggestions,
)
from .exceptions import InvalidArgumentError
from .summary import count_without_consumption_data, summarize_suggestions, suggestions_to_frame

__all__ = [
    "ConsumptionForecaster",
    "count_without_consumption_data",
    "InvalidArgumentError",
    "forecast",
    "resolve_daily_rate",
    "sort_suggestions",
    "summarize_suggestions",
    "suggestions_to_frame",
]
