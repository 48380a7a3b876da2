from .forecast import (
    ConsumptionForecaster,
    InvalidArgumentError,
    forecast,
    resolve_daily_rate,
    sort_suggestions,
    summarize_suggestions,
    suggestions_to_frame,
)

__all__ = [
    "ConsumptionForecaster",
    "InvalidArgumentError",
    "forecast",
    "resolve_daily_rate",
    "sort_suggestions",
    "summarize_suggestions",
    "suggestions_to_frame",
]
