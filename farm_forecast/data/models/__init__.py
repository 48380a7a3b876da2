from .data_filters import InventoryFilters

from .inventory import FeedFrequencyUnit, InventoryRecord
from .suggestions import Priority, ReorderSuggestion, ReorderSummary
from .list_response import StringList

__all__ = [
    # Filter classes
    "InventoryFilters",
    # Input models
    "FeedFrequencyUnit",
    "InventoryRecord",
    # Output models
    "Priority",
    "ReorderSuggestion",
    "ReorderSummary",
    # List response models
    "StringList",
]
