from __future__ import annotations

from typing import List, Optional, Protocol

from .models import InventoryFilters, InventoryRecord, StringList


# ---- Data access protocol ----

class InventoryDataSource(Protocol):
    """
    Backend-agnostic contract that feeds the forecaster.

    Implementations MUST avoid result caching inside these methods.
    Each call should run a fresh pass over the underlying source, and
    absent optional fields must come back as None rather than 0.
    """

    def list_farm_names(self) -> StringList:
        """List all farm names."""
        ...

    def get_inventory(self, filters: Optional[InventoryFilters] = None) -> List[InventoryRecord]:
        """Get inventory records based on filters."""
        ...
