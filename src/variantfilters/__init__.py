"""variant-filters: compose repository filters for variant queries."""

from .domain import (
    FilterBuilder,
    Region,
    RelationalOperator,
    VariantRepositoryFilter,
    VariantType,
)
from .models import BeaconQuery, VariantSearchQuery
from .services import FilterService

__version__ = "0.1.0"
__all__ = [
    "BeaconQuery",
    "FilterBuilder",
    "FilterService",
    "Region",
    "RelationalOperator",
    "VariantRepositoryFilter",
    "VariantSearchQuery",
    "VariantType",
]
