"""Domain layer for variant-filters."""

from .filter_builder import FilterBuilder
from .filters import (
    FILTER_LIST_ADAPTER,
    AlternateFilter,
    ConsequenceTypeFilter,
    CoordinateFilter,
    EndFilter,
    FileFilter,
    MafFilter,
    MembershipFilter,
    PolyphenFilter,
    ReferenceBasesFilter,
    RelationalOperator,
    SiftFilter,
    StartFilter,
    StudyFilter,
    ThresholdFilter,
    VariantRepositoryFilter,
    VariantTypeFilter,
)
from .region import Region
from .variant_type import VariantType

__all__ = [
    "FILTER_LIST_ADAPTER",
    "AlternateFilter",
    "ConsequenceTypeFilter",
    "CoordinateFilter",
    "EndFilter",
    "FileFilter",
    "FilterBuilder",
    "MafFilter",
    "MembershipFilter",
    "PolyphenFilter",
    "ReferenceBasesFilter",
    "Region",
    "RelationalOperator",
    "SiftFilter",
    "StartFilter",
    "StudyFilter",
    "ThresholdFilter",
    "VariantRepositoryFilter",
    "VariantType",
    "VariantTypeFilter",
]
