"""FilterService: turns request DTOs into ordered repository filter lists.

A new FilterBuilder is created for every call, so one service instance can be
shared freely.
"""

from __future__ import annotations

import time
from typing import Callable

from ..domain.filter_builder import FilterBuilder
from ..domain.filters import VariantRepositoryFilter
from ..models.requests import BeaconQuery, VariantSearchQuery
from ..observability import log_filters_built


class FilterService:
    """Builds the filter list for each supported query shape."""

    def __init__(self, builder_factory: Callable[[], FilterBuilder] | None = None) -> None:
        self._new_builder = builder_factory or FilterBuilder

    def variant_search(self, query: VariantSearchQuery) -> list[VariantRepositoryFilter]:
        started = time.perf_counter()
        filters = self._new_builder().variant_search_filters(
            maf=query.maf,
            polyphen_score=query.polyphen_score,
            sift_score=query.sift_score,
            studies=query.studies,
            consequence_type=query.consequence_type,
        )
        log_filters_built("variant_search", len(filters), (time.perf_counter() - started) * 1000)
        return filters

    def beacon(self, query: BeaconQuery) -> list[VariantRepositoryFilter]:
        started = time.perf_counter()
        filters = self._new_builder().beacon_filters(
            start_range=query.start_range,
            end_range=query.end_range,
            reference_bases=query.reference_bases,
            alternate_bases=query.alternate_bases,
            variant_type=query.variant_type,
            studies=query.studies,
        )
        log_filters_built(
            "beacon",
            len(filters),
            (time.perf_counter() - started) * 1000,
            extra={"start_range": str(query.start_range), "end_range": str(query.end_range)},
        )
        return filters
