"""FilterBuilder: collects repository filters from optional query parameters."""

from __future__ import annotations

from ..observability import get_logger
from .filters import (
    AlternateFilter,
    ConsequenceTypeFilter,
    EndFilter,
    FileFilter,
    MafFilter,
    PolyphenFilter,
    ReferenceBasesFilter,
    RelationalOperator,
    SiftFilter,
    StartFilter,
    StudyFilter,
    VariantRepositoryFilter,
    VariantTypeFilter,
)
from .region import Region
from .variant_type import VariantType

_LOGGER = get_logger("filter_builder")


class FilterBuilder:
    """Fluent, append-only builder of filters for querying the variant repository.

    Each ``with_*`` method appends a filter only when its input is present and
    returns the builder. Filters keep the order in which the methods were called.
    A builder is meant for a single query: create one, chain, call ``build()``.
    """

    def __init__(self) -> None:
        self._filters: list[VariantRepositoryFilter] = []

    def variant_search_filters(
        self,
        maf: str | None,
        polyphen_score: str | None,
        sift_score: str | None,
        studies: list[str] | None,
        consequence_type: list[str] | None,
    ) -> list[VariantRepositoryFilter]:
        return (
            self.with_maf(maf)
            .with_polyphen_score(polyphen_score)
            .with_sift_score(sift_score)
            .with_studies(studies)
            .with_consequence_type(consequence_type)
            .build()
        )

    def beacon_filters(
        self,
        start_range: Region,
        end_range: Region,
        reference_bases: str | None,
        alternate_bases: str | None,
        variant_type: VariantType | None,
        studies: list[str] | None,
    ) -> list[VariantRepositoryFilter]:
        return (
            self.with_start(start_range)
            .with_end(end_range)
            .with_reference_bases(reference_bases)
            .with_alternate(alternate_bases)
            .with_variant_type(variant_type)
            .with_studies(studies)
            .build()
        )

    def build(self) -> list[VariantRepositoryFilter]:
        return self._filters

    def _add(self, repository_filter: VariantRepositoryFilter) -> None:
        self._filters.append(repository_filter)
        _LOGGER.debug("filter_added", extra={"kind": repository_filter.kind})

    # ------------------------------------------------------------------
    # Score thresholds
    # ------------------------------------------------------------------

    def with_maf(self, maf: str | None) -> FilterBuilder:
        if maf:
            self._add(MafFilter(value=maf))
        return self

    def with_polyphen_score(self, polyphen_score: str | None) -> FilterBuilder:
        if polyphen_score:
            self._add(PolyphenFilter(value=polyphen_score))
        return self

    def with_sift_score(self, sift_score: str | None) -> FilterBuilder:
        if sift_score:
            self._add(SiftFilter(value=sift_score))
        return self

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def with_studies(self, studies: list[str] | None) -> FilterBuilder:
        if studies:
            self._add(StudyFilter(values=studies))
        return self

    def with_consequence_type(self, consequence_type: list[str] | None) -> FilterBuilder:
        if consequence_type:
            self._add(ConsequenceTypeFilter(values=consequence_type))
        return self

    def with_files(self, files: list[str] | None) -> FilterBuilder:
        if files:
            self._add(FileFilter(values=files))
        return self

    def with_variant_types(self, types: list[VariantType] | None) -> FilterBuilder:
        if types:
            self._add(VariantTypeFilter(values=types))
        return self

    def with_variant_type(self, variant_type: VariantType | None) -> FilterBuilder:
        if variant_type is not None:
            self._add(VariantTypeFilter(values=[variant_type]))
        return self

    def with_alternates(self, alternates: list[str] | None) -> FilterBuilder:
        if alternates:
            self._add(AlternateFilter(values=alternates))
        return self

    # Single-value forms below treat only None as absent; "" still yields a filter.

    def with_alternate(self, alternate: str | None) -> FilterBuilder:
        if alternate is not None:
            self._add(AlternateFilter(values=[alternate]))
        return self

    def with_reference_bases(self, reference_bases: str | None) -> FilterBuilder:
        if reference_bases is not None:
            self._add(ReferenceBasesFilter(values=[reference_bases]))
        return self

    # ------------------------------------------------------------------
    # Coordinate ranges (region must not be None)
    # ------------------------------------------------------------------

    def with_start(self, start_range: Region) -> FilterBuilder:
        if start_range.start is not None:
            self._add(StartFilter(value=start_range.start, operator=RelationalOperator.GTE))
        if start_range.end is not None:
            self._add(StartFilter(value=start_range.end, operator=RelationalOperator.LTE))
        return self

    def with_end(self, end_range: Region) -> FilterBuilder:
        if end_range.start is not None:
            self._add(EndFilter(value=end_range.start, operator=RelationalOperator.GTE))
        if end_range.end is not None:
            self._add(EndFilter(value=end_range.end, operator=RelationalOperator.LTE))
        return self
