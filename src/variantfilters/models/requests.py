"""Request DTOs for the two supported query shapes."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..domain.region import Region
from ..domain.variant_type import VariantType


class VariantSearchQuery(BaseModel):
    """Parameters of a general variant search; every field is optional."""

    maf: str | None = Field(
        default=None,
        description="Minor allele frequency threshold (e.g. '<0.01')",
    )
    polyphen_score: str | None = Field(
        default=None,
        description="PolyPhen score threshold (e.g. '>0.9')",
    )
    sift_score: str | None = Field(
        default=None,
        description="SIFT score threshold (e.g. '<=0.05')",
    )
    studies: list[str] | None = Field(
        default=None,
        description="Restrict to variants present in these studies",
    )
    consequence_type: list[str] | None = Field(
        default=None,
        description="Restrict to these consequence type accessions (e.g. 'SO:0001583')",
    )


class BeaconQuery(BaseModel):
    """Parameters of a region/allele lookup."""

    start_range: Region = Field(..., description="Allowed range for the variant start")
    end_range: Region = Field(..., description="Allowed range for the variant end")
    reference_bases: str | None = Field(default=None, description="Reference allele")
    alternate_bases: str | None = Field(default=None, description="Alternate allele")
    variant_type: VariantType | None = Field(default=None, description="Variant type")
    studies: list[str] | None = Field(
        default=None,
        description="Restrict to variants present in these studies",
    )
