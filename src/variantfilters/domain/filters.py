"""Typed repository filters for variant queries.

Each filter names the store document field it applies to and carries the
operand(s) to compare against. The repository layer folds a list of these into
a native store query; every variant is discriminated by ``kind``.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from .variant_type import VariantType


class RelationalOperator(str, Enum):
    """Comparison applied between a document field and the operand."""

    EQ = "eq"     # field == value
    GT = "gt"     # field > value
    GTE = "gte"   # field >= value
    LT = "lt"     # field < value
    LTE = "lte"   # field <= value
    IN = "in"     # field in [values]


_THRESHOLD_RE = re.compile(r"^\s*(<=|>=|<|>|=)?\s*(\S.*?)\s*$")
_NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

_THRESHOLD_OPERATORS = {
    None: RelationalOperator.EQ,
    "=": RelationalOperator.EQ,
    "<": RelationalOperator.LT,
    "<=": RelationalOperator.LTE,
    ">": RelationalOperator.GT,
    ">=": RelationalOperator.GTE,
}


class _RepositoryFilter(BaseModel):
    model_config = {"frozen": True}

    field: ClassVar[str]


class ThresholdFilter(_RepositoryFilter):
    """Score threshold kept as the raw text supplied by the caller (e.g. ``'<=0.3'``)."""

    value: str = Field(..., description="Raw threshold, optionally prefixed by an operator")

    def comparison(self) -> tuple[RelationalOperator, float]:
        """Split the raw threshold into an operator and a numeric operand.

        A missing prefix means equality. Raises ValueError if the operand is
        not a plain finite decimal number.
        """
        match = _THRESHOLD_RE.match(self.value)
        if match is None:
            raise ValueError(f"threshold {self.value!r} on {self.field} has no operand")
        symbol, operand = match.groups()
        number = float(operand) if _NUMBER_RE.fullmatch(operand) else math.nan
        if not math.isfinite(number):
            raise ValueError(f"threshold {self.value!r} on {self.field} is not a finite number")
        return _THRESHOLD_OPERATORS[symbol], number


class MafFilter(ThresholdFilter):
    field: ClassVar[str] = "st.maf"
    kind: Literal["maf"] = "maf"


class PolyphenFilter(ThresholdFilter):
    field: ClassVar[str] = "annot.polyphen.sc"
    kind: Literal["polyphen"] = "polyphen"


class SiftFilter(ThresholdFilter):
    field: ClassVar[str] = "annot.sift.sc"
    kind: Literal["sift"] = "sift"


class MembershipFilter(_RepositoryFilter):
    """Field value must be one of ``values``."""

    operator: Literal[RelationalOperator.IN] = RelationalOperator.IN


class StudyFilter(MembershipFilter):
    field: ClassVar[str] = "files.sid"
    kind: Literal["study"] = "study"
    values: list[str]


class ConsequenceTypeFilter(MembershipFilter):
    field: ClassVar[str] = "annot.ct.so"
    kind: Literal["consequence_type"] = "consequence_type"
    values: list[str]


class FileFilter(MembershipFilter):
    field: ClassVar[str] = "files.fid"
    kind: Literal["file"] = "file"
    values: list[str]


class VariantTypeFilter(MembershipFilter):
    field: ClassVar[str] = "type"
    kind: Literal["variant_type"] = "variant_type"
    values: list[VariantType]


class AlternateFilter(MembershipFilter):
    field: ClassVar[str] = "alt"
    kind: Literal["alternate"] = "alternate"
    values: list[str]


class ReferenceBasesFilter(MembershipFilter):
    field: ClassVar[str] = "ref"
    kind: Literal["reference_bases"] = "reference_bases"
    values: list[str]


class CoordinateFilter(_RepositoryFilter):
    """One bound of a coordinate range, e.g. ``start >= 100``."""

    value: int
    operator: RelationalOperator


class StartFilter(CoordinateFilter):
    field: ClassVar[str] = "start"
    kind: Literal["start"] = "start"


class EndFilter(CoordinateFilter):
    field: ClassVar[str] = "end"
    kind: Literal["end"] = "end"


VariantRepositoryFilter = Annotated[
    Union[
        MafFilter,
        PolyphenFilter,
        SiftFilter,
        StudyFilter,
        ConsequenceTypeFilter,
        FileFilter,
        VariantTypeFilter,
        AlternateFilter,
        ReferenceBasesFilter,
        StartFilter,
        EndFilter,
    ],
    Field(discriminator="kind"),
]

FILTER_LIST_ADAPTER: TypeAdapter[list[VariantRepositoryFilter]] = TypeAdapter(
    list[VariantRepositoryFilter]
)
