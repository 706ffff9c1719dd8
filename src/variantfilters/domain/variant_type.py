"""Variant type categories stored on each variant document."""

from __future__ import annotations

from enum import Enum


class VariantType(str, Enum):
    """Categorical variant type, as stored in the ``type`` field."""

    SNV = "SNV"
    MNV = "MNV"
    INDEL = "INDEL"
    INS = "INS"
    DEL = "DEL"
    SV = "SV"
    CNV = "CNV"
    SEQUENCE_ALTERATION = "SEQUENCE_ALTERATION"
    NO_ALTERATION = "NO_ALTERATION"
    TANDEM_REPEAT = "TANDEM_REPEAT"
