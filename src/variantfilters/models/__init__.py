"""Request models."""

from .requests import BeaconQuery, VariantSearchQuery

__all__ = ["BeaconQuery", "VariantSearchQuery"]
