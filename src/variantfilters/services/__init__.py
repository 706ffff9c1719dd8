"""Services layer."""

from .filter_service import FilterService

__all__ = ["FilterService"]
