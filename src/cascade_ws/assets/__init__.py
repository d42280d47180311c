"""Typed Cascade assets.

The type registry and the wire helpers are exported here; the asset shapes
live in their own modules and are reached through ``registry`` and
``materializer``.
"""

from .types import AssetType, Category, TypeInfo
from .wire import Empty, Many, One, Repeated

__all__ = [
    "AssetType",
    "Category",
    "TypeInfo",
    "Empty",
    "One",
    "Many",
    "Repeated",
]
