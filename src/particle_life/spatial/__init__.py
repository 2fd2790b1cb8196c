# MIT License (see LICENSE)
"""
Spatial neighbour queries.

Providers are rebuilt from a fresh position snapshot every step and
queried read-only by the interaction engine.
"""
from .index import (
    SpatialIndex,
    KDTreeIndex,
    SpatialHashIndex,
    make_spatial_index,
)

__all__ = [
    "SpatialIndex",
    "KDTreeIndex",
    "SpatialHashIndex",
    "make_spatial_index",
]
