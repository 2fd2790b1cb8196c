# MIT License (see LICENSE)
"""
Spatial indices for per-step neighbour queries.

An index is a snapshot of particle positions, rebuilt once per simulation
step from the post-integration positions and then only queried while the
interaction engine runs. Nothing mutates it between rebuilds, so
concurrent radius queries need no locking.

Two providers share the same interface:
- KDTreeIndex: scipy's cKDTree, O(log N) expected query.
- SpatialHashIndex: uniform grid hashing; with the cell size equal to
  the query radius a query visits at most 3x3 cells.

Both include points lying exactly on the query radius.
"""
from __future__ import annotations
import math
from collections import defaultdict
from typing import Protocol, Sequence

import numpy as np
from scipy.spatial import cKDTree

from ..constants import MAX_INTERACTION_DIST

Neighbour = tuple[np.ndarray, int]


class SpatialIndex(Protocol):
    """Interface the interaction engine relies on."""

    def rebuild(self, positions: np.ndarray, ids: Sequence[int]) -> None:
        ...

    def query_radius(self, point: np.ndarray, radius: float) -> list[Neighbour]:
        ...


def _snapshot(positions: np.ndarray, ids: Sequence[int]) -> tuple[np.ndarray, np.ndarray]:
    """Copy positions to a read-only (N, 2) float64 array paired with ids."""
    pts = np.array(positions, dtype=np.float64).reshape(-1, 2)
    id_arr = np.asarray(ids, dtype=np.int64)
    if len(id_arr) != len(pts):
        raise ValueError(f"Got {len(pts)} positions for {len(id_arr)} ids")
    pts.setflags(write=False)
    return pts, id_arr


class KDTreeIndex:
    """
    KD-tree index over a snapshot of positions.

    Example:
        index = KDTreeIndex()
        index.rebuild(positions, ids)
        for pos, pid in index.query_radius(positions[0], 100.0):
            ...
    """

    def __init__(self) -> None:
        self._points = np.empty((0, 2), dtype=np.float64)
        self._ids = np.empty(0, dtype=np.int64)
        self._tree: cKDTree | None = None

    def __len__(self) -> int:
        return len(self._ids)

    def rebuild(self, positions: np.ndarray, ids: Sequence[int]) -> None:
        """Replace the snapshot with new positions."""
        self._points, self._ids = _snapshot(positions, ids)
        self._tree = cKDTree(self._points) if len(self._points) else None

    def query_radius(self, point: np.ndarray, radius: float) -> list[Neighbour]:
        """
        Return (position, id) for every point within radius of point.

        Returns an empty list before the first rebuild or for an empty snapshot.
        """
        if self._tree is None:
            return []
        hits = self._tree.query_ball_point(np.asarray(point, dtype=np.float64), r=radius)
        return [(self._points[i], int(self._ids[i])) for i in hits]


class SpatialHashIndex:
    """
    Uniform grid index over a snapshot of positions.

    Points are hashed into square cells of size `cell_size`. A radius query
    scans the cells overlapping the query circle's bounding box and filters
    by exact distance.

    Attributes:
        cell: The size of each grid cell in world units.
    """

    def __init__(self, cell_size: float = MAX_INTERACTION_DIST) -> None:
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_size}")
        self.cell = float(cell_size)
        self._points = np.empty((0, 2), dtype=np.float64)
        self._ids = np.empty(0, dtype=np.int64)
        self._grid: dict[tuple[int, int], list[int]] = {}

    def __len__(self) -> int:
        return len(self._ids)

    def _cell_of(self, x: float, y: float) -> tuple[int, int]:
        return (math.floor(x / self.cell), math.floor(y / self.cell))

    def rebuild(self, positions: np.ndarray, ids: Sequence[int]) -> None:
        """Replace the snapshot with new positions and rehash every point."""
        self._points, self._ids = _snapshot(positions, ids)
        grid: dict[tuple[int, int], list[int]] = defaultdict(list)
        for i, (x, y) in enumerate(self._points):
            grid[self._cell_of(x, y)].append(i)
        self._grid = dict(grid)

    def query_radius(self, point: np.ndarray, radius: float) -> list[Neighbour]:
        """Return (position, id) for every point within radius of point."""
        if not self._grid:
            return []
        px, py = float(point[0]), float(point[1])
        ix0, iy0 = self._cell_of(px - radius, py - radius)
        ix1, iy1 = self._cell_of(px + radius, py + radius)
        r2 = radius * radius
        out: list[Neighbour] = []
        for ix in range(ix0, ix1 + 1):
            for iy in range(iy0, iy1 + 1):
                for i in self._grid.get((ix, iy), ()):
                    dx = self._points[i, 0] - px
                    dy = self._points[i, 1] - py
                    if dx * dx + dy * dy <= r2:
                        out.append((self._points[i], int(self._ids[i])))
        return out


def make_spatial_index(kind: str = "kdtree", cell_size: float = MAX_INTERACTION_DIST) -> SpatialIndex:
    """
    Construct a spatial index by name.

    Args:
        kind: "kdtree" or "grid".
        cell_size: Grid cell size, used by "grid" only.

    Raises:
        ValueError: If kind is unknown.
    """
    if kind == "kdtree":
        return KDTreeIndex()
    if kind == "grid":
        return SpatialHashIndex(cell_size=cell_size)
    raise ValueError(f"Unknown spatial index: {kind}")
