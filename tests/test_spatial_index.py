import numpy as np
import pytest

from particle_life.spatial.index import (
    KDTreeIndex,
    SpatialHashIndex,
    make_spatial_index,
)

INDICES = [KDTreeIndex, lambda: SpatialHashIndex(cell_size=10.0)]


@pytest.mark.parametrize("factory", INDICES)
def test_query_before_rebuild_is_empty(factory):
    index = factory()
    assert index.query_radius(np.zeros(2), 100.0) == []


@pytest.mark.parametrize("factory", INDICES)
def test_radius_query_includes_boundary(factory):
    index = factory()
    positions = np.array([[0.0, 0.0], [10.0, 0.0], [0.0, -10.5], [3.0, 4.0]])
    index.rebuild(positions, [1, 2, 3, 4])

    hits = index.query_radius(np.array([0.0, 0.0]), 10.0)
    ids = sorted(pid for _, pid in hits)
    assert ids == [1, 2, 4]
    for pos, pid in hits:
        np.testing.assert_allclose(pos, positions[pid - 1])


@pytest.mark.parametrize("factory", INDICES)
def test_rebuild_replaces_snapshot(factory):
    index = factory()
    index.rebuild(np.array([[0.0, 0.0]]), [7])
    index.rebuild(np.array([[500.0, 500.0]]), [8])
    assert index.query_radius(np.zeros(2), 50.0) == []
    assert [pid for _, pid in index.query_radius(np.array([505.0, 500.0]), 50.0)] == [8]


@pytest.mark.parametrize("factory", INDICES)
def test_snapshot_is_isolated_from_caller(factory):
    index = factory()
    positions = np.array([[1.0, 1.0], [2.0, 2.0]])
    index.rebuild(positions, [1, 2])
    positions[0] = [900.0, 900.0]
    assert sorted(pid for _, pid in index.query_radius(np.zeros(2), 5.0)) == [1, 2]


def test_providers_agree_on_random_points():
    rng = np.random.default_rng(9)
    positions = rng.uniform(-200.0, 200.0, size=(300, 2))
    ids = list(range(1, 301))
    kd = KDTreeIndex()
    grid = SpatialHashIndex(cell_size=25.0)
    kd.rebuild(positions, ids)
    grid.rebuild(positions, ids)

    for point in positions[:40]:
        for radius in (0.0, 12.5, 40.0, 100.0):
            a = sorted(pid for _, pid in kd.query_radius(point, radius))
            b = sorted(pid for _, pid in grid.query_radius(point, radius))
            assert a == b


def test_rebuild_rejects_length_mismatch():
    with pytest.raises(ValueError):
        KDTreeIndex().rebuild(np.zeros((3, 2)), [1, 2])


def test_make_spatial_index():
    assert isinstance(make_spatial_index("kdtree"), KDTreeIndex)
    grid = make_spatial_index("grid", cell_size=42.0)
    assert isinstance(grid, SpatialHashIndex)
    assert grid.cell == 42.0
    with pytest.raises(ValueError):
        make_spatial_index("octree")
    with pytest.raises(ValueError):
        SpatialHashIndex(cell_size=0.0)
