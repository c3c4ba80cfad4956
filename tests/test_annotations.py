import math

import pytest

from npyviewer.models import AnnotationStore, AxisLimits


class Limits:
    """Mutable limits holder standing in for an AxisCalibrator."""
    def __init__(self, limits):
        self.limits = limits

    def __call__(self):
        return self.limits


@pytest.fixture
def holder():
    return Limits(AxisLimits(xmin=0, xmax=10, ymin=0, ymax=10))


@pytest.fixture
def store(holder):
    return AnnotationStore(holder, 100, 100)


def test_add_computes_logical_coordinates(store):
    p = store.add(50, 50, 3.0)
    assert (p.logical_x, p.logical_y) == pytest.approx((5, 5))
    assert p.value == 3.0
    assert p.colour == 0xFF0000
    assert len(store) == 1


def test_find_nearest_scenario(store):
    p = store.add(50, 50, 0.0)
    point, dist = store.find_nearest(52, 52)
    assert point is p
    assert dist == pytest.approx(2.83, abs=0.01)
    assert dist < 10


def test_find_nearest_empty_store(store):
    assert store.find_nearest(1, 1) is None


def test_find_nearest_tie_goes_to_first(store):
    first = store.add(10, 10, 0.0)
    store.add(10, 10, 1.0)
    point, _ = store.find_nearest(10, 10)
    assert point is first


def test_add_then_remove_nearest_restores_size(store):
    store.add(5, 5, 0.0)
    before = len(store)
    p = store.add(40, 60, 1.0)
    removed = store.remove_nearest(p.pixel_x, p.pixel_y, 10)
    assert removed is p
    assert len(store) == before


def test_remove_nearest_threshold_is_strict(store):
    store.add(0, 0, 0.0)
    assert store.remove_nearest(10, 0, 10) is None
    assert len(store) == 1
    assert store.remove_nearest(9.9, 0, 10) is not None
    assert len(store) == 0


def test_move_to_recomputes_logical_but_not_value(store):
    p = store.add(0, 0, 7.0)
    store.move_to(p, 100, 100)
    assert (p.pixel_x, p.pixel_y) == (100, 100)
    assert (p.logical_x, p.logical_y) == pytest.approx((0, 0))
    assert p.value == 7.0


def test_recalibrate_uses_current_limits(store, holder):
    p = store.add(50, 50, 0.0)
    holder.limits = AxisLimits(xmin=0, xmax=1, ymin=-1, ymax=1)
    store.recalibrate()
    assert (p.logical_x, p.logical_y) == pytest.approx((0.5, 0.0))


def test_points_are_compared_by_identity(store):
    a = store.add(1, 1, 0.0)
    b = store.add(1, 1, 0.0)
    assert a != b
    store.remove(b)
    assert a in store
    assert b not in store


def test_iteration_preserves_insertion_order(store):
    pts = [store.add(i, i, float(i)) for i in range(5)]
    assert list(store) == pts
    assert store.points == tuple(pts)


def test_clear(store):
    store.add(1, 1, 0.0)
    store.clear()
    assert len(store) == 0


def test_distance_is_euclidean(store):
    p = store.add(0, 0, 0.0)
    assert p.distance_to(3, 4) == 5
    assert math.isclose(p.distance_to(1, 1), math.sqrt(2))
