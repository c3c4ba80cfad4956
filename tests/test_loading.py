import numpy as np
import pytest

from npyviewer.interface import tools as t
from npyviewer.models import ArrayDataset, AxisLimits, CurrentContext, DecodeError


# ---------------------------------------------------------------- decoding

def test_from_path_reads_2d_array(npy_file):
    path = npy_file(np.arange(6, dtype=np.int16).reshape(2, 3))
    ds = ArrayDataset.from_path(path)
    assert ds.shape == (2, 3)
    assert ds.data.dtype == np.float64
    assert ds.source_dtype == "int16"
    assert ds.flat.tolist() == [0, 1, 2, 3, 4, 5]
    assert ds.metadata == {"file": "data.npy", "shape": "2 x 3", "dtype": "int16"}


def test_dataset_is_read_only(npy_file):
    ds = ArrayDataset.from_path(npy_file(np.ones((2, 2))))
    with pytest.raises(ValueError):
        ds.data[0, 0] = 5


def test_dataset_copies_input():
    src = np.zeros((2, 2))
    ds = ArrayDataset("mem.npy", src)
    src[0, 0] = 9
    assert ds.data[0, 0] == 0


@pytest.mark.parametrize("arr", [
    np.arange(5.0),
    np.zeros((2, 2, 2)),
    np.zeros((0, 4)),
    np.array([[True, False]]),
    np.array([[1 + 2j]]),
])
def test_from_path_rejects_bad_arrays(npy_file, arr):
    with pytest.raises(DecodeError):
        ArrayDataset.from_path(npy_file(arr))


def test_from_path_rejects_object_arrays(npy_file):
    arr = np.empty((1, 1), dtype=object)
    arr[0, 0] = {"a": 1}
    with pytest.raises(DecodeError):
        ArrayDataset.from_path(npy_file(arr))


def test_from_path_rejects_garbage(tmp_path):
    path = tmp_path / "junk.npy"
    path.write_bytes(b"not an array at all")
    with pytest.raises(DecodeError):
        ArrayDataset.from_path(path)


def test_from_path_rejects_empty_file(tmp_path):
    path = tmp_path / "empty.npy"
    path.write_bytes(b"")
    with pytest.raises(DecodeError):
        ArrayDataset.from_path(path)


def test_from_path_rejects_wrong_suffix(tmp_path):
    path = tmp_path / "data.txt"
    np.savetxt(path, np.ones((2, 2)))
    with pytest.raises(DecodeError, match="invalid file type"):
        ArrayDataset.from_path(path)


def test_from_path_rejects_missing(tmp_path):
    with pytest.raises(DecodeError):
        ArrayDataset.from_path(tmp_path / "missing.npy")


def test_decode_error_is_value_error():
    assert issubclass(DecodeError, ValueError)


def test_load_without_path():
    with pytest.raises(DecodeError):
        t.load("")


# ---------------------------------------------------------------- context

@pytest.fixture
def cxt():
    c = CurrentContext()
    t.attach_controller(c)
    return c


def test_initial_limits_before_load(cxt):
    assert cxt.limits == AxisLimits(0.0, 0.015, 0.0, 20.0)
    assert not cxt.has_raster
    ok, msg = cxt.requires()
    assert not ok and msg


def test_open_array_installs_raster(cxt, npy_file):
    path = npy_file(np.array([[0.0, 1.0], [2.0, 3.0]]))
    assert t.open_array(cxt, path)
    assert cxt.raster.gray.tolist() == [[0, 85], [170, 255]]
    assert cxt.raster.extrema == (0.0, 3.0)
    assert cxt.limits == AxisLimits.for_shape(2, 2)
    assert cxt.store.size == (2, 2)
    assert not cxt.loading
    assert cxt.error is None
    assert cxt.requires() == (True, "")


def test_open_array_clears_points(cxt, npy_file):
    t.open_array(cxt, npy_file(np.zeros((4, 4)), "a.npy"))
    cxt.store.add(1, 1, 0.0)
    cxt.controller.pointer_move(1, 1)
    t.open_array(cxt, npy_file(np.ones((8, 3)), "b.npy"))
    assert len(cxt.store) == 0
    assert cxt.controller.hovered is None
    assert cxt.dataset.path.name == "b.npy"
    assert cxt.store.size == (3, 8)


def test_failed_open_keeps_previous_raster(cxt, npy_file, tmp_path):
    t.open_array(cxt, npy_file(np.arange(4.0).reshape(2, 2)))
    cxt.store.add(1, 1, 0.0)
    before = cxt.raster
    bad = tmp_path / "bad.npy"
    bad.write_bytes(b"garbage")
    assert not t.open_array(cxt, bad)
    assert cxt.raster is before
    assert len(cxt.store) == 1
    assert not cxt.loading
    assert cxt.error
    assert t.legend_text(cxt) == cxt.error


def test_error_cleared_on_next_load(cxt, npy_file, tmp_path):
    bad = tmp_path / "bad.npy"
    bad.write_bytes(b"garbage")
    t.open_array(cxt, bad)
    assert t.open_array(cxt, npy_file(np.ones((2, 2))))
    assert cxt.error is None
    assert "data.npy" in t.legend_text(cxt)


def test_last_completed_load_wins(cxt, npy_file):
    t.open_array(cxt, npy_file(np.zeros((2, 5)), "first.npy"))
    t.open_array(cxt, npy_file(np.zeros((3, 4)), "second.npy"))
    assert cxt.dataset.path.name == "second.npy"
    assert (cxt.raster.height, cxt.raster.width) == (3, 4)


def test_install_rejects_mismatched_raster(cxt, npy_file):
    from npyviewer.array_ops import normalize_to_raster
    ds = ArrayDataset.from_path(npy_file(np.zeros((2, 3))))
    with pytest.raises(ValueError):
        cxt.install(ds, normalize_to_raster(np.zeros((3, 2))))


def test_shift_click_samples_raw_value(cxt, npy_file):
    t.open_array(cxt, npy_file(np.array([[1.0, 2.0], [3.0, 40.0]])))
    from npyviewer.interface.interaction import Modifiers
    cxt.controller.pointer_down(1.5, 1.2, Modifiers(shift=True))
    assert cxt.store.points[0].value == 40.0
    # right and bottom edges read the last column and row
    assert cxt.sample_at(2, 2) == 40.0


def test_axis_edit_recalibrates_points(cxt, npy_file):
    t.open_array(cxt, npy_file(np.zeros((10, 10))))
    p = cxt.store.add(5, 5, 0.0)
    assert (p.logical_x, p.logical_y) == pytest.approx((5, 5))
    t.set_axis_limit(cxt, "xmax", "20")
    assert p.logical_x == pytest.approx(10)
    t.set_axis_limit(cxt, "xmax", "oops")
    assert cxt.limits.xmax == 20
    t.reset_axes(cxt)
    assert cxt.limits == AxisLimits.for_shape(10, 10)
    assert p.logical_x == pytest.approx(5)


def test_clear_points_and_table(cxt, npy_file):
    t.open_array(cxt, npy_file(np.zeros((10, 10))))
    cxt.store.add(0, 10, 1.5)
    rows = t.points_table(cxt)
    assert rows == [{"#": 1, "pixel": "(0.0, 10.0)", "x": "10.000", "y": "0.000", "value": "1.5"}]
    t.clear_points(cxt)
    assert t.points_table(cxt) == []


def test_metadata(cxt, npy_file):
    assert cxt.metadata is None
    t.open_array(cxt, npy_file(np.array([[1, 7]], dtype=np.uint8)))
    meta = cxt.metadata
    assert meta["shape"] == "1 x 2"
    assert meta["min"] == 1.0 and meta["max"] == 7.0
    assert meta["points"] == 0


def test_large_integers_are_sampled_exactly(cxt, npy_file):
    big = 2**53 + 1
    t.open_array(cxt, npy_file(np.array([[big, 0]], dtype=np.int64)))
    from npyviewer.interface.interaction import Modifiers
    cxt.controller.pointer_down(0.5, 0.5, Modifiers(shift=True))
    assert cxt.store.points[0].value == big
    assert cxt.dataset.raw.dtype == np.int64
    assert not cxt.dataset.raw.flags.writeable
