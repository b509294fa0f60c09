import numpy as np
import pytest

from winseq import SliceView, Window, Windows


def test_start_past_end_is_rejected():
    with pytest.raises(ValueError):
        Window(3, 2, [])
    with pytest.raises(ValueError):
        Window(-1, 2, [1, 2, 3])
    assert Window(2, 2, []).is_empty()


def test_length_is_payload_length():
    w = Window(4, 7, [1, 2, 3])
    assert w.length() == len(w) == 3
    assert w.span == 3
    assert not w.is_empty()


def test_map_keeps_range():
    w = next(Windows([1, 2, 3, 4, 5], 3, 1))
    mapped = w.map(sum)
    assert (mapped.start, mapped.end, mapped.value) == (0, 3, 6)
    assert w.value == [1, 2, 3]


def test_map_rms_feature_per_window():
    x = np.array([3.0, 4.0, 3.0, 4.0, 0.0])
    feats = [w.map(lambda v: float(np.sqrt(np.mean(v.to_array() ** 2)))) for w in Windows(x, 2, 2)]
    assert [(f.start, f.end) for f in feats] == [(0, 2), (2, 4), (4, 5)]
    assert feats[0].value == pytest.approx(np.sqrt(12.5))
    assert feats[-1].value == 0.0


def test_flat_map_replaces_range():
    w = Window(0, 3, [1, 2, 3])
    out = w.flat_map(lambda v: Window(10, 11, v[0]))
    assert out == Window(10, 11, 1)
    assert (w.start, w.end) == (0, 3)


def test_flat_map_requires_window_result():
    with pytest.raises(TypeError):
        Window(0, 1, [1]).flat_map(lambda v: v)


def test_borrow_is_read_only_view():
    src = [1, 2, 3, 4]
    w = next(Windows(src, 2, 1))
    b = w.borrow()
    assert (b.start, b.end) == (0, 2)
    assert b.value.source is src
    with pytest.raises(TypeError):
        b.value[0] = 9


def test_borrow_mut_writes_through_to_source():
    src = [1, 2, 3, 4]
    win = Windows(src, 2, 2)
    next(win)
    w = next(win).borrow_mut()
    w.value[0] = 30
    w.value[-1] = 40
    assert src == [1, 2, 30, 40]


def test_borrow_passes_plain_payload_by_reference():
    payload = {"rms": 1.0}
    w = Window(0, 4, payload)
    assert w.borrow().value is payload
    assert w.borrow_mut().value is payload


def test_slice_view_indexing():
    v = SliceView(list(range(10)), 2, 5)
    assert list(v) == [2, 3, 4, 5, 6]
    assert v[0] == 2 and v[-1] == 6
    sub = v[1:3]
    assert isinstance(sub, SliceView)
    assert sub == [3, 4]
    assert v[::2] == [2, 4, 6]
    assert v.materialize() == [2, 3, 4, 5, 6]
    with pytest.raises(IndexError):
        v[5]


def test_slice_view_bounds_checked():
    with pytest.raises(ValueError):
        SliceView([1, 2, 3], 2, 5)


def test_slice_view_materializes_source_type():
    assert SliceView("abcdef", 1, 3).materialize() == "bcd"
    assert SliceView(b"abcdef", 1, 3).materialize() == b"bcd"


def test_borrow_mut_on_two_dim_array_accepts_numpy_keys():
    x = np.zeros((6, 2))
    win = Windows(x, 3, 3)
    next(win)
    w = next(win).borrow_mut()
    w.value[0, 1] = 7.0
    w.value[1:3] = 1.0
    assert w.value[0, 1] == 7.0
    np.testing.assert_array_equal(x[3], [0.0, 7.0])
    np.testing.assert_array_equal(x[4:6], np.ones((2, 2)))
    assert x[:3].sum() == 0.0


def test_borrow_mut_slice_assignment_keeps_source_length():
    src = [1, 2, 3, 4, 5]
    w = next(Windows(src, 3, 1)).borrow_mut()
    w.value[1:3] = [20, 30]
    assert src == [1, 20, 30, 4, 5]
    with pytest.raises(ValueError):
        w.value[0:2] = [9]
    assert len(src) == 5
