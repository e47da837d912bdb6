import math

import pytest

from chartkit.drawing.flatteners import DemuxFlattener, SegmentedPath, Transformer, flatten
from chartkit.drawing.matrix import translation_matrix, rotation_matrix
from chartkit.drawing.path import Path


class Recorder:
    def __init__(self):
        self.calls = []

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def line_join(self):
        self.calls.append(("line_join",))

    def close(self):
        self.calls.append(("close",))

    def end(self):
        self.calls.append(("end",))


def test_flatten_lines():
    path = Path()
    path.move_to(1.0, 2.0)
    path.line_to(3.0, 4.0)
    rec = Recorder()
    flatten(path, rec, 1.0)
    assert rec.calls == [
        ("move_to", 1.0, 2.0),
        ("line_to", 3.0, 4.0),
        ("line_join",),
        ("end",),
    ]


def test_flatten_close_returns_to_start():
    path = Path()
    path.move_to(1.0, 1.0)
    path.line_to(5.0, 1.0)
    path.line_to(5.0, 5.0)
    path.close()
    rec = Recorder()
    flatten(path, rec, 1.0)
    assert rec.calls[-3:] == [("line_to", 1.0, 1.0), ("close",), ("end",)]


def test_flatten_second_move_ends_first_subpath():
    path = Path()
    path.move_to(0.0, 0.0)
    path.line_to(1.0, 0.0)
    path.move_to(5.0, 5.0)
    rec = Recorder()
    flatten(path, rec, 1.0)
    idx = rec.calls.index(("move_to", 5.0, 5.0))
    assert rec.calls[idx - 1] == ("end",)


def test_flatten_quad_ends_at_end_point():
    path = Path()
    path.move_to(0.0, 0.0)
    path.quad_curve_to(10.0, 20.0, 20.0, 0.0)
    rec = Recorder()
    flatten(path, rec, 1.0)
    lines = [c for c in rec.calls if c[0] == "line_to"]
    assert len(lines) > 1
    assert lines[-1] == ("line_to", 20.0, 0.0)


def test_flatten_cubic_ends_at_end_point():
    path = Path()
    path.move_to(0.0, 0.0)
    path.cubic_curve_to(5.0, 10.0, 15.0, 10.0, 20.0, 0.0)
    seg = SegmentedPath()
    flatten(path, seg, 1.0)
    assert seg.points[:2] == [0.0, 0.0]
    assert seg.points[-2:] == [20.0, 0.0]


def test_flatten_arc_stays_on_circle():
    path = Path()
    path.arc_to(0.0, 0.0, 10.0, 10.0, 0.0, math.pi)
    seg = SegmentedPath()
    flatten(path, seg, 1.0)
    pairs = list(zip(seg.points[0::2], seg.points[1::2]))
    assert len(pairs) > 2
    for x, y in pairs:
        assert math.hypot(x, y) == pytest.approx(10.0)


def test_transformer_applies_matrix():
    tr = translation_matrix(3.0, -2.0)
    rec = Recorder()
    t = Transformer(tr, rec)
    t.move_to(1.0, 1.0)
    t.line_to(4.0, 5.0)
    t.close()
    assert rec.calls == [
        ("move_to", *tr.transform_point(1.0, 1.0)),
        ("line_to", *tr.transform_point(4.0, 5.0)),
        ("close",),
    ]


def test_transformer_rotation_preserves_length():
    rec = Recorder()
    t = Transformer(rotation_matrix(0.7), rec)
    t.line_to(3.0, 4.0)
    _, x, y = rec.calls[0]
    assert math.hypot(x, y) == pytest.approx(math.hypot(3.0, 4.0))


def test_demux_forwards_to_all():
    a, b = Recorder(), Recorder()
    demux = DemuxFlattener([a, b])
    demux.move_to(1.0, 2.0)
    demux.line_to(3.0, 4.0)
    demux.line_join()
    demux.close()
    demux.end()
    assert a.calls == b.calls
    assert [c[0] for c in a.calls] == ["move_to", "line_to", "line_join", "close", "end"]


def test_segmented_path_collects_points():
    seg = SegmentedPath()
    seg.move_to(1.0, 2.0)
    seg.line_to(3.0, 4.0)
    seg.line_join()
    seg.close()
    seg.end()
    assert seg.points == [1.0, 2.0, 3.0, 4.0]