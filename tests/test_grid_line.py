from collections import namedtuple

from chartkit.grid_line import GridLine, generate_grid_lines

Tick = namedtuple("Tick", "value label")

TICKS = [
    Tick(1.0, "1.0"),
    Tick(2.0, "2.0"),
    Tick(3.0, "3.0"),
    Tick(4.0, "4.0"),
]


def test_generate_grid_lines():
    gl = generate_grid_lines(TICKS, {}, {})
    assert len(gl) == 2
    assert gl[0].value == 2.0
    assert gl[1].value == 3.0


def test_lines_alternate_major_and_minor():
    major, minor = "major-style", "minor-style"
    gl = generate_grid_lines(TICKS + [Tick(5.0, "5.0")], major, minor)
    assert [line.is_minor for line in gl] == [False, True, False]
    assert [line.style for line in gl] == [major, minor, major]


def test_too_few_ticks():
    assert generate_grid_lines(TICKS[:2], None, None) == []


def test_major_minor_properties():
    line = GridLine(value=1.0, is_minor=True)
    assert line.minor is True
    assert line.major is False