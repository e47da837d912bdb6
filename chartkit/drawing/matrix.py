"""Affine transformation matrices."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sequence

__all__ = [
    "Matrix",
    "identity_matrix",
    "translation_matrix",
    "scale_matrix",
    "rotation_matrix",
    "matrix_from_rects",
]

_EPSILON = 1e-6
_HALF_SQRT2 = 0.707106781


def _fequals(a: float, b: float) -> bool:
    return abs(a - b) <= _EPSILON


def _map_pairs(
    points: Sequence[float], fn: Callable[[float, float], tuple[float, float]]
) -> list[float]:
    """Apply ``fn`` to each x, y pair; a trailing odd value is kept unchanged."""
    result: list[float] = []
    for x, y in zip(points[0::2], points[1::2]):
        result.extend(fn(x, y))
    if len(points) % 2:
        result.append(points[-1])
    return result


class Matrix:
    """An affine transformation stored as ``[a, b, c, d, tx, ty]``.

    A point (x, y) maps to ``(x*a + y*c + tx, x*b + y*d + ty)``.
    """

    __slots__ = ("_m",)

    def __init__(self, values: Iterable[float] = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)) -> None:
        m = [float(v) for v in values]
        if len(m) != 6:
            raise ValueError(f"a matrix needs exactly 6 values, got {len(m)}")
        self._m = m

    def __getitem__(self, index: int) -> float:
        return self._m[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __len__(self) -> int:
        return 6

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._m!r})"

    @property
    def translation(self) -> tuple[float, float]:
        """The translation part (tx, ty)."""
        return self._m[4], self._m[5]

    @property
    def scaling(self) -> tuple[float, float]:
        """The diagonal scaling part (a, d)."""
        return self._m[0], self._m[3]

    def determinant(self) -> float:
        """Determinant of the linear part."""
        m = self._m
        return m[0] * m[3] - m[1] * m[2]

    def transform(self, points: Sequence[float]) -> list[float]:
        """Return the flat x, y point list with the transformation applied."""
        return _map_pairs(points, self.transform_point)

    def transform_point(self, x: float, y: float) -> tuple[float, float]:
        """Apply the transformation to a single point."""
        m = self._m
        return x * m[0] + y * m[2] + m[4], x * m[1] + y * m[3] + m[5]

    def transform_rectangle(
        self, x0: float, y0: float, x2: float, y2: float
    ) -> tuple[float, float, float, float]:
        """Transform the rectangle given by its min and max corners; return new bounds."""
        p = self.transform([x0, y0, x2, y0, x2, y2, x0, y2])
        p[0], p[2] = sorted((p[0], p[2]))
        p[4], p[6] = sorted((p[4], p[6]))
        p[1], p[3] = sorted((p[1], p[3]))
        p[5], p[7] = sorted((p[5], p[7]))
        return min(p[0], p[4]), min(p[1], p[5]), max(p[2], p[6]), max(p[3], p[7])

    def _require_invertible(self) -> float:
        d = self.determinant()
        if d == 0:
            raise ValueError("matrix is not invertible")
        return d

    def inverse_transform(self, points: Sequence[float]) -> list[float]:
        """Return the flat point list with the inverse transformation applied."""
        self._require_invertible()
        return _map_pairs(points, self.inverse_transform_point)

    def inverse_transform_point(self, x: float, y: float) -> tuple[float, float]:
        """Apply the inverse transformation to a single point."""
        d = self._require_invertible()
        m = self._m
        return (
            ((x - m[4]) * m[3] - (y - m[5]) * m[2]) / d,
            ((y - m[5]) * m[0] - (x - m[4]) * m[1]) / d,
        )

    def vector_transform(self, points: Sequence[float]) -> list[float]:
        """Return the point list transformed without the translation part."""
        m = self._m
        return _map_pairs(points, lambda x, y: (x * m[0] + y * m[2], x * m[1] + y * m[3]))

    def inverse(self) -> None:
        """Invert the matrix in place."""
        d = self._require_invertible()
        m0, m1, m2, m3, m4, m5 = self._m
        self._m = [
            m3 / d,
            -m1 / d,
            -m2 / d,
            m0 / d,
            (m2 * m5 - m3 * m4) / d,
            (m1 * m4 - m0 * m5) / d,
        ]

    def copy(self) -> Matrix:
        """Return an independent copy."""
        return Matrix(self._m)

    def compose(self, other: Matrix) -> None:
        """Compose in place so that ``other`` is applied before this matrix."""
        m0, m1, m2, m3, m4, m5 = self._m
        o = other._m
        self._m = [
            o[0] * m0 + o[1] * m2,
            o[1] * m3 + o[0] * m1,
            o[2] * m0 + o[3] * m2,
            o[3] * m3 + o[2] * m1,
            o[4] * m0 + o[5] * m2 + m4,
            o[5] * m3 + o[4] * m1 + m5,
        ]

    def scale(self, sx: float, sy: float) -> None:
        """Prepend a scale in place."""
        m = self._m
        m[0] *= sx
        m[1] *= sx
        m[2] *= sy
        m[3] *= sy

    def translate(self, tx: float, ty: float) -> None:
        """Prepend a translation in place."""
        m = self._m
        m[4] = tx * m[0] + ty * m[2] + m[4]
        m[5] = ty * m[3] + tx * m[1] + m[5]

    def rotate(self, radians: float) -> None:
        """Prepend a rotation (in radians) in place."""
        c = math.cos(radians)
        s = math.sin(radians)
        m = self._m
        t0 = c * m[0] + s * m[2]
        t1 = s * m[3] + c * m[1]
        t2 = c * m[2] - s * m[0]
        t3 = c * m[3] - s * m[1]
        m[0], m[1], m[2], m[3] = t0, t1, t2, t3

    def get_scale(self) -> float:
        """An overall scale factor for the matrix."""
        m = self._m
        x = _HALF_SQRT2 * m[0] + _HALF_SQRT2 * m[1]
        y = _HALF_SQRT2 * m[2] + _HALF_SQRT2 * m[3]
        return math.sqrt(x * x + y * y)

    def equals(self, other: Matrix) -> bool:
        """Element-wise equality within a small tolerance."""
        return all(_fequals(a, b) for a, b in zip(self._m, other._m))

    def is_identity(self) -> bool:
        """True when the matrix is the identity, within tolerance."""
        return _fequals(self._m[4], 0) and _fequals(self._m[5], 0) and self.is_translation()

    def is_translation(self) -> bool:
        """True when the matrix is a pure translation, within tolerance."""
        m = self._m
        return _fequals(m[0], 1) and _fequals(m[1], 0) and _fequals(m[2], 0) and _fequals(m[3], 1)


def identity_matrix() -> Matrix:
    """The identity transformation."""
    return Matrix((1.0, 0.0, 0.0, 1.0, 0.0, 0.0))


def translation_matrix(tx: float, ty: float) -> Matrix:
    """A pure translation."""
    return Matrix((1.0, 0.0, 0.0, 1.0, tx, ty))


def scale_matrix(sx: float, sy: float) -> Matrix:
    """A pure scale."""
    return Matrix((sx, 0.0, 0.0, sy, 0.0, 0.0))


def rotation_matrix(angle: float) -> Matrix:
    """A rotation by ``angle`` radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    return Matrix((c, s, -s, c, 0.0, 0.0))


def matrix_from_rects(
    rectangle1: Sequence[float], rectangle2: Sequence[float]
) -> Matrix:
    """Scale-and-translate matrix mapping rectangle1 onto rectangle2 (x0, y0, x1, y1)."""
    x_scale = (rectangle2[2] - rectangle2[0]) / (rectangle1[2] - rectangle1[0])
    y_scale = (rectangle2[3] - rectangle2[1]) / (rectangle1[3] - rectangle1[1])
    x_offset = rectangle2[0] - rectangle1[0] * x_scale
    y_offset = rectangle2[1] - rectangle1[1] * y_scale
    return Matrix((x_scale, 0.0, 0.0, y_scale, x_offset, y_offset))