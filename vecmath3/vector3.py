"""Three-component single-precision vector with four-lane storage."""

from __future__ import annotations

import numbers
from collections.abc import Iterator

import numpy as np

_FLOAT = np.float32


def _scalar(value: numbers.Real) -> np.float32:
    with np.errstate(all="ignore"):
        return _FLOAT(value)


class Vec3f:
    """A 3D vector of 32-bit floats.

    Values live in four lanes (x, y, z, w) where w starts at zero and is
    carried through arithmetic. Equality compares all four lanes, so a NaN
    in any lane makes a vector unequal to everything, itself included.
    No checks are made for division by zero, infinity or NaN.
    """

    __slots__ = ("_lanes",)
    __hash__ = None  # mutable

    def __init__(self, *args: Vec3f | numbers.Real) -> None:
        if not args:
            self._lanes = np.zeros(4, dtype=_FLOAT)
        elif len(args) == 1:
            (value,) = args
            if isinstance(value, Vec3f):
                self._lanes = value._lanes.copy()
            elif isinstance(value, numbers.Real):
                s = _scalar(value)
                self._lanes = np.array([s, s, s, 0.0], dtype=_FLOAT)
            else:
                raise TypeError(
                    f"Vec3f() expects a Vec3f or a real number, not {type(value).__name__}"
                )
        elif len(args) == 3:
            if not all(isinstance(a, numbers.Real) for a in args):
                raise TypeError("Vec3f(x, y, z) expects three real numbers")
            self._lanes = np.array([_scalar(a) for a in args] + [0.0], dtype=_FLOAT)
        else:
            raise TypeError(f"Vec3f() takes 0, 1 or 3 arguments ({len(args)} given)")

    @classmethod
    def _from_lanes(cls, lanes: np.ndarray) -> Vec3f:
        vec = cls.__new__(cls)
        vec._lanes = lanes.astype(_FLOAT, copy=False)
        return vec

    @property
    def x(self) -> float:
        """The first component."""
        return float(self._lanes[0])

    @x.setter
    def x(self, value: numbers.Real) -> None:
        self._lanes[0] = _scalar(value)

    @property
    def y(self) -> float:
        """The second component."""
        return float(self._lanes[1])

    @y.setter
    def y(self, value: numbers.Real) -> None:
        self._lanes[1] = _scalar(value)

    @property
    def z(self) -> float:
        """The third component."""
        return float(self._lanes[2])

    @z.setter
    def z(self, value: numbers.Real) -> None:
        self._lanes[2] = _scalar(value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vec3f({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3f):
            return NotImplemented
        return bool(np.all(self._lanes == other._lanes))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Vec3f):
            return NotImplemented
        return not bool(np.all(self._lanes == other._lanes))

    def __neg__(self) -> Vec3f:
        return Vec3f._from_lanes(np.negative(self._lanes))

    def __add__(self, other: object) -> Vec3f:
        if not isinstance(other, Vec3f):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec3f._from_lanes(self._lanes + other._lanes)

    def __sub__(self, other: object) -> Vec3f:
        if not isinstance(other, Vec3f):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec3f._from_lanes(self._lanes - other._lanes)

    def __mul__(self, other: object) -> Vec3f:
        if isinstance(other, Vec3f):
            factor = other._lanes
        elif isinstance(other, numbers.Real):
            factor = _scalar(other)
        else:
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec3f._from_lanes(self._lanes * factor)

    def __rmul__(self, other: object) -> Vec3f:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec3f._from_lanes(_scalar(other) * self._lanes)

    def __truediv__(self, other: object) -> Vec3f:
        if isinstance(other, Vec3f):
            with np.errstate(all="ignore"):
                lanes = self._lanes / other._lanes
            lanes[3] = 0.0
            return Vec3f._from_lanes(lanes)
        if isinstance(other, numbers.Real):
            with np.errstate(all="ignore"):
                return Vec3f._from_lanes(self._lanes / _scalar(other))
        return NotImplemented

    def __iadd__(self, other: object) -> Vec3f:
        if not isinstance(other, Vec3f):
            return NotImplemented
        with np.errstate(all="ignore"):
            self._lanes = self._lanes + other._lanes
        return self

    def __isub__(self, other: object) -> Vec3f:
        if not isinstance(other, Vec3f):
            return NotImplemented
        with np.errstate(all="ignore"):
            self._lanes = self._lanes - other._lanes
        return self

    def __imul__(self, other: object) -> Vec3f:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        self._lanes = result._lanes
        return self

    def __itruediv__(self, other: object) -> Vec3f:
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        self._lanes = result._lanes
        return self