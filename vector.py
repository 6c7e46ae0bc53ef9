import math

import numpy as np

from util import normalize as cube_coordinates


class Vector3(object):
    """
    Three component float vector backed by a numpy array.

    Arithmetic returns new vectors, except the in-place operators and
    `normalize()`, which modify the vector and return it.
    """
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=float)

    @classmethod
    def from_iterable(cls, values):
        x, y, z = values
        return cls(x, y, z)

    @property
    def x(self):
        return float(self._v[0])

    @property
    def y(self):
        return float(self._v[1])

    @property
    def z(self):
        return float(self._v[2])

    def __getitem__(self, index):
        return float(self._v[index])

    def __setitem__(self, index, value):
        self._v[index] = value

    def __iter__(self):
        return iter(self.as_tuple())

    def __len__(self):
        return 3

    def __add__(self, other):
        return Vector3.from_iterable(self._v + _values(other))

    def __sub__(self, other):
        return Vector3.from_iterable(self._v - _values(other))

    def __iadd__(self, other):
        self._v += _values(other)
        return self

    def __isub__(self, other):
        self._v -= _values(other)
        return self

    def __mul__(self, scalar):
        return Vector3.from_iterable(self._v * float(scalar))

    __rmul__ = __mul__

    def __neg__(self):
        return Vector3.from_iterable(-self._v)

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def __repr__(self):
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    def dot(self, other):
        return float(np.dot(self._v, _values(other)))

    def cross(self, other):
        return Vector3.from_iterable(np.cross(self._v, _values(other)))

    def length(self):
        return math.sqrt(self.dot(self))

    def normalize(self):
        """Scale to unit length in place. The zero vector is left as is."""
        n = self.length()
        if n > 0.0:
            self._v /= n
        return self

    def normalized(self):
        return self.copy().normalize()

    def copy(self):
        return Vector3.from_iterable(self._v)

    def is_finite(self):
        return bool(np.isfinite(self._v).all())

    def as_array(self):
        return self._v.copy()

    def as_tuple(self):
        return (self.x, self.y, self.z)

    def to_cube_coordinates(self):
        """Integer coordinates of the cube containing this point."""
        return cube_coordinates(self.as_tuple())


def _values(other):
    if isinstance(other, Vector3):
        return other._v
    return np.asarray(other, dtype=float)
