import math
import os
import sys

import numpy as np
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import util
from vector import Vector3


def test_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(0.5, -1.0, 4.0)
    assert (a + b).as_tuple() == (1.5, 1.0, 7.0)
    assert (a - b).as_tuple() == (0.5, 3.0, -1.0)
    assert (a * 2).as_tuple() == (2.0, 4.0, 6.0)
    assert (2 * a).as_tuple() == (2.0, 4.0, 6.0)
    assert (-a).as_tuple() == (-1.0, -2.0, -3.0)
    assert a.dot(b) == pytest.approx(0.5 - 2.0 + 12.0)


def test_in_place_operators_modify_vector():
    a = Vector3(1.0, 1.0, 1.0)
    alias = a
    a += Vector3(1.0, 0.0, 0.0)
    a -= (0.0, 0.5, 0.0)
    assert alias is a
    assert a.as_tuple() == (2.0, 0.5, 1.0)


def test_copy_is_independent():
    a = Vector3(1.0, 2.0, 3.0)
    b = a.copy()
    b[1] = 9.0
    assert a.y == 2.0
    assert b == Vector3(1.0, 9.0, 3.0)
    assert a != b


def test_cross_product_is_right_handed():
    x = Vector3(1.0, 0.0, 0.0)
    y = Vector3(0.0, 1.0, 0.0)
    assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
    assert y.cross(x) == Vector3(0.0, 0.0, -1.0)


def test_normalize_gives_unit_length():
    for v in [(3.0, 4.0, 0.0), (-1e-3, 2e-3, 5e-4), (1e6, -2e6, 3e6)]:
        n = Vector3(*v).normalize()
        assert n.length() == pytest.approx(1.0)


def test_normalize_zero_vector_stays_zero():
    z = Vector3(0.0, 0.0, 0.0)
    assert z.normalize() == Vector3(0.0, 0.0, 0.0)
    assert not any(math.isnan(c) for c in z)


def test_normalized_leaves_original():
    a = Vector3(0.0, 3.0, 0.0)
    n = a.normalized()
    assert n == Vector3(0.0, 1.0, 0.0)
    assert a.y == 3.0


def test_to_cube_coordinates_floors():
    assert Vector3(1.9, -0.1, 2.0).to_cube_coordinates() == (1, -1, 2)
    assert Vector3(-3.0, 0.0, -2.5).to_cube_coordinates() == (-3, 0, -3)


def test_is_finite():
    assert Vector3(1.0, 2.0, 3.0).is_finite()
    assert not Vector3(float("nan"), 0.0, 0.0).is_finite()


def test_sectorize():
    assert util.sectorize((3.5, 40.0, 15.9)) == (0, 0, 0)
    assert util.sectorize((-0.5, 0.0, 16.0)) == (-16, 0, 16)


def test_to_mat4_keeps_element_order():
    m = np.arange(16, dtype=float).reshape(4, 4)
    mat = util.to_mat4(m)
    assert tuple(mat) == tuple(float(v) for v in range(16))
