# -*- coding: utf-8 -*-
import numpy as np
from wavemesh.math.vec2 import Vec2
from wavemesh.math.vec3 import Vec3
from wavemesh.math.mat3 import Mat3

def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert a.to_tuple() == (1.0, 2.0, 3.0)
    assert Vec3.from_np(np.array([1, 2, 3, 4])) == a

def test_vec2_ops():
    a = Vec2(1, 2)
    b = Vec2(0.5, 3)
    assert (a - b).to_tuple() == (0.5, -1.0)
    assert a.extend(0.0).tolist() == [1, 2, 0]

def test_mat3_from_cols():
    M = Mat3.from_cols([1, 2, 3], [4, 5, 6], [7, 8, 10])
    assert M.m[:, 0].tolist() == [1, 2, 3]
    assert M.transform([0, 1, 0]).tolist() == [4, 5, 6]

def test_mat3_invert():
    M = Mat3.from_cols([2, 0, 0], [0, 4, 0], [0, 0, 1])
    inv = M.invert()
    assert inv is not None
    assert np.allclose((M @ inv).m, np.eye(3))

def test_mat3_singular_invert_returns_none():
    # два одинаковых столбца – det == 0
    M = Mat3.from_cols([1, 1, 0], [1, 1, 0], [0, 0, 1])
    assert M.invert() is None
