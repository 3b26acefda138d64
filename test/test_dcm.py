import casadi as ca
import numpy as np

from pyso3 import Dcm, Quat

tol = 1e-5  # tolerance

a = Dcm([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
b = Dcm([[0, -1, 0], [1, 0, 0], [0, 0, 1]])


def test_product():
    c = a * b
    assert c.get_rep_data().shape == (3, 3)
    assert c == b
    assert float(ca.norm_fro((b * b).get_rep_data() - ca.DM([[-1, 0, 0], [0, -1, 0], [0, 0, 1]]))) < tol


def test_log_exp():
    omega = ca.DM([0.1, 0.2, 0.3])
    assert float(ca.norm_fro(Dcm.exp(omega).log() - omega)) < tol


def test_invert():
    c = Dcm(b)
    c.invert()
    assert np.array_equal(c.get_rep_data().full(), b.get_rep_data().T.full())
    assert (c * b) == a


def test_canonical():
    assert Dcm.is_canonical()
    assert b.canonical() is b
    assert type(Quat(b).canonical()) is Dcm
    assert Quat(b).canonical().is_approx(b)


def test_random():
    R = np.array(Dcm.random(rng=0).get_rep_data().full())
    assert np.allclose(R.T @ R, np.eye(3))
    assert np.isclose(np.linalg.det(R), 1)
