import casadi as ca
import numpy as np
import pytest

from pyso3 import config, hat, vee, SO3Base

v = ca.DM([0.1, -0.2, 0.3])


def test_hat():
    X = hat(v)
    expected = np.array([[0, -0.3, -0.2], [0.3, 0, -0.1], [0.2, 0.1, 0]])
    assert np.array_equal(X.full(), expected)
    assert np.array_equal(X.full(), -X.T.full())


def test_vee_hat_exact():
    for w in ([0.1, -0.2, 0.3], [1e-12, 5, -7e3], [0, 0, 0]):
        w = ca.DM(w)
        assert np.array_equal(vee(hat(w)).full(), w.full())


def test_hat_vee_exact():
    M = ca.DM([[0, -3.5, 1.25], [3.5, 0, -2e-9], [-1.25, 2e-9, 0]])
    assert np.array_equal(hat(vee(M)).full(), M.full())


def test_array_like_input():
    assert np.array_equal(hat([1, 2, 3]).full(), hat(ca.DM([1, 2, 3])).full())
    assert np.array_equal(vee(np.eye(3)).full(), np.zeros((3, 1)))


def test_static_methods():
    assert np.array_equal(SO3Base.hat(v).full(), hat(v).full())
    assert np.array_equal(SO3Base.vee(hat(v)).full(), v.full())
    assert np.array_equal(SO3Base.ad(v).full(), hat(v).full())


def test_vee_non_skew_unchecked():
    M = ca.DM([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert np.array_equal(vee(M).full(), np.array([[8], [3], [4]]))


def test_vee_non_skew_checked(monkeypatch):
    monkeypatch.setattr(config, "check_preconditions", True)
    with pytest.raises(ValueError):
        vee(ca.DM([[1, 2, 3], [4, 5, 6], [7, 8, 9]]))
    assert np.array_equal(vee(hat(v)).full(), v.full())


def test_symbolic():
    w = ca.SX.sym("w", 3)
    X = hat(w)
    assert isinstance(X, ca.SX)
    f = ca.Function("f", [w], [vee(X)])
    assert np.array_equal(f(v).full(), v.full())


def test_shape():
    with pytest.raises(AssertionError):
        hat([1, 2])
    with pytest.raises(AssertionError):
        vee(ca.DM.eye(2))
