import casadi as ca
import numpy as np
import pytest

from pyso3 import Dcm, Quat, AngleAxis, Euler, Mrp

classes = [Dcm, Quat, AngleAxis, Euler, Mrp]

tol = 1e-6

tangents = [
    [0, 0, 0],
    [1e-9, 0, 0],
    [1e-4, -2e-4, 3e-4],
    [0.1, 0.2, 0.3],
    [1, -2, 0.5],
    [0, 0, 3.0],
    [0, 3.1, 0],
    [-1.5, 1.5, 2.0],
]


def assert_close(a, b, atol=tol):
    np.testing.assert_allclose(np.array(ca.DM(a).full()), np.array(ca.DM(b).full()), rtol=0, atol=atol)


def test_quarter_turn_about_z():
    R = ca.DM([[0, -1, 0], [1, 0, 0], [0, 0, 1]])
    assert_close(Dcm(R).log(), [0, 0, np.pi / 2])
    assert_close(Dcm.exp([0, 0, np.pi / 2]).get_rep_data(), R)
    assert_close(Dcm.log(Dcm(R)), [0, 0, np.pi / 2])
    for cls in classes:
        assert_close(cls(Dcm(R)).log(), [0, 0, np.pi / 2])
        assert_close(cls.exp([0, 0, np.pi / 2]).to_rotation_matrix(), R)


@pytest.mark.parametrize("cls", classes)
def test_log_exp(cls):
    for v in tangents:
        assert_close(cls.exp(v).log(), v)


@pytest.mark.parametrize("cls", classes)
def test_exp_log(cls):
    for seed in range(10):
        p = cls.random(rng=seed)
        assert cls.exp(p.log()).is_approx(p)


@pytest.mark.parametrize("cls", classes)
def test_exp_matches_dcm(cls):
    for v in tangents:
        assert cls.exp(v).is_approx(Dcm.exp(v))


@pytest.mark.parametrize("cls", classes)
def test_full_turns_are_identity(cls):
    axis = np.array([1.0, 2.0, 3.0]) / np.sqrt(14)
    for k in [1, 2, -1, 3]:
        assert cls.exp(2 * np.pi * k * axis).is_identity()
    assert not cls.exp(np.pi * axis).is_identity()


def test_log_half_turn():
    assert_close(Dcm([[1, 0, 0], [0, -1, 0], [0, 0, -1]]).log(), [np.pi, 0, 0])
    assert_close(Dcm([[-1, 0, 0], [0, -1, 0], [0, 0, 1]]).log(), [0, 0, np.pi])
    assert_close(Quat([0, 0, 1, 0]).log(), [0, np.pi, 0])
    assert_close(Mrp([1, 0, 0]).log(), [np.pi, 0, 0])
    axis = np.array([-1.0, 2.0, 2.0]) / 3
    # v and -v are the same rotation at pi, the largest component is positive
    assert_close(Dcm(2 * np.outer(axis, axis) - np.eye(3)).log(), np.pi * axis)
    assert_close(Dcm(2 * np.outer(axis, axis) - np.eye(3)).log(), Dcm(2 * np.outer(-axis, -axis) - np.eye(3)).log())
    for cls in classes:
        assert Dcm.exp(cls.exp(np.pi * axis).log()).is_approx(Dcm.exp(np.pi * axis))


def test_log_principal_value():
    assert_close(Dcm.exp([0, 0, 1.5 * np.pi]).log(), [0, 0, -0.5 * np.pi])
    assert_close(Quat.exp([0, 0, 1.5 * np.pi]).log(), [0, 0, -0.5 * np.pi])
    assert_close(Mrp.exp([0, 0, 1.5 * np.pi]).log(), [0, 0, -0.5 * np.pi])
    assert_close(Dcm.exp([0, 2 * np.pi + 0.1, 0]).log(), [0, 0.1, 0])


def test_angle_axis_keeps_vector():
    v = AngleAxis.exp([0, 0, 1.5 * np.pi])
    assert_close(v.log(), [0, 0, 1.5 * np.pi])
    assert v.is_approx(AngleAxis([0, 0, -0.5 * np.pi]))
    assert float(v.angle()) == pytest.approx(1.5 * np.pi)
