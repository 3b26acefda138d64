import casadi as ca
import numpy as np

from pyso3 import Dcm, Euler, Quat, EulerRep, QuaternionRep
from pyso3.so3 import convert, euler, quat

tol = 1e-9

e = ca.DM([0.1, 0.2, 0.3])


def test_to_dcm():
    phi, theta, psi = 0.1, 0.2, 0.3
    Rx = ca.DM([[1, 0, 0], [0, np.cos(phi), -np.sin(phi)], [0, np.sin(phi), np.cos(phi)]])
    Ry = ca.DM([[np.cos(theta), 0, np.sin(theta)], [0, 1, 0], [-np.sin(theta), 0, np.cos(theta)]])
    Rz = ca.DM([[np.cos(psi), -np.sin(psi), 0], [np.sin(psi), np.cos(psi), 0], [0, 0, 1]])
    assert float(ca.norm_fro(euler.to_dcm(e) - ca.mtimes(Rz, ca.mtimes(Ry, Rx)))) < tol


def test_from_dcm():
    assert float(ca.norm_2(euler.from_dcm(euler.to_dcm(e)) - e)) < tol
    assert float(ca.norm_2(Euler(Dcm(Euler(e))).get_rep_data() - e)) < tol


def test_to_quat():
    q = euler.to_quat(e)
    assert float(ca.norm_fro(quat.to_dcm(q) - euler.to_dcm(e))) < tol
    assert convert.route(EulerRep, QuaternionRep) == (euler.to_quat,)
    assert Quat(Euler(e)).is_approx(Quat(Dcm(Euler(e))))


def test_gimbal_lock():
    for theta in [np.pi / 2, -np.pi / 2]:
        e_lock = ca.DM([0.3, theta, 0.5])
        R = euler.to_dcm(e_lock)
        e_back = euler.from_dcm(R)
        assert float(e_back[0]) == 0
        assert float(ca.norm_fro(euler.to_dcm(e_back) - R)) < tol


def test_group():
    p = Euler(e)
    q = Euler([-0.4, 0.1, 2.0])
    assert (p * q).is_approx(Dcm(p) * Dcm(q))
    assert (p * p.get_inverse()).is_identity()
    assert Euler().get_rep_data().shape == (3, 1)
